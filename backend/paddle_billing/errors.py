class PaddleError(Exception):
    pass


class ConfigurationError(PaddleError):
    """Invalid or missing configuration: key material, vendor credentials."""


class MalformedRequestError(PaddleError):
    """The webhook request could not be read: bad form body, bad or missing p_signature."""


class AuthenticationError(PaddleError):
    """The webhook signature does not match its fields.

    Always carries the same message whatever went wrong inside the verifier.
    """

    def __init__(self, message: str = "invalid webhook signature"):
        super().__init__(message)


class DecodeError(PaddleError):
    """An authenticated payload has a typed field that does not parse."""


class TransportError(PaddleError):
    pass


class APIError(PaddleError):
    """Paddle answered with ``success: false`` or an unreadable envelope.

    Every Paddle response carries a ``success`` field; when it isn't true the
    ``error`` object holds a numeric code and a message.
    """

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        code: int = 0,
        message: str = "",
    ):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.code = code
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f'{self.method} {self.url}: StatusCode: {self.status_code} '
            f'Code: {self.code} Message: "{self.message}"'
        )
