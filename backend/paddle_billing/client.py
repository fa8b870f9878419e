import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from paddle_billing.core.config import Settings, get_settings
from paddle_billing.errors import APIError, TransportError
from paddle_billing.services.product import ProductService
from paddle_billing.services.subscription import SubscriptionService

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _strip_query(url: httpx.URL) -> str:
    # The query string carries vendor_auth_code, keep it out of logs and errors.
    return str(url).split("?", 1)[0]


class Client:
    """Synchronous client for the Paddle API.

    One request per call, no retries. Pass your own ``httpx.Client`` to
    control transports, proxies or timeouts.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
        base_url: str | None = None,
    ):
        self.settings = settings or get_settings()
        self.http = http_client or httpx.Client(timeout=self.settings.timeout)
        # base_url should always be specified with a trailing slash.
        self.base_url = httpx.URL(base_url or self.settings.base_url)

        self.product = ProductService(self)
        self.subscription = SubscriptionService(self)

    @classmethod
    def checkout(
        cls, settings: Settings | None = None, http_client: httpx.Client | None = None
    ) -> "Client":
        """A client for the checkout API (prices), which lives on its own host."""
        settings = settings or get_settings()
        return cls(settings, http_client, base_url=settings.checkout_base_url)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def new_request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> httpx.Request:
        """
        Build a request for ``path``, resolved relative to the base URL.

        Paths should be given without a leading slash. ``params`` become the
        query string; ``body``, if given, is JSON encoded.
        """
        if not self.base_url.path.endswith("/"):
            raise ValueError(
                f"base_url must have a trailing slash, but {str(self.base_url)!r} does not"
            )
        url = self.base_url.join(path)

        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body
        return self.http.build_request(method, url, params=params or None, **kwargs)

    def do(self, request: httpx.Request, model: type[ResponseT]) -> ResponseT:
        """Send ``request`` and decode the JSON envelope into ``model``.

        Raises APIError when Paddle reports ``success: false`` or the body
        can't be decoded, TransportError when the request never completed.
        """
        url = _strip_query(request.url)
        logger.info(f"Paddle API request: {request.method} {url}")

        try:
            response = self.http.send(request)
        except httpx.HTTPError as e:
            logger.error(f"Paddle API request failed: {request.method} {url}: {e}")
            raise TransportError(f"{request.method} {url}: {e}") from e

        try:
            data = response.json()
        except ValueError:
            raise APIError(
                request.method, url, response.status_code, message="invalid JSON response"
            ) from None

        check_error(request.method, url, response.status_code, data)

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise APIError(
                request.method,
                url,
                response.status_code,
                message=f"unexpected response shape ({e.error_count()} errors)",
            ) from e


def check_error(method: str, url: str, status_code: int, data: Any) -> None:
    """Every Paddle response has a ``success`` field; if it isn't true, raise."""
    if isinstance(data, dict) and data.get("success") is True:
        return

    error = data.get("error") if isinstance(data, dict) else None
    error = error if isinstance(error, dict) else {}
    exc = APIError(
        method,
        url,
        status_code,
        code=int(error.get("code") or 0),
        message=str(error.get("message") or ""),
    )
    logger.warning(f"Paddle API error: {exc}")
    raise exc
