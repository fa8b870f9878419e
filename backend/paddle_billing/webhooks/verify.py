import base64
import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from paddle_billing.errors import AuthenticationError, MalformedRequestError


def decode_signature(value: str) -> bytes:
    """Base64 decode a ``p_signature`` value (standard alphabet, padded)."""
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedRequestError("p_signature is not valid base64") from e


def verify(canonical: bytes, signature: bytes, public_key: RSAPublicKey) -> None:
    """
    Raise AuthenticationError unless ``signature`` is an RSA PKCS#1 v1.5
    signature over the SHA-1 digest of ``canonical``.
    """
    if not isinstance(public_key, RSAPublicKey):
        raise AuthenticationError()

    try:
        public_key.verify(signature, canonical, padding.PKCS1v15(), hashes.SHA1())
    except (InvalidSignature, ValueError, TypeError):
        raise AuthenticationError() from None
