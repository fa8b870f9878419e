import logging
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from paddle_billing.errors import ConfigurationError

logger = logging.getLogger(__name__)


def parse_public_key(pem_data: bytes) -> RSAPublicKey:
    """Parse a PEM encoded SubjectPublicKeyInfo block; only RSA keys are accepted."""
    if b"-----BEGIN" not in pem_data:
        raise ConfigurationError("failed to parse PEM block containing the public key")

    try:
        key = serialization.load_pem_public_key(pem_data)
    except (ValueError, TypeError) as e:
        raise ConfigurationError(f"failed to parse DER encoded public key: {e}") from e

    if not isinstance(key, RSAPublicKey):
        raise ConfigurationError("unknown type of public key")
    return key


def load_public_key(path: str | Path | None) -> RSAPublicKey:
    """Load the Paddle webhook public key from ``path``.

    Called once at startup; the returned key is immutable and is passed to
    every verification call.
    """
    if not path:
        raise ConfigurationError("no public key path configured")

    try:
        pem_data = Path(path).read_bytes()
    except OSError as e:
        raise ConfigurationError(f"open {path}: {e.strerror or e}") from e

    key = parse_public_key(pem_data)
    logger.info(f"Loaded Paddle RSA public key ({key.key_size} bits) from {path}")
    return key
