import base64
import logging
import os
import tempfile
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from fastapi.testclient import TestClient

# Key pair standing in for Paddle's; the public half is written where the
# receiver expects to find it.
_private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
_key_dir = Path(tempfile.mkdtemp(prefix="paddle-test-keys-"))
_public_key_path = _key_dir / "paddle_public_key.pem"
_public_key_path.write_bytes(
    _private_key.public_key().public_bytes(
        serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo
    )
)

# Set test environment variables
os.environ.update(
    {
        "PADDLE_VENDOR_ID": "1234",
        "PADDLE_API_KEY": "test_api_key",
        "PADDLE_PRODUCT_ID": "5678",
        "PADDLE_PUBLIC_KEY_PATH": str(_public_key_path),
        "PADDLE_MAX_BODY_SIZE": "65536",
    }
)

# Import app modules after setting environment variables
from paddle_billing.core.config import get_settings
from paddle_billing.webhooks import phpserialize

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def private_key():
    return _private_key


@pytest.fixture(scope="session")
def public_key():
    return _private_key.public_key()


@pytest.fixture(scope="session")
def public_key_path() -> Path:
    return _public_key_path


@pytest.fixture(scope="session")
def other_public_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048).public_key()


@pytest.fixture(scope="session")
def sign(private_key):
    """Return a function signing a field set the way Paddle does."""

    def _sign(fields: dict[str, str]) -> str:
        sig = private_key.sign(
            phpserialize.encode(fields), padding.PKCS1v15(), hashes.SHA1()
        )
        return base64.b64encode(sig).decode("ascii")

    return _sign


@pytest.fixture(scope="session")
def signed_form(sign):
    """Return a function producing ``fields`` plus a valid p_signature."""

    def _signed_form(fields: dict[str, str]) -> dict[str, str]:
        return {**fields, "p_signature": sign(fields)}

    return _signed_form


@pytest.fixture
def subscription_created_fields() -> dict[str, str]:
    return {
        "alert_id": "1730583",
        "alert_name": "subscription_created",
        "cancel_url": "https://checkout.paddle.com/subscription/cancel?user=4&subscription=7",
        "checkout_id": "6-b8e6fe4b30a5e61-73b4f8b1a5",
        "currency": "EUR",
        "email": "kassulke.ariane@example.com",
        "event_time": "2021-05-11 12:34:56",
        "marketing_consent": "1",
        "next_bill_date": "2021-06-11",
        "passthrough": "{\"account\": 42}",
        "quantity": "3",
        "status": "active",
        "subscription_id": "7",
        "subscription_plan_id": "9",
        "unit_price": "9.99",
        "update_url": "https://checkout.paddle.com/subscription/update?user=4&subscription=7",
        "user_id": "4",
    }


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def client():
    from paddle_billing.main import app

    with TestClient(app) as test_client:
        logger.info("Test client created")
        yield test_client
    app.dependency_overrides.clear()
