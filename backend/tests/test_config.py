from paddle_billing.core.config import (
    CHECKOUT_BASE_URL,
    VENDORS_BASE_URL,
    Settings,
)


def test_settings_from_environment(settings, public_key_path):
    assert settings.vendor_id == 1234
    assert settings.api_key == "test_api_key"
    assert settings.product_id == 5678
    assert settings.public_key_path == str(public_key_path)
    assert settings.max_body_size == 65536
    assert settings.has_vendor_credentials


def test_defaults(monkeypatch):
    for name in ("VENDOR_ID", "API_KEY", "PRODUCT_ID", "PUBLIC_KEY_PATH", "MAX_BODY_SIZE"):
        monkeypatch.delenv(f"PADDLE_{name}", raising=False)

    settings = Settings(_env_file=None)

    assert settings.base_url == VENDORS_BASE_URL
    assert settings.checkout_base_url == CHECKOUT_BASE_URL
    assert settings.public_key_path is None
    assert settings.max_body_size == 1_048_576
    assert not settings.has_vendor_credentials
