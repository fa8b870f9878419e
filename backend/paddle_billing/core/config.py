from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

VENDORS_BASE_URL = "https://vendors.paddle.com/api/2.0/"
CHECKOUT_BASE_URL = "https://checkout.paddle.com/api/2.0/"


class Settings(BaseSettings):
    vendor_id: int = 0
    api_key: str = ""

    # checkout
    secret_key: str = ""
    product_id: int = 0

    # webhook verification
    public_key_path: str | None = None

    base_url: str = VENDORS_BASE_URL
    checkout_base_url: str = CHECKOUT_BASE_URL
    timeout: float = 10.0
    max_body_size: int = 1_048_576  # 1 MiB

    model_config = SettingsConfigDict(
        env_prefix="PADDLE_", env_file=".env", extra="ignore"
    )

    @property
    def has_vendor_credentials(self) -> bool:
        return bool(self.vendor_id and self.api_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
