from typing import TYPE_CHECKING, TypeVar

from paddle_billing.errors import ConfigurationError
from paddle_billing.schemas.common import VendorOptions

if TYPE_CHECKING:
    from paddle_billing.client import Client

VendorOptionsT = TypeVar("VendorOptionsT", bound=VendorOptions)


class Service:
    def __init__(self, client: "Client"):
        self.client = client

    def with_vendor_auth(self, options: VendorOptionsT) -> VendorOptionsT:
        """Copy ``options`` with vendor_id and vendor_auth_code from settings."""
        settings = self.client.settings
        if not settings.has_vendor_credentials:
            raise ConfigurationError("PADDLE_VENDOR_ID and PADDLE_API_KEY must be set")
        return options.model_copy(
            update={"vendor_id": settings.vendor_id, "vendor_auth_code": settings.api_key}
        )
