from paddle_billing.schemas.product import (
    ProductGeneratePayLinkOptions,
    ProductPayLinkResponse,
)
from paddle_billing.services.base import Service


class ProductService(Service):
    def generate_pay_link(
        self, options: ProductGeneratePayLinkOptions
    ) -> ProductPayLinkResponse:
        """Generate a pay link for the configured product (PADDLE_PRODUCT_ID)."""
        options = self.with_vendor_auth(options).model_copy(
            update={"product_id": self.client.settings.product_id or None}
        )
        return self._generate(options)

    def generate_pay_link_custom(
        self, options: ProductGeneratePayLinkOptions
    ) -> ProductPayLinkResponse:
        """Generate a pay link from ``options`` alone, e.g. a custom title and prices."""
        return self._generate(self.with_vendor_auth(options))

    def _generate(self, options: ProductGeneratePayLinkOptions) -> ProductPayLinkResponse:
        req = self.client.new_request(
            "POST", "product/generate_pay_link", params=options.to_params()
        )
        return self.client.do(req, ProductPayLinkResponse)
