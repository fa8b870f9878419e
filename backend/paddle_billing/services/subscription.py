from paddle_billing.schemas.subscription import (
    SubscriptionPricesOptions,
    SubscriptionPricesResponse,
    SubscriptionUpdateOptions,
    SubscriptionUpdateResponse,
    SubscriptionUsersOptions,
    SubscriptionUsersResponse,
)
from paddle_billing.services.base import Service


class SubscriptionService(Service):
    def prices(self, options: SubscriptionPricesOptions) -> SubscriptionPricesResponse:
        # Checkout API: use a client built with Client.checkout().
        req = self.client.new_request("GET", "prices", params=options.to_params())
        return self.client.do(req, SubscriptionPricesResponse)

    def users(self, options: SubscriptionUsersOptions) -> SubscriptionUsersResponse:
        options = self.with_vendor_auth(options)
        req = self.client.new_request(
            "GET", "subscription/users", params=options.to_params()
        )
        return self.client.do(req, SubscriptionUsersResponse)

    def update(self, options: SubscriptionUpdateOptions) -> SubscriptionUpdateResponse:
        options = self.with_vendor_auth(options)
        req = self.client.new_request(
            "GET", "subscription/users/update", params=options.to_params()
        )
        return self.client.do(req, SubscriptionUpdateResponse)
