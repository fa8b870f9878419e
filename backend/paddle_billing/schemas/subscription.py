from pydantic import BaseModel

from paddle_billing.schemas.common import (
    Envelope,
    Payment,
    Price,
    QueryOptions,
    VendorOptions,
)


# https://developer.paddle.com/api-reference/checkout-api/prices/getprices
class SubscriptionPricesOptions(QueryOptions):
    product_ids: str | None = None
    customer_country: str | None = None
    customer_ip: str | None = None
    coupons: str | None = None


class SubscriptionTerms(BaseModel):
    frequency: int = 0
    interval: str = ""
    list_price: Price = Price()
    price: Price = Price()
    trial_days: int = 0


class SubscriptionPricesProduct(BaseModel):
    currency: str = ""
    list_price: Price = Price()
    price: Price = Price()
    product_id: int = 0
    product_title: str = ""
    subscription: SubscriptionTerms = SubscriptionTerms()
    vendor_set_prices_included_tax: bool = False


class SubscriptionPrices(BaseModel):
    customer_country: str = ""
    products: list[SubscriptionPricesProduct] = []


class SubscriptionPricesResponse(Envelope):
    response: SubscriptionPrices = SubscriptionPrices()


# https://developer.paddle.com/api-reference/e33e0a714a05d-list-users
class SubscriptionUsersOptions(VendorOptions):
    subscription_id: str | None = None
    plan_id: str | None = None
    state: str | None = None
    results_per_page: str | None = None  # max 200
    page: str | None = None


class SubscriptionUser(BaseModel):
    subscription_id: int = 0
    plan_id: int = 0
    user_id: int = 0
    user_email: str = ""
    marketing_consent: bool = False
    update_url: str = ""
    cancel_url: str = ""
    state: str = ""
    signup_date: str = ""
    last_payment: Payment = Payment()
    next_payment: Payment = Payment()


class SubscriptionUsersResponse(Envelope):
    response: list[SubscriptionUser] = []


# https://paddle.com/docs/subscription-update-api/
class SubscriptionUpdateOptions(VendorOptions):
    subscription_id: int  # required
    quantity: int | None = None
    recurring_price: str | None = None
    currency: str | None = None
    bill_immediately: bool | None = None
    plan_id: int | None = None
    prorate: bool | None = None
    keep_modifiers: bool | None = None


class SubscriptionUpdate(BaseModel):
    subscription_id: int = 0
    plan_id: int = 0
    user_id: int = 0
    next_payment: Payment = Payment()


class SubscriptionUpdateResponse(Envelope):
    response: SubscriptionUpdate = SubscriptionUpdate()
