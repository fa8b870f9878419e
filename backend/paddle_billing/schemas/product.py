from pydantic import BaseModel, Field

from paddle_billing.schemas.common import Envelope, VendorOptions


class ProductGeneratePayLinkOptions(VendorOptions):
    # https://paddle.com/docs/api-custom-checkout/
    product_id: int | None = None
    title: str | None = None
    webhook_url: str | None = None
    prices: list[str] | None = Field(default=None, alias="prices[]")
    locale: str | None = None
    recurring_prices: list[str] | None = None
    trial_days: int | None = None
    custom_message: str | None = None
    coupon_code: str | None = None
    image_url: str | None = None
    return_url: str | None = None
    quantity_variable: int | None = None
    quantity: int | None = None
    expires: str | None = None
    affiliates: str | None = None
    recurring_affiliate_limit: str | None = None
    marketing_consent: int | None = None
    customer_email: str | None = None
    customer_country: str | None = None
    customer_postcode: str | None = None
    vat_code: str | None = None
    passthrough: str | None = None


class ProductPayLink(BaseModel):
    url: str = ""


class ProductPayLinkResponse(Envelope):
    response: ProductPayLink = ProductPayLink()
