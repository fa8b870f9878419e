import re
from datetime import date
from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, field_validator


_DIGITS = re.compile(r"[0-9]+")
_LEADING_DATE = re.compile(r"(\d+)-(\d+)-(\d+)")


class WebhookEventBase(BaseModel):
    """A decoded webhook. Fields absent from the form are left empty."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    alert: ClassVar[str] = ""


# https://developer.paddle.com/webhook-reference/product-fulfillment/fulfillment-webhook
class FulfillmentWebhook(WebhookEventBase):
    event_time: str = ""
    quantity: int = 0
    passthrough: str = ""

    @field_validator("quantity", mode="before")
    @classmethod
    def parse_quantity(cls, v):
        if not isinstance(v, str):
            return v
        if not v:
            return 0
        # Plain digits only, int() would also take " 3 ", "+3" and "1_000".
        if not _DIGITS.fullmatch(v):
            raise ValueError("quantity must be a non-negative integer")
        return int(v)


# https://paddle.com/docs/subscriptions-event-reference/#subscription_created
class SubscriptionCreated(WebhookEventBase):
    alert: ClassVar[str] = "subscription_created"

    subscription_id: str = ""
    status: str = ""
    email: str = ""
    marketing_consent: str = ""
    subscription_plan_id: str = ""
    next_bill_date: str = ""
    passthrough: str = ""
    update_url: str = ""
    user_id: str = ""
    cancel_url: str = ""
    currency: str = ""
    checkout_id: str = ""
    quantity: str = ""
    unit_price: str = ""
    event_time: str = ""


# https://paddle.com/docs/subscriptions-event-reference/#subscription_cancelled
class SubscriptionCancelled(WebhookEventBase):
    alert: ClassVar[str] = "subscription_cancelled"

    subscription_id: str = ""
    status: str = ""
    email: str = ""
    marketing_consent: str = ""
    subscription_plan_id: str = ""
    cancellation_effective_date: str = ""
    passthrough: str = ""
    user_id: str = ""
    checkout_id: str = ""
    quantity: str = ""
    unit_price: str = ""
    event_time: str = ""
    currency: str = ""

    def cancellation_effective_date_value(self) -> date | None:
        """The cancellation date (``YYYY-MM-DD``), or None if blank or invalid.

        Anything after the date, such as a time of day, is ignored.
        """
        m = _LEADING_DATE.match(self.cancellation_effective_date)
        if m is None:
            return None
        try:
            return date(*(int(p) for p in m.groups()))
        except ValueError:
            return None


# https://paddle.com/docs/subscriptions-event-reference/#subscription_payment_succeeded
class SubscriptionPaymentSucceeded(WebhookEventBase):
    alert: ClassVar[str] = "subscription_payment_succeeded"

    checkout_id: str = ""
    currency: str = ""
    email: str = ""
    event_time: str = ""
    marketing_consent: str = ""
    next_bill_date: str = ""
    passthrough: str = ""
    quantity: str = ""
    status: str = ""
    subscription_id: str = ""
    subscription_plan_id: str = ""
    unit_price: str = ""
    user_id: str = ""


class SubscriptionUpdated(WebhookEventBase):
    alert: ClassVar[str] = "subscription_updated"

    alert_id: str = ""
    alert_name: str = ""
    cancel_url: str = ""
    checkout_id: str = ""
    currency: str = ""
    custom_date: str = ""
    event_time: str = ""
    marketing_consent: str = ""
    new_price: str = ""
    new_quantity: str = ""
    new_unit_price: str = ""
    new_bill_date: str = ""
    old_next_bill_date: str = ""
    old_price: str = ""
    old_quantity: str = ""
    old_status: str = ""
    old_subscription_plan_id: str = ""
    old_unit_price: str = ""
    status: str = ""
    subscription_id: str = ""
    subscription_plan_id: str = ""
    update_url: str = ""
    user_id: str = ""
    paused_at: str = ""
    paused_from: str = ""
    paused_reason: str = ""


class SubscriptionPaymentFailed(WebhookEventBase):
    alert: ClassVar[str] = "subscription_payment_failed"

    alert_id: str = ""
    alert_name: str = ""
    amount: str = ""
    attempt_number: str = ""
    cancel_url: str = ""
    checkout_id: str = ""
    currency: str = ""
    custom_data: str = ""
    email: str = ""
    event_time: str = ""
    instalments: str = ""
    marketing_consent: str = ""
    next_retry_date: str = ""
    order_id: str = ""
    user_id: str = ""
    quantity: str = ""
    status: str = ""
    subscription_id: str = ""
    subscription_payment_id: str = ""
    subscription_plan_id: str = ""
    unit_price: str = ""
    update_url: str = ""


class UnrecognizedEvent(BaseModel):
    """An authenticated webhook whose alert_name has no schema here.

    Not an error: Paddle may add alerts before this library knows them.
    """

    model_config = ConfigDict(frozen=True)

    alert_name: str = ""


SUBSCRIPTION_EVENTS: dict[str, type[WebhookEventBase]] = {
    cls.alert: cls
    for cls in (
        SubscriptionCreated,
        SubscriptionCancelled,
        SubscriptionPaymentSucceeded,
        SubscriptionUpdated,
        SubscriptionPaymentFailed,
    )
}

WebhookEvent = Union[
    SubscriptionCreated,
    SubscriptionCancelled,
    SubscriptionPaymentSucceeded,
    SubscriptionUpdated,
    SubscriptionPaymentFailed,
    UnrecognizedEvent,
]
