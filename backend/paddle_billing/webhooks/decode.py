from collections.abc import Mapping

from pydantic import ValidationError

from paddle_billing.errors import DecodeError
from paddle_billing.webhooks.events import (
    SUBSCRIPTION_EVENTS,
    FulfillmentWebhook,
    UnrecognizedEvent,
    WebhookEvent,
    WebhookEventBase,
)


def _build(model: type[WebhookEventBase], fields: Mapping[str, str]):
    try:
        return model.model_validate(dict(fields))
    except ValidationError as e:
        # Only report which fields failed, values may be customer data.
        bad = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise DecodeError(f"{model.__name__}: invalid value for {bad}") from None


def decode(fields: Mapping[str, str], discriminator: str) -> WebhookEvent:
    """Map ``fields`` onto the record registered for ``discriminator``.

    Unknown discriminators yield UnrecognizedEvent rather than an error.
    """
    model = SUBSCRIPTION_EVENTS.get(discriminator)
    if model is None:
        return UnrecognizedEvent(alert_name=discriminator)
    return _build(model, fields)


def decode_fulfillment(fields: Mapping[str, str]) -> FulfillmentWebhook:
    # The fulfillment webhook carries no alert_name.
    return _build(FulfillmentWebhook, fields)
