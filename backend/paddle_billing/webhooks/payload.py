"""Webhook authentication pipeline.

https://paddle.com/docs/reference-verifying-webhooks/

form fields -> drop p_signature -> phpserialize -> RSA/SHA-1 verify -> decode.
Every step raises on failure; nothing is returned for a request that did not
authenticate.
"""
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import parse_qsl

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from paddle_billing.errors import MalformedRequestError
from paddle_billing.webhooks import phpserialize
from paddle_billing.webhooks.decode import decode, decode_fulfillment
from paddle_billing.webhooks.events import FulfillmentWebhook, WebhookEvent
from paddle_billing.webhooks.verify import decode_signature, verify

SIGNATURE_FIELD = "p_signature"
DISCRIMINATOR_FIELD = "alert_name"


def _first_values(items: Iterable[tuple[str, Any]]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for key, value in items:
        if isinstance(value, (list, tuple)):
            value = value[0] if value else ""
        if not isinstance(value, str):
            raise MalformedRequestError(f"form field {key!r} is not a string")
        try:
            key.encode("utf-8")
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise MalformedRequestError("form field is not valid UTF-8") from None
        # Paddle signs one value per key; repeated keys keep the first one.
        fields.setdefault(key, value)
    return fields


def reduce_form(form: Mapping[str, Any]) -> dict[str, str]:
    """Flatten a form to one string value per key.

    Accepts a plain mapping (values may be lists) or a multi-dict such as
    Starlette's FormData, whose plain item access returns the last value.
    """
    if hasattr(form, "multi_items"):
        return _first_values(form.multi_items())
    return _first_values(form.items())


def parse_form_body(body: bytes) -> dict[str, str]:
    """Parse a raw application/x-www-form-urlencoded body."""
    try:
        pairs = parse_qsl(body.decode("utf-8"), keep_blank_values=True, errors="strict")
    except ValueError as e:
        raise MalformedRequestError("form body cannot be parsed") from e
    return _first_values(pairs)


def authenticate(form: Mapping[str, Any], public_key: RSAPublicKey) -> dict[str, str]:
    """Verify ``form`` and return its fields without ``p_signature``."""
    fields = reduce_form(form)

    p_signature = fields.pop(SIGNATURE_FIELD, "")
    if not p_signature:
        raise MalformedRequestError(f"missing {SIGNATURE_FIELD}")
    signature = decode_signature(p_signature)

    verify(phpserialize.encode(fields), signature, public_key)
    return fields


def validate_payload(form: Mapping[str, Any], public_key: RSAPublicKey) -> WebhookEvent:
    fields = authenticate(form, public_key)
    return decode(fields, fields.get(DISCRIMINATOR_FIELD, ""))


def validate_fulfillment_payload(
    form: Mapping[str, Any], public_key: RSAPublicKey
) -> FulfillmentWebhook:
    # Fulfillment webhooks have no alert_name, so they get their own endpoint.
    fields = authenticate(form, public_key)
    return decode_fulfillment(fields)
