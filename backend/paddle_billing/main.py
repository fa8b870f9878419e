import logging
from collections.abc import Mapping
from typing import Any

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from fastapi import Depends, FastAPI, HTTPException, Request, status
from starlette.formparsers import MultiPartException

from paddle_billing.core.config import get_settings
from paddle_billing.core.keys import load_public_key
from paddle_billing.errors import AuthenticationError, DecodeError, MalformedRequestError
from paddle_billing.middleware.body_size import BodySizeLimitMiddleware
from paddle_billing.webhooks.events import UnrecognizedEvent
from paddle_billing.webhooks.payload import (
    parse_form_body,
    validate_fulfillment_payload,
    validate_payload,
)

app = FastAPI(
    title="Paddle Webhook Receiver",
    description="Verifies and decodes Paddle webhook alerts",
    version="1.0.0",
)

settings = get_settings()

app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.max_body_size)

logger = logging.getLogger(__name__)


@app.on_event("startup")
async def startup():
    """Load the webhook public key. A missing or invalid key stops startup."""
    app.state.public_key = load_public_key(get_settings().public_key_path)


# ---------- dependencies ----------
def get_public_key(request: Request) -> RSAPublicKey:
    public_key = getattr(request.app.state, "public_key", None)
    if public_key is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Webhook verification not configured",
        )
    return public_key


async def read_form(request: Request) -> Mapping[str, Any]:
    # Urlencoded bodies go through parse_form_body so that invalid UTF-8 is
    # rejected here instead of being replaced by U+FFFD and failing the signature.
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.split(";")[0].strip().lower() == "application/x-www-form-urlencoded":
            return parse_form_body(await request.body())
        return await request.form()
    except (MalformedRequestError, MultiPartException, ValueError):
        raise HTTPException(status_code=400, detail="Malformed form body")


def _reject(e: Exception, path: str) -> HTTPException:
    # Field values never go to the log, only the failure class.
    if isinstance(e, AuthenticationError):
        logger.warning(f"Rejected webhook on {path}: invalid signature")
        return HTTPException(status_code=400, detail="Invalid Paddle signature")
    if isinstance(e, DecodeError):
        logger.warning(f"Rejected webhook on {path}: {e}")
        return HTTPException(status_code=422, detail=str(e))
    logger.warning(f"Rejected webhook on {path}: {e}")
    return HTTPException(status_code=400, detail=str(e))


@app.get("/health", include_in_schema=False)
async def health(request: Request):
    return {
        "status": "ok",
        "public_key_loaded": getattr(request.app.state, "public_key", None) is not None,
    }


# ---------- webhooks ----------
@app.post("/webhooks/paddle")
async def paddle_webhook(
    form: Mapping[str, Any] = Depends(read_form),
    public_key: RSAPublicKey = Depends(get_public_key),
):
    try:
        event = validate_payload(form, public_key)
    except (MalformedRequestError, AuthenticationError, DecodeError) as e:
        raise _reject(e, "/webhooks/paddle")

    if isinstance(event, UnrecognizedEvent):
        logger.info(f"Ignoring Paddle alert {event.alert_name!r}")
        return {"status": "ignored", "alert_name": event.alert_name}

    logger.info(f"Received Paddle alert {event.alert!r}")
    return {"status": "received", "alert_name": event.alert}


@app.post("/webhooks/paddle/fulfillment")
async def paddle_fulfillment_webhook(
    form: Mapping[str, Any] = Depends(read_form),
    public_key: RSAPublicKey = Depends(get_public_key),
):
    try:
        event = validate_fulfillment_payload(form, public_key)
    except (MalformedRequestError, AuthenticationError, DecodeError) as e:
        raise _reject(e, "/webhooks/paddle/fulfillment")

    logger.info("Received Paddle fulfillment webhook")
    return {"status": "received", "quantity": event.quantity}
