"""FastAPI application for receiving GitHub webhooks."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from src.receiver.config import ReceiverSettings
from src.receiver.processor import EventProcessor, create_event_processor
from src.webhooks.delivery import Delivery
from src.webhooks.errors import (
    InvalidSignatureError,
    MalformedPayloadError,
    MalformedSignatureHeaderError,
    MissingPayloadFieldError,
    MissingSignatureError,
    PayloadTooLargeError,
    UnknownEventTypeError,
    UnsupportedContentTypeError,
)
from src.webhooks.registry import EventRegistry, default_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global settings, registry and processor
settings = ReceiverSettings()
registry: EventRegistry = default_registry()
event_processor: EventProcessor = create_event_processor()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    logger.info("Starting webhook receiver (%d event types)", len(registry))

    if not settings.github_webhook_secret:
        if settings.allow_unsigned_deliveries:
            logger.warning(
                "No webhook secret configured and unsigned deliveries are allowed. "
                "Do not run this configuration in production."
            )
        else:
            logger.warning("No webhook secret configured, unsigned deliveries will be rejected")

    yield

    logger.info("Shutting down webhook receiver")


app = FastAPI(
    title="GitHub Webhook Receiver",
    description="Verifies GitHub webhook deliveries and dispatches typed events",
    version="0.1.0",
    lifespan=lifespan,
)


async def _read_body(request: Request, limit: int) -> bytes:
    """Read the request body, refusing to buffer more than limit bytes."""
    content_length = request.headers.get("content-length", "")
    if content_length.isdigit() and int(content_length) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="Payload too large",
        )

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail="Payload too large",
            )
    return bytes(body)


def _verify(delivery: Delivery) -> bytes:
    try:
        return delivery.verify(
            settings.github_webhook_secret,
            allow_unsigned=settings.allow_unsigned_deliveries,
            max_body_size=settings.max_body_bytes,
        )
    except (MissingSignatureError, MalformedSignatureHeaderError, InvalidSignatureError) as e:
        logger.warning(
            "Invalid webhook signature for delivery %s: %s", delivery.delivery_id, str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid signature",
        ) from None
    except UnsupportedContentTypeError as e:
        logger.warning("Rejected delivery %s: %s", delivery.delivery_id, str(e))
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Unsupported content type",
        ) from None
    except PayloadTooLargeError:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="Payload too large",
        ) from None
    except (MissingPayloadFieldError, MalformedPayloadError) as e:
        logger.error("Failed to extract webhook payload: %s", str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid payload",
        ) from None


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/event-types")
async def list_event_types() -> dict[str, list[str]]:
    """List the event types this receiver can decode."""
    return {"event_types": registry.event_types()}


@app.post("/webhook")
async def receive_webhook(request: Request) -> JSONResponse:
    """Receive and process GitHub webhooks.

    This endpoint:
    1. Verifies the webhook signature over the raw body
    2. Decodes the payload into the event model for X-GitHub-Event
    3. Dispatches the event to the registered handlers
    """
    body = await _read_body(request, settings.max_body_bytes)
    delivery = Delivery.from_request(request.headers, body)
    payload = _verify(delivery)

    event_type = delivery.event_type or "unknown"
    logger.info(
        "Received webhook: event=%s, delivery=%s",
        event_type,
        delivery.delivery_id or "unknown",
    )

    try:
        event = registry.decode(delivery.event_type, payload)
    except UnknownEventTypeError:
        logger.info("Ignoring unknown event type: %s", event_type)
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"message": "Event type not processed", "event": event_type},
        )
    except MalformedPayloadError as e:
        logger.error("Failed to parse webhook payload: %s", str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON payload",
        ) from None

    if not event_processor.process(delivery, event):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process event",
        )

    return JSONResponse(
        status_code=status.HTTP_202_ACCEPTED,
        content={
            "message": "Event received and processed",
            "event": event_type,
            "delivery": delivery.delivery_id,
        },
    )


def create_app() -> FastAPI:
    """Create the FastAPI application.

    This factory function is useful for testing.
    """
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.receiver.app:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
