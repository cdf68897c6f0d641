"""FastAPI integration for receiving SingleKey webhooks.

Example::

    handler = WebhookHandler(secret=settings.singlekey_webhook_secret)
    verified_webhook = webhook_dependency(handler)

    @app.post("/webhooks/singlekey")
    async def receive(event: WebhookEvent = Depends(verified_webhook)):
        await process(event)
        return {"received": True}
"""

from typing import Awaitable, Callable

from fastapi import HTTPException, Request, status

from singlekey_sdk.errors import WebhookError
from singlekey_sdk.webhook import SIGNATURE_HEADER, TIMESTAMP_HEADER, WebhookEvent, WebhookHandler


def webhook_dependency(handler: WebhookHandler) -> Callable[[Request], Awaitable[WebhookEvent]]:
    """
    Build a dependency that verifies and decodes the request body.

    Responds 400 when signature headers are missing or the payload is
    malformed, and 401 when verification fails.
    """

    async def verified_webhook(request: Request) -> WebhookEvent:
        # Raw bytes, never the re-serialized JSON
        raw_body = await request.body()
        signature = request.headers.get(SIGNATURE_HEADER)
        timestamp = request.headers.get(TIMESTAMP_HEADER)

        if not signature or not timestamp:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Missing webhook headers",
            )

        try:
            return handler.parse_webhook(raw_body, signature, timestamp)
        except WebhookError as e:
            raise HTTPException(status_code=e.http_status, detail=e.message) from e

    return verified_webhook
