# services/webhook.py
import os
import logging
from datetime import datetime, timezone
from typing import Dict, Optional

import httpx

from models.booking import BookingRequest
from services.errors import SubmissionError

logger = logging.getLogger(__name__)

BOOKING_WEBHOOK_URL = os.getenv("BOOKING_WEBHOOK_URL")
WEBHOOK_NOT_CONFIGURED_MESSAGE = "Booking webhook URL is not configured"


def _iso_timestamp(moment: datetime) -> str:
    """2025-01-31T12:00:00.123Z — тот же вид, что и Date.toISOString()"""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_payload(booking: BookingRequest, now: Optional[datetime] = None) -> Dict:
    """
    Формируем JSON под webhook: все ключи присутствуют всегда,
    пустые необязательные поля отправляем пустой строкой.
    """
    return {
        "name": booking.name,
        "businessName": booking.business_name,
        "businessLink": booking.business_link,
        "email": booking.email or "",
        "phoneNumber": booking.phone_number or "",
        "industry": booking.industry,
        "targetAudience": booking.target_audience or "",
        "keyMessage": booking.key_message or "",
        "visualReferences": booking.visual_references or "",
        "timestamp": _iso_timestamp(now or datetime.now(timezone.utc)),
    }


async def _post(client: httpx.AsyncClient, url: str, payload: Dict) -> None:
    try:
        resp = await client.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
    except (httpx.RequestError, httpx.InvalidURL) as e:
        # ответа нет: сеть, протокол или битый URL
        logger.error("webhook_network_error", extra={"error": str(e)})
        raise SubmissionError(network_failure=True, message=str(e) or None) from e

    if not resp.is_success:
        body = resp.text
        logger.error("webhook_error", extra={"status": resp.status_code, "body": body})
        raise SubmissionError(status=resp.status_code, body=body)

    logger.info("webhook_ok", extra={"status": resp.status_code})


async def submit_booking(
    booking: BookingRequest,
    *,
    url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> None:
    """
    Один POST в webhook, без ретраев.
    Успех — любой 2xx, тело ответа не разбираем.
    Любой другой исход — SubmissionError.
    """
    url = url if url is not None else BOOKING_WEBHOOK_URL
    if not url:
        logger.error("BOOKING_WEBHOOK_URL not set — booking not sent")
        raise SubmissionError(message=WEBHOOK_NOT_CONFIGURED_MESSAGE)

    payload = build_payload(booking)
    if client is not None:
        await _post(client, url, payload)
        return

    async with httpx.AsyncClient(follow_redirects=True) as owned_client:
        await _post(owned_client, url, payload)
