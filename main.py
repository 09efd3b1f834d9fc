# main.py
from dotenv import load_dotenv
load_dotenv()

# ── logging ──────────────────────────────────────────────────────────────────
import logging
from services.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

# ── app imports ──────────────────────────────────────────────────────────────
import os
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from services.errors import SUBMISSION_FALLBACK_MESSAGE
from services.form import ERROR_TITLE, BookingForm, Notification, Submitter
from services.templates import render_booking_form
from services.webhook import submit_booking

# ── FastAPI app ─────────────────────────────────────────────────────────────
app = FastAPI(title="Campaign Booking Form")

# CORS
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _log_notification(title: str, description: str, variant: str) -> None:
    logger.info("booking_notification", extra={"title": title, "variant": variant})


def get_submitter() -> Submitter:
    return submit_booking


@app.get("/health")
def health_check():
    logger.debug("health_check")
    return {"status": "ok"}


# ========== 1) Страница с формой ==========
@app.get("/", response_class=HTMLResponse)
def booking_page():
    return HTMLResponse(render_booking_form())


# ========== 2) Отправка заявки ==========
@app.post("/api/booking")
async def create_booking(request: Request, submitter: Submitter = Depends(get_submitter)):
    """
    Принимает сырые значения формы (JSON), валидирует и пересылает в webhook.
    422 — ошибки по полям, 502 — webhook не принял заявку, 200 — отправлено.
    """
    try:
        raw = await request.json()
    except ValueError:
        raw = None
    if not isinstance(raw, dict):
        logger.warning("booking_bad_payload")
        return JSONResponse(
            status_code=422,
            content={"ok": False, "errors": {"body": "Expected a JSON object"}},
        )

    form = BookingForm(notify=_log_notification, submitter=submitter)
    submitted = await form.handle_submit(raw)

    if form.errors:
        logger.info("booking_invalid", extra={"fields": sorted(form.errors)})
        return JSONResponse(status_code=422, content={"ok": False, "errors": form.errors})

    notification = form.notification or Notification(
        ERROR_TITLE, SUBMISSION_FALLBACK_MESSAGE, "destructive"
    )
    if not submitted:
        return JSONResponse(
            status_code=502,
            content={"ok": False, "notification": notification.as_dict()},
        )
    return {"ok": True, "notification": notification.as_dict()}
