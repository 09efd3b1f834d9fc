# services/form.py
import logging
from dataclasses import asdict, dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from models.booking import BookingRequest, FORM_FIELDS
from services.errors import (
    SUBMISSION_FALLBACK_MESSAGE,
    BookingValidationError,
    SubmissionError,
)
from services.validation import validate_booking
from services.webhook import submit_booking

logger = logging.getLogger(__name__)

SUCCESS_TITLE = "Success!"
SUCCESS_DESCRIPTION = "Your booking request has been submitted successfully."
ERROR_TITLE = "Error"

Notify = Callable[[str, str, str], None]
Submitter = Callable[[BookingRequest], Awaitable[None]]


@dataclass
class Notification:
    title: str
    description: str
    variant: str = "default"  # "default" | "destructive"

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


def empty_values() -> Dict[str, str]:
    return {field: "" for field in FORM_FIELDS}


class BookingForm:
    """
    Состояние одной формы: значения полей, ошибки и флаг отправки.
    Idle -> Submitting -> Idle, флаг сбрасывается при любом исходе.
    notification — последнее уведомление, показанное пользователю.
    """

    def __init__(self, notify: Notify, submitter: Submitter = submit_booking):
        self.notify = notify
        self.submitter = submitter
        self.values: Dict[str, Any] = empty_values()
        self.errors: Dict[str, str] = {}
        self.is_submitting = False
        self.notification: Optional[Notification] = None

    def reset(self) -> None:
        self.values = empty_values()
        self.errors = {}

    def _show(self, title: str, description: str, variant: str) -> None:
        self.notification = Notification(title, description, variant)
        self.notify(title, description, variant)

    async def handle_submit(self, raw: Mapping[str, Any]) -> bool:
        """True — заявка ушла в webhook; False — ошибки, повтор или отказ webhook."""
        if self.is_submitting:
            logger.warning("booking_submit_ignored_in_flight")
            return False

        self.notification = None
        self.values = {field: raw.get(field, "") for field in FORM_FIELDS}
        try:
            booking = validate_booking(raw)
        except BookingValidationError as e:
            self.errors = e.errors
            return False
        self.errors = {}

        self.is_submitting = True
        try:
            await self.submitter(booking)
        except SubmissionError as e:
            logger.error(
                "booking_submit_failed",
                extra={"status": e.status, "network_failure": e.network_failure},
            )
            self._show(ERROR_TITLE, str(e) or SUBMISSION_FALLBACK_MESSAGE, "destructive")
            return False
        except Exception as e:
            # любая ошибка отправки — одно уведомление, форма остаётся рабочей
            logger.exception("booking_submit_unexpected_error")
            self._show(ERROR_TITLE, str(e) or SUBMISSION_FALLBACK_MESSAGE, "destructive")
            return False
        finally:
            self.is_submitting = False

        logger.info("booking_submitted", extra={"business_name": booking.business_name})
        self._show(SUCCESS_TITLE, SUCCESS_DESCRIPTION, "default")
        self.reset()
        return True
