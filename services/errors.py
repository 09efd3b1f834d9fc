# services/errors.py
from typing import Dict, Optional

SUBMISSION_FALLBACK_MESSAGE = "Failed to submit the form. Please try again."


class BookingError(Exception):
    """Base error for the booking flow."""


class BookingValidationError(BookingError):
    """
    Одна или несколько ошибок по полям формы.
    errors: {wire-имя поля: сообщение}
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class SubmissionError(BookingError):
    """
    Webhook не принял заявку: либо HTTP-статус + тело ответа,
    либо сетевая ошибка (ответа нет вовсе).
    """

    def __init__(
        self,
        status: Optional[int] = None,
        body: Optional[str] = None,
        network_failure: bool = False,
        message: Optional[str] = None,
    ):
        self.status = status
        self.body = body
        self.network_failure = network_failure
        if message is None:
            if status is not None:
                message = f"Failed to submit form: {status}"
            else:
                message = SUBMISSION_FALLBACK_MESSAGE
        super().__init__(message)
