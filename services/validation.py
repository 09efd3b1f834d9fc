# services/validation.py
import logging
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from models.booking import (
    CONTACT_REQUIRED_MESSAGE,
    FIELD_ALIASES,
    BookingRequest,
    has_contact,
)
from services.errors import BookingValidationError

logger = logging.getLogger(__name__)


def _raw_value(raw: Mapping[str, Any], field: str) -> Any:
    """Значение поля по wire-имени, с фолбэком на python-имя."""
    alias = FIELD_ALIASES[field]
    if alias in raw:
        return raw[alias]
    return raw.get(field)


def _field_errors(exc: ValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for err in exc.errors():
        if not err["loc"]:
            # ошибка уровня модели (контакт) — проверяется отдельно ниже
            continue
        field = str(err["loc"][0])
        field = FIELD_ALIASES.get(field, field)
        if err["type"] == "value_error":
            msg = str(err["ctx"]["error"])
        else:
            msg = err["msg"]
        errors.setdefault(field, msg)
    return errors


def validate_booking(raw: Mapping[str, Any]) -> BookingRequest:
    """
    Проверяет сырые значения формы.
    Возвращает BookingRequest или бросает BookingValidationError со всеми ошибками по полям.
    """
    errors: Dict[str, str] = {}
    booking = None
    try:
        booking = BookingRequest.model_validate(dict(raw))
    except ValidationError as e:
        errors.update(_field_errors(e))

    # правило "email или телефон" применяем последним и всегда
    email_alias = FIELD_ALIASES["email"]
    if email_alias not in errors and not has_contact(
        _raw_value(raw, "email"), _raw_value(raw, "phone_number")
    ):
        errors[email_alias] = CONTACT_REQUIRED_MESSAGE

    if errors:
        logger.debug("booking_validation_failed", extra={"fields": sorted(errors)})
        raise BookingValidationError(errors)
    return booking
