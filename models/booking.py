# models/booking.py
from typing import Any, Dict, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

CONTACT_REQUIRED_MESSAGE = "Please provide at least an email or phone number"
INVALID_EMAIL_MESSAGE = "Please enter a valid email"

REQUIRED_MESSAGES = {
    "name": "Name is required",
    "business_name": "Business name is required",
    "business_link": "Business website is required",
    "industry": "Industry is required",
}


def has_contact(email: Any, phone_number: Any) -> bool:
    return bool(email) or bool(phone_number)


# ─── Заявка на кампанию (одна отправка формы) ───
class BookingRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,  # отсутствующее поле == пустая строка
    )

    name: str = ""
    business_name: str = ""
    business_link: str = ""
    email: Optional[str] = None
    phone_number: Optional[str] = None
    industry: str = ""
    target_audience: Optional[str] = None
    key_message: Optional[str] = None
    visual_references: Optional[str] = None

    @field_validator(*REQUIRED_MESSAGES, mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v

    @field_validator(*REQUIRED_MESSAGES)
    @classmethod
    def _required(cls, v: str, info):
        if not v:
            raise ValueError(REQUIRED_MESSAGES[info.field_name])
        return v

    @field_validator("email")
    @classmethod
    def _email_format(cls, v: Optional[str]):
        # пустой email допустим, формат проверяем только если что-то ввели
        if not v:
            return v
        try:
            # только синтаксис: .local, .test и прочие special-use домены допустимы
            validate_email(
                v,
                check_deliverability=False,
                test_environment=True,
                globally_deliverable=False,
            )
        except EmailNotValidError:
            raise ValueError(INVALID_EMAIL_MESSAGE)
        return v

    @model_validator(mode="after")
    def _contact_present(self):
        if not has_contact(self.email, self.phone_number):
            raise ValueError(CONTACT_REQUIRED_MESSAGE)
        return self


# python attr -> wire name (camelCase)
FIELD_ALIASES: Dict[str, str] = {
    name: field.alias or name for name, field in BookingRequest.model_fields.items()
}
FORM_FIELDS = tuple(FIELD_ALIASES.values())
