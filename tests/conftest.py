import os
import tempfile

import pytest

# main.py настраивает логирование при импорте — пишем логи во временную папку
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="booking-logs-"))


@pytest.fixture
def raw_form():
    return {
        "name": "Jo",
        "businessName": "Acme",
        "businessLink": "acme.com",
        "email": "",
        "phoneNumber": "555-1234",
        "industry": "Retail",
    }
