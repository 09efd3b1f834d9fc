# services/logging.py
import logging
import os
from logging.handlers import RotatingFileHandler

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"

# атрибуты, которые есть у любой LogRecord — всё остальное пришло через extra=
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """
    Дописывает поля из extra={...} в конец строки: `booking_submitted | business_name=Acme`.
    Сервисы логируют события короткими именами, контекст — только через extra.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        if not context:
            return line
        pairs = " ".join(f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in sorted(context.items()))
        return f"{line} | {pairs}"


def _level(var: str) -> str:
    return os.getenv(var, os.getenv("LOG_LEVEL", "INFO")).upper()


def setup_logging():
    """
    Корневой логгер: консоль + файл <LOG_DIR>/app.log с ротацией.
    Повторный вызов не дублирует хендлеры.
    """
    log_dir = os.getenv("LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    formatter = ContextFormatter(fmt=FORMAT, datefmt=DATEFMT)

    root = logging.getLogger()
    root.setLevel(_level("LOG_LEVEL"))

    # RotatingFileHandler тоже StreamHandler, поэтому консольный ищем по точному типу
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        console = logging.StreamHandler()
        console.setLevel(_level("LOG_LEVEL_CONSOLE"))
        console.setFormatter(formatter)
        root.addHandler(console)

    if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        file_handler = RotatingFileHandler(
            filename=os.path.join(log_dir, "app.log"),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(_level("LOG_LEVEL_FILE"))
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel("WARNING")
