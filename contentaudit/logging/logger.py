import logging
import sys
from typing import TextIO

LOGGER_NAME = "contentaudit"


class FieldsFormatter(logging.Formatter):
    """Appends the keyword fields passed to Log as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = getattr(record, "fields", None)
        if not fields:
            return line
        rendered = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        return f"{line} [{rendered}]"


class Log:
    """Audit log facade.

    Keyword arguments travel on the record as a single ``fields`` mapping,
    so names like ``message`` or ``name`` never clash with LogRecord
    attributes.
    """

    _logger: logging.Logger = logging.getLogger(LOGGER_NAME)

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level; the handler is attached once per process."""
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(FieldsFormatter("%(asctime)s [%(levelname)s] %(message)s"))
        cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._log(logging.INFO, message, fields)

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._log(logging.ERROR, message, fields)

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._log(logging.WARNING, message, fields)

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._log(logging.DEBUG, message, fields)

    @classmethod
    def _log(cls, level: int, message: str, fields: dict[str, object]) -> None:
        cls._logger.log(level, message, extra={"fields": fields}, stacklevel=3)
