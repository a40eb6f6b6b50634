import logging
from typing import Any, Iterator, Tuple

from .errors import MondayError

LOG_EXTRA_FIELDS = (
    "operation",
    "method",
    "url",
    "status",
    "success",
    "error_code",
    "duration_ms",
)


def _logfmt_value(val: Any) -> str:
    if isinstance(val, bool):
        return str(val).lower()
    text = str(val)
    if any(ch in text for ch in ' ="'):
        return '"' + text.replace('"', '\\"') + '"'
    return text


class LogfmtFormatter(logging.Formatter):
    """
    logfmt output for client events.

    A MondayError attached via exc_info adds its error kind and API code so
    failed calls can be grouped without parsing the message.
    """

    def format(self, record: logging.LogRecord) -> str:
        return " ".join(f"{key}={_logfmt_value(val)}" for key, val in self._pairs(record))

    def _pairs(self, record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
        yield "level", record.levelname.lower()
        yield "logger", record.name

        event = record.getMessage()
        if event:
            yield "event", event

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                yield key, val

        if not record.exc_info or record.exc_info[1] is None:
            return
        exc = record.exc_info[1]
        yield "exc_type", type(exc).__name__
        if isinstance(exc, MondayError):
            yield "error_kind", exc.kind.value
            if exc.code is not None and getattr(record, "error_code", None) is None:
                yield "error_code", exc.code


def setup_logging(level: str = "INFO", logger_name: str = "monday_client") -> None:
    """Attach a single logfmt handler to the library logger."""
    log = logging.getLogger(logger_name)
    for h in list(log.handlers):
        log.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
