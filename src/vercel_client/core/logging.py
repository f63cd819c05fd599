import logging
from typing import Any, Union

# Extras rendered after level/logger/event, in this order.
LOG_EXTRA_FIELDS = (
    "operation",
    "method",
    "endpoint",
    "status",
    "duration_ms",
    "error_type",
)


class LogfmtFormatter(logging.Formatter):
    """Render records as `key=value` pairs; extras a record lacks are skipped."""

    def format(self, record: logging.LogRecord) -> str:
        pairs = [("level", record.levelname.lower()), ("logger", record.name)]

        event = record.getMessage()
        if event:
            pairs.append(("event", event))

        pairs.extend(
            (key, getattr(record, key))
            for key in LOG_EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )

        if record.exc_info:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(f"{key}={self._quote(val)}" for key, val in pairs)

    @staticmethod
    def _quote(val: Any) -> str:
        if isinstance(val, (bool, int, float)):
            return str(val)
        text = str(val)
        if " " in text or "=" in text:
            return '"' + text.replace('"', '\\"') + '"'
        return text


def setup_logging(level: Union[str, int] = "INFO") -> None:
    """Send all logging to stderr in logfmt. Safe to call more than once."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(level)


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
