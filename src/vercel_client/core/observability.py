from __future__ import annotations

import logging
from typing import Any

# Attributes LogRecord sets itself; passing them in `extra` raises KeyError.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


def log_event(event: str, logger: logging.Logger | None = None, **fields: Any) -> None:
    """Emit `event` at INFO with `fields` attached to the record as attributes."""
    log = logger or logging.getLogger("vercel_client.observability")
    extra = {k: v for k, v in fields.items() if k not in _RECORD_ATTRS}
    extra["event"] = event
    log.info(event, extra=extra)


__all__ = ["log_event"]
