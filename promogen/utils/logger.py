# -----------------------------------------------------------------------------
# promogen/utils/logger.py — Process-wide logger with structured extras
# -----------------------------------------------------------------------------

import logging

from promogen.core.config import get_settings

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {k: v for k, v in vars(record).items() if k not in _RESERVED}
        if not extras:
            return base
        rendered = " ".join(f"{k}={v!r}" for k, v in sorted(extras.items()))
        return f"{base} {rendered}"


def _build_logger() -> logging.Logger:
    log = logging.getLogger("promogen")
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ExtraFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        log.addHandler(handler)
    log.setLevel(getattr(logging, get_settings().log_level.upper(), logging.INFO))
    return log


logger = _build_logger()
