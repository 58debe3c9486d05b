from __future__ import annotations

import logging


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger("weathermood")
    logger.setLevel(level.upper())
    if not any(getattr(h, "_weathermood", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._weathermood = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
