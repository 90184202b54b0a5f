from __future__ import annotations

import logging

from app.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_HANDLER_NAME = "inventory-console"


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach one console handler to the root logger; safe to call repeatedly."""
    root = logging.getLogger()
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelNamesMapping()[settings.log_level]
    root.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root
