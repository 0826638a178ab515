# core/logging_setup.py

import logging
from logging.handlers import RotatingFileHandler

from .config import Settings

# Marks handlers installed here so a second call can replace them
_HANDLER_TAG = "_medibridge_handler"


def configure_logging(settings: Settings) -> logging.Logger:
    """Configure root logging from settings, optionally with a rotating file"""
    root = logging.getLogger()
    root.setLevel(settings.log_level.upper())

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(settings.log_format)
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(
            RotatingFileHandler(
                filename=settings.log_file,
                maxBytes=1_000_000,
                backupCount=5,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        root.addHandler(handler)

    return logging.getLogger("medibridge")
