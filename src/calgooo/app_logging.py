"""Logging configuration helpers."""

import logging

PACKAGE_LOGGER = "calgooo"


class ContextFormatter(logging.Formatter):
    """Formatter that appends the date/hit/meal context passed via ``extra``."""

    context_keys = ("date", "hit", "meal_id", "calories", "goal", "upload_filename")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{key}={getattr(record, key)}"
            for key in self.context_keys
            if hasattr(record, key)
        ]
        if not context:
            return message
        return f"{message} [{' '.join(context)}]"


def configure_logging(level: str = "INFO") -> None:
    """Configure the package logger once; later calls only adjust the level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.getLevelName(level.upper()))
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
