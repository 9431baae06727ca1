"""Process-wide logging setup."""

import logging

# Third-party loggers that are chatty at INFO
_NOISY_LOGGERS = ("aioodbc", "asyncio")


def configure_logging(level: str | int = "INFO") -> None:
    """Configure root logging for the data access layer.

    Uses ``force=True`` so repeated calls replace existing handlers
    instead of duplicating them.

    Args:
        level: Log level name or number for the root logger.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
