"""Startup-time helpers for safe config logging."""

from dropin_checkout.common.config import Settings
from dropin_checkout.common.logging import logger


SECRET_MARKERS = ("KEY", "SECRET", "PASSWORD", "TOKEN")


def _safe_value(name: str, value) -> str:
    """Return a printable value, redacting secret-like setting names."""

    if name.upper().endswith(SECRET_MARKERS):
        return "<redacted>"
    return str(value)


def redacted_config(settings: Settings) -> dict[str, str]:
    return {name: _safe_value(name, value) for name, value in settings.model_dump().items()}


def log_startup_config(settings: Settings) -> None:
    """Log the effective configuration for quick troubleshooting."""

    logger.info("startup_config=%s", redacted_config(settings))
