"""Startup-time helpers for safe config logging."""

from urllib.parse import urlsplit, urlunsplit

from paymon.common.config import CommonSettings
from paymon.common.logging import logger


SECRET_MARKERS = ("key", "secret", "password", "token", "dsn")


def _strip_userinfo(value: str) -> str:
    """Drop `user:pass@` credentials from a URL-shaped value."""

    parts = urlsplit(value)
    if not parts.netloc or "@" not in parts.netloc:
        return value
    host = parts.netloc.rsplit("@", 1)[1]
    return urlunsplit(parts._replace(netloc=f"<redacted>@{host}"))


def _safe_value(name: str, value) -> str:
    """Render a settings value, redacting secret-like field names and URL credentials."""

    if value is None or value == "":
        return "<unset>"
    if any(marker in name.lower() for marker in SECRET_MARKERS):
        return "<redacted>"
    return _strip_userinfo(str(value))


def log_startup_config(config: CommonSettings, fields: list[str]) -> None:
    """Log selected settings fields for quick troubleshooting."""

    snapshot = {"service": config.service_name}
    for name in fields:
        snapshot[name] = _safe_value(name, getattr(config, name, None))
    logger.info("startup_config=%s", snapshot)
