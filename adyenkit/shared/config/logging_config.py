# -*- coding: utf-8 -*-
"""
adyenkit/shared/config/logging_config.py

Logging de adyenkit vía logging.config.dictConfig.

Formatos:
- plain:  "NIVEL [logger]: mensaje"
- pretty: igual que plain pero con timestamp (consola de desarrollo)
- json:   python-json-logger (producción)

Todos los handlers pasan por SecretRedactionFilter: cualquier
"sharedSecret=...", "hmacSignature: ..." etc. que llegue a un mensaje se
enmascara antes de emitirse.

Fecha: 19/10/2026
"""

import logging
import logging.config
import re
from typing import Literal

# Campos cuyo valor nunca debe aparecer en logs.
REDACTED_FIELDS = (
    "sharedSecret",
    "shared_secret",
    "merchantSig",
    "hmacSignature",
    "hmac_key",
    "password",
)

REDACTED = "***"

_REDACT_RE = re.compile(
    r"(?P<key>\b(?:%s))(?P<sep>['\"]?\s*[:=]\s*['\"]?)(?P<value>[^\s'\",&}]+)"
    % "|".join(re.escape(f) for f in REDACTED_FIELDS)
)


def redact(message: str) -> str:
    """Enmascara los valores de REDACTED_FIELDS dentro de `message`."""
    return _REDACT_RE.sub(lambda m: f"{m.group('key')}{m.group('sep')}{REDACTED}", message)


class SecretRedactionFilter(logging.Filter):
    """Filtro que reescribe el mensaje ya interpolado sin secretos."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        cleaned = redact(message)
        if cleaned != message:
            record.msg = cleaned
            record.args = ()
        return True


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain"
) -> None:
    """
    Configura el root logger para adyenkit.

    Args:
        level: Nivel de logging (acepta minúsculas)
        fmt: plain, pretty o json

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    formatter = {"json": "json", "pretty": "pretty"}.get(fmt, "default")

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "redact_secrets": {"()": SecretRedactionFilter},
        },
        "formatters": {
            "default": {"format": "%(levelname)s [%(name)s]: %(message)s"},
            "pretty": {
                "format": "%(asctime)s %(levelname)-8s [%(name)s]: %(message)s",
                "datefmt": "%H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "filters": ["redact_secrets"],
                "stream": "ext://sys.stdout",
            }
        },
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    }

    logging.config.dictConfig(config)


__all__ = ["REDACTED_FIELDS", "SecretRedactionFilter", "redact", "setup_logging"]
# Fin del archivo adyenkit/shared/config/logging_config.py
