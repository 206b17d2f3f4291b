# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/utils/formatters.py

Formatos de fecha/timestamp exigidos por el proveedor y codificación
gzip+base64 de orderData.

- Fecha:     YYYY-MM-DD
- Timestamp: YYYY-MM-DDTHH:MM:SSZ (UTC)

Las cadenas ya formateadas se devuelven intactas si cumplen el patrón.

Fecha: 19/10/2026
"""

from __future__ import annotations

import base64
import gzip
import re
from datetime import date, datetime, timezone
from typing import Any, Union

from adyenkit.modules.signatures.errors import ParameterFormatError

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


def format_date(value: Any) -> str:
    """
    Devuelve la representación YYYY-MM-DD de una fecha.

    Raises:
        ParameterFormatError: Si la cadena no cumple el patrón o el tipo no es convertible
    """
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, str):
        if not DATE_PATTERN.match(value):
            raise ParameterFormatError(f"Invalid date notation: {value!r}!")
        return value
    raise ParameterFormatError(f"Cannot convert {value!r} to date!")


def format_timestamp(value: Any) -> str:
    """
    Devuelve la representación YYYY-MM-DDTHH:MM:SSZ de un instante.

    Los datetime con zona horaria se convierten a UTC; los naive se asumen UTC.

    Raises:
        ParameterFormatError: Si la cadena no cumple el patrón o el tipo no es convertible
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%dT00:00:00Z")
    if isinstance(value, str):
        if not TIMESTAMP_PATTERN.match(value):
            raise ParameterFormatError(f"Invalid timestamp notation: {value!r}!")
        return value
    raise ParameterFormatError(f"Cannot convert {value!r} to timestamp!")


def gzip_base64(message: Union[str, bytes]) -> str:
    """Comprime con gzip y codifica en base64 estricto (sin saltos de línea)."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    return base64.b64encode(gzip.compress(message)).decode("ascii")


__all__ = [
    "DATE_PATTERN",
    "TIMESTAMP_PATTERN",
    "format_date",
    "format_timestamp",
    "gzip_base64",
]
