# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/utils/__init__.py

Utilidades puras: normalización de claves, flatten/deflatten y formatos.
"""

from .key_normalizer import camelize, underscore
from .parameter_flattener import (
    FlatParameterMap,
    ParameterTree,
    deflatten,
    flatten,
    stringify,
)
from .formatters import format_date, format_timestamp, gzip_base64

__all__ = [
    "camelize",
    "underscore",
    "FlatParameterMap",
    "ParameterTree",
    "deflatten",
    "flatten",
    "stringify",
    "format_date",
    "format_timestamp",
    "gzip_base64",
]
