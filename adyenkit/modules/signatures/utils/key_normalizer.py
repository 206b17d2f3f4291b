# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/utils/key_normalizer.py

Traducción de identificadores snake_case (código) <-> camelCase (wire).

Las excepciones son finitas y enumeradas: cualquier identificador que no
aparezca en la tabla sigue la regla general. underscore() NO es un inverso
perfecto de camelize() para siglas ambiguas (p. ej. "RESTApi" -> "rest_api").

Fecha: 19/10/2026
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping

# Excepciones a la regla snake_case -> camelCase.
CAMELCASE_EXCEPTIONS: Mapping[str, str] = MappingProxyType({
    "shopper_ip": "shopperIP",
})

# Inversa: camelCase -> snake_case.
UNDERSCORE_EXCEPTIONS: Mapping[str, str] = MappingProxyType(
    {camel: snake for snake, camel in CAMELCASE_EXCEPTIONS.items()}
)

_UNDERSCORE_RUN = re.compile(r"_+(.)")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]{2,})([A-Z])")
_CAPITALIZED_WORD = re.compile(r"(?!\A)([A-Z][a-z]*)")


def camelize(identifier: Any) -> str:
    """
    Convierte un identificador a camelCase.

    Cada secuencia de guiones bajos se elimina y la letra siguiente pasa a
    mayúscula. Consulta primero CAMELCASE_EXCEPTIONS.

    Ejemplos:
        >>> camelize("hello_cruel_world")
        'helloCruelWorld'
        >>> camelize("_hello__world")
        'HelloWorld'
        >>> camelize("shopper_ip")
        'shopperIP'
    """
    identifier = str(identifier)
    exception = CAMELCASE_EXCEPTIONS.get(identifier)
    if exception is not None:
        return exception
    return _UNDERSCORE_RUN.sub(lambda m: m.group(1).upper(), identifier)


def underscore(identifier: Any) -> str:
    """
    Convierte un identificador camelCase a snake_case.

    Una racha de mayúsculas se trata como una sola sigla: "RESTApi" -> "rest_api".

    Ejemplos:
        >>> underscore("HelloCruelWorld")
        'hello_cruel_world'
        >>> underscore("shopperIP")
        'shopper_ip'
    """
    identifier = str(identifier)
    exception = UNDERSCORE_EXCEPTIONS.get(identifier)
    if exception is not None:
        return exception
    result = _ACRONYM_BOUNDARY.sub(lambda m: m.group(1).lower() + m.group(2), identifier)
    result = _CAPITALIZED_WORD.sub(r"_\1", result)
    return result.lower()


__all__ = [
    "CAMELCASE_EXCEPTIONS",
    "UNDERSCORE_EXCEPTIONS",
    "camelize",
    "underscore",
]

# Fin del archivo adyenkit/modules/signatures/utils/key_normalizer.py
