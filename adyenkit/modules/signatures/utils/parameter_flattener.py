# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/utils/parameter_flattener.py

Conversión entre árboles de parámetros anidados y el mapa plano que entiende
el proveedor:

    flatten({"billing_address": {"street": "My Street"}})
    -> {"billingAddress.street": "My Street"}

    deflatten({"paymentDetails.authCode": "A40B8"})
    -> {"payment_details": {"auth_code": "A40B8"}}

Reglas:
- flatten: claves camelizadas y prefijadas con la ruta; hojas convertidas a
  str sin reformatear (el formateo de fechas es responsabilidad de quien
  arma el árbol). Los contenedores vacíos desaparecen.
- deflatten: claves underscored; las hojas se conservan tal cual.
  Lanza DuplicateKeyError / KeyNestingConflictError ante mapas mal formados.

Fecha: 19/10/2026
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from adyenkit.modules.signatures.errors import DuplicateKeyError, KeyNestingConflictError
from adyenkit.modules.signatures.utils.key_normalizer import camelize, underscore

# Árbol: cada valor es un escalar o un sub-árbol.
ParameterTree = Mapping[str, Union[Any, "ParameterTree"]]
FlatParameterMap = Dict[str, str]


def stringify(value: Any) -> str:
    """Representación en wire de un escalar (None -> '', bool -> 'true'/'false')."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten(
    tree: Optional[ParameterTree],
    prefix: str = "",
    result: Optional[FlatParameterMap] = None,
) -> FlatParameterMap:
    """
    Aplana un árbol de parámetros respetando el orden de inserción.

    Args:
        tree: Árbol anidado (None o vacío -> {})
        prefix: Prefijo ya camelizado, terminado en "."
        result: Acumulador compartido por las llamadas recursivas

    Returns:
        Mapa plano {clave.camelizada: valor_str}
    """
    if result is None:
        result = {}
    if not tree:
        return result

    for key, value in tree.items():
        flat_key = f"{prefix}{camelize(key)}"
        if isinstance(value, Mapping):
            flatten(value, f"{flat_key}.", result)
        else:
            result[flat_key] = stringify(value)
    return result


def deflatten(flat_map: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Reconstruye el árbol anidado a partir de claves separadas por ".".

    Raises:
        DuplicateKeyError: Si una hoja sobrescribiría otra hoja
        KeyNestingConflictError: Si se anida bajo una ruta que ya es hoja
    """
    tree: Dict[str, Any] = {}
    if not flat_map:
        return tree

    for key, value in flat_map.items():
        _deflatten_pair(str(key), value, tree, path=())
    return tree


def _deflatten_pair(key: str, value: Any, node: Dict[str, Any], path: tuple) -> None:
    head, sep, rest = key.partition(".")
    name = underscore(head)
    here = path + (name,)

    if not sep:
        if name in node:
            raise DuplicateKeyError(
                f"Duplicate key in flattened hash: {'.'.join(here)}"
            )
        node[name] = value
        return

    child = node.setdefault(name, {})
    if not isinstance(child, dict):
        raise KeyNestingConflictError(
            f"Key nesting conflict in flattened hash: {'.'.join(here)}"
        )
    _deflatten_pair(rest, value, child, here)


__all__ = [
    "ParameterTree",
    "FlatParameterMap",
    "stringify",
    "flatten",
    "deflatten",
]

# Fin del archivo adyenkit/modules/signatures/utils/parameter_flattener.py
