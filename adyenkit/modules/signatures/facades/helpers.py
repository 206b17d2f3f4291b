# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/facades/helpers.py

Resolución del shared secret para las fachadas de firma.

Orden de búsqueda:
1. Secreto explícito del llamador.
2. Entrada sharedSecret / shared_secret dentro del mapa (sólo con trust_params=True).
3. Skin registrado cuyo skin code coincide con skinCode / skin_code del mapa.

Los mapas entrantes (redirects, notificaciones) los controla quien envía el
request: al verificarlos se usa trust_params=False y el secreto sale sólo del
llamador o del registro.

Nunca se cae a un secreto vacío: si no hay secreto se lanza MissingSharedSecretError.

Fecha: 19/10/2026
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from adyenkit.modules.signatures.errors import MissingSharedSecretError
from adyenkit.modules.signatures.utils.key_normalizer import camelize

if TYPE_CHECKING:
    from adyenkit.shared.config.skin_registry import SkinRegistry


def lookup(params: Optional[Mapping[str, Any]], wire_key: str) -> Any:
    """Valor de `wire_key` aceptando la clave en camelCase o snake_case."""
    if not params:
        return None
    for key, value in params.items():
        if camelize(key) == wire_key:
            return value
    return None


def resolve_shared_secret(
    params: Optional[Mapping[str, Any]] = None,
    shared_secret: Optional[str] = None,
    registry: Optional["SkinRegistry"] = None,
    purpose: str = "signature",
    trust_params: bool = True,
) -> str:
    """
    Devuelve el secreto a usar o lanza MissingSharedSecretError.

    Args:
        params: Parámetros del request (pueden traer sharedSecret / skinCode)
        shared_secret: Secreto explícito (tiene prioridad)
        registry: Registro de skins para buscar por skinCode
        purpose: Texto para el mensaje de error
        trust_params: Si False se ignora sharedSecret dentro de `params`
    """
    secret = shared_secret
    if not secret and trust_params:
        secret = lookup(params, "sharedSecret")
    if not secret and registry is not None:
        secret = registry.shared_secret_by_code(lookup(params, "skinCode"))
    if not secret:
        raise MissingSharedSecretError(
            f"Cannot calculate {purpose} with empty shared secret"
        )
    return str(secret)


__all__ = ["lookup", "resolve_shared_secret"]
