# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/errors.py

Jerarquía de errores del subsistema de firmas.

Taxonomía:
- Configuración (secreto ausente / inválido, skin desconocido): ValueError.
- Estructura (clave duplicada o conflicto de anidamiento en deflatten): ValueError.
- Una firma que NO coincide no es un error: verify() devuelve False.
  Sólo la capa web convierte ese False en InvalidSignatureError.

Fecha: 19/10/2026
"""

from __future__ import annotations


class AdyenError(Exception):
    """Error base de adyenkit."""
    pass


# =============================================================================
# CONFIGURACIÓN
# =============================================================================

class SignatureConfigurationError(AdyenError, ValueError):
    """No es posible firmar/verificar con la configuración recibida."""
    pass


class MissingSharedSecretError(SignatureConfigurationError):
    """No hay shared secret (ni explícito, ni en el mapa, ni vía skin)."""
    pass


class InvalidSharedSecretError(SignatureConfigurationError):
    """El shared secret no es hexadecimal válido (esquema HMAC-SHA256)."""
    pass


class UnknownSkinError(SignatureConfigurationError):
    """El skin referenciado no está registrado."""
    pass


class MissingSignatureError(AdyenError, ValueError):
    """Se pidió verificar un mapa que no trae merchantSig / hmacSignature."""
    pass


# =============================================================================
# ESTRUCTURA (flatten / deflatten)
# =============================================================================

class FlattenStructureError(AdyenError, ValueError):
    """El mapa plano no describe un árbol válido."""
    pass


class DuplicateKeyError(FlattenStructureError):
    """Una hoja sobrescribiría otra hoja ya asignada."""
    pass


class KeyNestingConflictError(FlattenStructureError):
    """Una clave implica anidar bajo una ruta que ya es hoja."""
    pass


# =============================================================================
# PARÁMETROS
# =============================================================================

class ParameterFormatError(AdyenError, ValueError):
    """Fecha o timestamp con notación inválida."""
    pass


class MissingParameterError(AdyenError, ValueError):
    """Falta un atributo obligatorio del request HPP."""
    pass


# =============================================================================
# CAPA WEB
# =============================================================================

class InvalidSignatureError(AdyenError):
    """La firma recibida no coincide con la calculada (posible falsificación)."""
    pass


__all__ = [
    "AdyenError",
    "SignatureConfigurationError",
    "MissingSharedSecretError",
    "InvalidSharedSecretError",
    "UnknownSkinError",
    "MissingSignatureError",
    "FlattenStructureError",
    "DuplicateKeyError",
    "KeyNestingConflictError",
    "ParameterFormatError",
    "MissingParameterError",
    "InvalidSignatureError",
]

# Fin del archivo adyenkit/modules/signatures/errors.py
