# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/__init__.py

Módulo de firmas de Adyen.

Este módulo gestiona:
- Normalización de claves (camelize/underscore) y flatten/deflatten
- Construcción de las cadenas a firmar (HPP, legacy, open invoice, notificaciones)
- Cálculo y verificación HMAC en tiempo constante

Estructura:
- enums: SignatureAlgorithm, RedirectSignatureScheme
- errors: Jerarquía de excepciones (AdyenError)
- utils: Funciones puras de normalización y formato
- services: HMAC y constructores de cadenas
- facades: API pública por flujo (importar explícitamente cada fachada)

Fecha: 19/10/2026
"""

from .enums import RedirectSignatureScheme, SignatureAlgorithm
from .errors import (
    AdyenError,
    DuplicateKeyError,
    FlattenStructureError,
    InvalidSharedSecretError,
    InvalidSignatureError,
    KeyNestingConflictError,
    MissingParameterError,
    MissingSharedSecretError,
    MissingSignatureError,
    ParameterFormatError,
    SignatureConfigurationError,
    UnknownSkinError,
)

__all__ = [
    "RedirectSignatureScheme",
    "SignatureAlgorithm",
    "AdyenError",
    "DuplicateKeyError",
    "FlattenStructureError",
    "InvalidSharedSecretError",
    "InvalidSignatureError",
    "KeyNestingConflictError",
    "MissingParameterError",
    "MissingSharedSecretError",
    "MissingSignatureError",
    "ParameterFormatError",
    "SignatureConfigurationError",
    "UnknownSkinError",
]
