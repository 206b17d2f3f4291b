# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/enums/signature_algorithm_enum.py

Algoritmos HMAC soportados y la forma en que cada uno interpreta el secreto.

Fecha: 19/10/2026
"""

import hashlib
from enum import StrEnum


class SignatureAlgorithm(StrEnum):
    """Algoritmo HMAC usado para firmar."""

    # Firmas legacy (formularios / redirect): secreto = bytes UTF-8 tal cual.
    SHA1 = "sha1"
    # HPP moderno y notificaciones REST: secreto = cadena hex decodificada.
    SHA256 = "sha256"

    @property
    def digestmod(self):
        return hashlib.sha1 if self is SignatureAlgorithm.SHA1 else hashlib.sha256

    @property
    def hex_encoded_secret(self) -> bool:
        return self is SignatureAlgorithm.SHA256


__all__ = ["SignatureAlgorithm"]


# Fin del archivo adyenkit/modules/signatures/enums/signature_algorithm_enum.py
