# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/enums/redirect_scheme_enum.py

Esquema con el que se verifica el merchantSig de un redirect de HPP.

Fecha: 19/10/2026
"""

from enum import StrEnum


class RedirectSignatureScheme(StrEnum):
    """Esquema de verificación del redirect."""

    HMAC_SHA256 = "hmac_sha256"
    LEGACY_SHA1 = "legacy_sha1"


__all__ = ["RedirectSignatureScheme"]
