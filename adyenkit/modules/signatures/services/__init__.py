# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/services/__init__.py

Servicios puros del módulo Signatures: HMAC y cadenas a firmar.
"""

from . import hmac_signer
from .hmac_signer import secure_compare, sign, signing_key, verify
from .string_builders import (
    CANONICAL_FIELD_ORDER,
    NOTIFICATION_FIELD_ORDER,
    build_notification_signature_string,
    build_open_invoice_signature_string,
    build_positional_signature_string,
    build_sorted_signature_string,
    escape_value,
)

__all__ = [
    "hmac_signer",
    "secure_compare",
    "sign",
    "signing_key",
    "verify",
    "CANONICAL_FIELD_ORDER",
    "NOTIFICATION_FIELD_ORDER",
    "build_notification_signature_string",
    "build_open_invoice_signature_string",
    "build_positional_signature_string",
    "build_sorted_signature_string",
    "escape_value",
]
