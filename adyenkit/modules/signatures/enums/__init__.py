# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/enums/__init__.py

Superficie de exportación de enums del módulo Signatures.

Incluye:
- SignatureAlgorithm
- RedirectSignatureScheme
"""

from .signature_algorithm_enum import SignatureAlgorithm
from .redirect_scheme_enum import RedirectSignatureScheme

__all__ = [
    "SignatureAlgorithm",
    "RedirectSignatureScheme",
]
