# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/facades/notification_signature.py

Firma hmacSignature de notificaciones (HMAC-SHA256, secreto hex).

Se firman, en este orden y escapados:
pspReference, originalReference, merchantAccountCode, merchantReference,
value, currency, eventCode, success.

Fecha: 19/10/2026
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from adyenkit.modules.signatures.enums import SignatureAlgorithm
from adyenkit.modules.signatures.errors import MissingSignatureError
from adyenkit.modules.signatures.facades.helpers import resolve_shared_secret
from adyenkit.modules.signatures.services import hmac_signer
from adyenkit.modules.signatures.services.string_builders import (
    HMAC_SIGNATURE_KEY,
    build_notification_signature_string,
)

logger = logging.getLogger(__name__)


def sign_notification(params: Mapping[str, Any], shared_secret: Optional[str] = None) -> str:
    """Calcula el hmacSignature de una notificación."""
    secret = resolve_shared_secret(params, shared_secret, purpose="notification signature")
    return hmac_signer.sign(
        build_notification_signature_string(params),
        secret,
        SignatureAlgorithm.SHA256,
    )


def verify_notification(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
    *,
    trust_params: bool = True,
) -> bool:
    """
    Verifica el hmacSignature incluido en la notificación.

    Con trust_params=False sólo se usa `shared_secret`; el sharedSecret del
    mapa se ignora.

    Raises:
        MissingSignatureError: Si la notificación no trae hmacSignature
        MissingSharedSecretError: Si no hay secreto
    """
    their_sig = params.get(HMAC_SIGNATURE_KEY)
    if not their_sig:
        raise MissingSignatureError("params must include 'hmacSignature' for verification")

    secret = resolve_shared_secret(
        params, shared_secret, purpose="notification signature", trust_params=trust_params
    )
    valid = hmac_signer.verify(
        build_notification_signature_string(params),
        secret,
        SignatureAlgorithm.SHA256,
        their_sig,
    )
    if not valid:
        logger.warning(
            "Notificación con hmacSignature inválido: pspReference=%s eventCode=%s",
            params.get("pspReference"),
            params.get("eventCode"),
        )
    return valid


__all__ = ["sign_notification", "verify_notification"]
