# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/facades/hpp_signature.py

Firma merchantSig del Hosted Payment Page (esquema de claves ordenadas,
HMAC-SHA256 con secreto hex).

Ejemplo:
    signed = sign_hpp_params(flatten(params), shared_secret)
    signed["merchantSig"]  # -> "GJ1asjR5VmkvihDJxCd8yE2DGYOKwWwJCBiV3R51NFg="

Fecha: 19/10/2026
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from adyenkit.modules.signatures.enums import SignatureAlgorithm
from adyenkit.modules.signatures.errors import MissingSignatureError
from adyenkit.modules.signatures.facades.helpers import resolve_shared_secret
from adyenkit.modules.signatures.services import hmac_signer
from adyenkit.modules.signatures.services.string_builders import (
    MERCHANT_SIG_KEY,
    SHARED_SECRET_KEY,
    build_sorted_signature_string,
)

logger = logging.getLogger(__name__)


def calculate_hpp_signature(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
) -> str:
    """
    Calcula el merchantSig de un mapa plano.

    Raises:
        MissingSharedSecretError: Si no hay secreto explícito ni sharedSecret en el mapa
    """
    secret = resolve_shared_secret(params, shared_secret, purpose="HPP signature")
    signing_string = build_sorted_signature_string(params)
    return hmac_signer.sign(signing_string, secret, SignatureAlgorithm.SHA256)


def sign_hpp_params(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Devuelve una copia de `params` con merchantSig calculado.

    El sharedSecret (si venía en el mapa) y cualquier merchantSig previo
    se eliminan del resultado.
    """
    signed = {k: v for k, v in params.items() if k not in (MERCHANT_SIG_KEY, SHARED_SECRET_KEY)}
    signed[MERCHANT_SIG_KEY] = calculate_hpp_signature(params, shared_secret)
    logger.debug("HPP: merchantSig calculado sobre %d campos", len(signed) - 1)
    return signed


def verify_hpp_params(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
    *,
    trust_params: bool = True,
) -> bool:
    """
    Verifica el merchantSig incluido en `params`.

    Con trust_params=False el sharedSecret del mapa no se usa como secreto
    (obligatorio cuando `params` llega de un request entrante).

    Returns:
        True si la firma coincide

    Raises:
        MissingSignatureError: Si params no incluye merchantSig
        MissingSharedSecretError: Si no hay secreto
    """
    their_sig = params.get(MERCHANT_SIG_KEY)
    if not their_sig:
        raise MissingSignatureError("params must include 'merchantSig' for verification")

    secret = resolve_shared_secret(
        params, shared_secret, purpose="HPP signature", trust_params=trust_params
    )
    valid = hmac_signer.verify(
        build_sorted_signature_string(params),
        secret,
        SignatureAlgorithm.SHA256,
        their_sig,
    )
    if not valid:
        logger.warning("HPP: merchantSig inválido (merchantReference=%s)", params.get("merchantReference"))
    return valid


__all__ = [
    "calculate_hpp_signature",
    "sign_hpp_params",
    "verify_hpp_params",
]

# Fin del archivo adyenkit/modules/signatures/facades/hpp_signature.py
