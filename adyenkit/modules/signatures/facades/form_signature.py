# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/facades/form_signature.py

Firmas legacy del formulario de pago y del redirect de resultado.

Todas usan concatenación posicional sin separadores (salvo open invoice) y,
por defecto, HMAC-SHA1 con el secreto como bytes UTF-8. El algoritmo se
puede cambiar a SHA256 (secreto hex) para cuentas que ya migraron.

Campos firmados:
- merchantSig:         CANONICAL_FIELD_ORDER
- billingAddressSig:   billing_address.{street, house_number_or_name, city, postal_code, state_or_province, country}
- deliveryAddressSig:  delivery_address.{...mismo orden...}
- shopperSig:          shopper.{first_name, last_name, social_security_number}
- openinvoicedata.sig: merchantSig + openinvoicedata.* ordenados ("claves|valores")
- redirect merchantSig: authResult + pspReference + merchantReference + skinCode + merchantReturnData

Fecha: 19/10/2026
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from adyenkit.modules.signatures.enums import SignatureAlgorithm
from adyenkit.modules.signatures.facades.helpers import lookup, resolve_shared_secret
from adyenkit.modules.signatures.services import hmac_signer
from adyenkit.modules.signatures.services.string_builders import (
    MERCHANT_SIG_KEY,
    build_address_signature_string,
    build_open_invoice_signature_string,
    build_positional_signature_string,
    build_redirect_signature_string,
    build_shopper_signature_string,
)
from adyenkit.shared.config.skin_registry import SkinRegistry, get_skin_registry

logger = logging.getLogger(__name__)

LEGACY_ALGORITHM = SignatureAlgorithm.SHA1


# =============================================================================
# MERCHANT SIGNATURE
# =============================================================================

def calculate_signature_string(params: Mapping[str, Any]) -> str:
    """Cadena posicional del merchantSig legacy."""
    return build_positional_signature_string(params)


def calculate_signature(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
    algorithm: SignatureAlgorithm = LEGACY_ALGORITHM,
) -> str:
    """
    merchantSig legacy del formulario de pago.

    Raises:
        MissingSharedSecretError: Si no hay secreto (explícito o shared_secret en params)
    """
    secret = resolve_shared_secret(params, shared_secret, purpose="payment request signature")
    return hmac_signer.sign(calculate_signature_string(params), secret, algorithm)


# =============================================================================
# DIRECCIONES Y SHOPPER
# =============================================================================

def calculate_billing_address_signature_string(address: Optional[Mapping[str, Any]]) -> str:
    return build_address_signature_string(address)


def calculate_delivery_address_signature_string(address: Optional[Mapping[str, Any]]) -> str:
    return build_address_signature_string(address)


def calculate_shopper_signature_string(shopper: Optional[Mapping[str, Any]]) -> str:
    return build_shopper_signature_string(shopper)


def calculate_billing_address_signature(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
    algorithm: SignatureAlgorithm = LEGACY_ALGORITHM,
) -> str:
    """billingAddressSig calculado sobre params["billing_address"]."""
    secret = resolve_shared_secret(params, shared_secret, purpose="billing address signature")
    return hmac_signer.sign(
        calculate_billing_address_signature_string(lookup(params, "billingAddress")),
        secret,
        algorithm,
    )


def calculate_delivery_address_signature(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
    algorithm: SignatureAlgorithm = LEGACY_ALGORITHM,
) -> str:
    """deliveryAddressSig calculado sobre params["delivery_address"]."""
    secret = resolve_shared_secret(params, shared_secret, purpose="delivery address signature")
    return hmac_signer.sign(
        calculate_delivery_address_signature_string(lookup(params, "deliveryAddress")),
        secret,
        algorithm,
    )


def calculate_shopper_signature(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
    algorithm: SignatureAlgorithm = LEGACY_ALGORITHM,
) -> str:
    """shopperSig calculado sobre params["shopper"]."""
    secret = resolve_shared_secret(params, shared_secret, purpose="shopper signature")
    return hmac_signer.sign(
        calculate_shopper_signature_string(lookup(params, "shopper")),
        secret,
        algorithm,
    )


# =============================================================================
# OPEN INVOICE
# =============================================================================

def calculate_open_invoice_signature_string(
    merchant_sig: str,
    open_invoice_data: Optional[Mapping[str, Any]],
) -> str:
    return build_open_invoice_signature_string(merchant_sig, open_invoice_data)


def calculate_open_invoice_signature(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
    algorithm: SignatureAlgorithm = LEGACY_ALGORITHM,
) -> str:
    """
    openinvoicedata.sig: firma compuesta que incluye el merchantSig ya calculado.

    Si params trae merchantSig se reutiliza; en otro caso se calcula con
    el mismo secreto y algoritmo.
    """
    secret = resolve_shared_secret(params, shared_secret, purpose="open invoice signature")
    merchant_sig = lookup(params, MERCHANT_SIG_KEY) or calculate_signature(params, secret, algorithm)
    return hmac_signer.sign(
        calculate_open_invoice_signature_string(merchant_sig, lookup(params, "openinvoicedata")),
        secret,
        algorithm,
    )


# =============================================================================
# REDIRECT DE RESULTADO
# =============================================================================

def redirect_signature_string(params: Mapping[str, Any]) -> str:
    """Cadena posicional del merchantSig que Adyen adjunta al redirect."""
    return build_redirect_signature_string(params)


def redirect_signature(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
    registry: Optional[SkinRegistry] = None,
) -> str:
    """
    Calcula la firma esperada del redirect.

    El secreto se busca por skinCode en `registry` (por defecto el registro
    global) si no se pasa explícito. Un sharedSecret dentro de `params` se
    ignora siempre: el mapa viene del navegador del comprador.

    Raises:
        MissingSharedSecretError: Si no hay secreto
    """
    if not shared_secret and registry is None:
        registry = get_skin_registry()
    secret = resolve_shared_secret(
        params, shared_secret, registry,
        purpose="redirect signature",
        trust_params=False,
    )
    return hmac_signer.sign(redirect_signature_string(params), secret, LEGACY_ALGORITHM)


def redirect_signature_check(
    params: Mapping[str, Any],
    shared_secret: Optional[str] = None,
    registry: Optional[SkinRegistry] = None,
) -> bool:
    """
    True sólo si el merchantSig del redirect es auténtico.

    Si devuelve False el request puede ser una falsificación y no debe procesarse.
    """
    expected = redirect_signature(params, shared_secret, registry)
    valid = hmac_signer.secure_compare(expected, params.get(MERCHANT_SIG_KEY))
    if not valid:
        logger.warning(
            "Redirect con merchantSig inválido: merchantReference=%s skinCode=%s",
            params.get("merchantReference"),
            params.get("skinCode"),
        )
    return valid


def is_payment_success(params: Mapping[str, Any]) -> bool:
    return params.get("authResult") == "AUTHORISED"


__all__ = [
    "LEGACY_ALGORITHM",
    "calculate_signature_string",
    "calculate_signature",
    "calculate_billing_address_signature_string",
    "calculate_delivery_address_signature_string",
    "calculate_shopper_signature_string",
    "calculate_billing_address_signature",
    "calculate_delivery_address_signature",
    "calculate_shopper_signature",
    "calculate_open_invoice_signature_string",
    "calculate_open_invoice_signature",
    "redirect_signature_string",
    "redirect_signature",
    "redirect_signature_check",
    "is_payment_success",
]

# Fin del archivo adyenkit/modules/signatures/facades/form_signature.py
