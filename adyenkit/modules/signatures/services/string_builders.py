# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/services/string_builders.py

Construcción byte a byte de las cadenas que se firman.

Esquemas (contrato con el proveedor, NO reordenar):

A) Claves ordenadas (HPP moderno):
   claves ordenadas unidas por ":" + ":" + valores en el mismo orden unidos por ":".
   Cada clave y valor se escapa: "\\" -> "\\\\", ":" -> "\\:".
   Nunca se firman sharedSecret, merchantSig ni hmacSignature.

B) Posicional (formulario legacy, direcciones, shopper, redirect):
   concatenación sin separadores ni escapado, "" para campos ausentes.

C) Open invoice:
   flatten({merchantSig, openinvoicedata.*}) ordenado;
   claves unidas por ":" + "|" + valores unidos por ":". Sin escapado.

Notificaciones REST: valores de una lista fija de campos, escapados como en A,
unidos por ":".

Fecha: 19/10/2026
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from adyenkit.modules.signatures.utils.key_normalizer import camelize
from adyenkit.modules.signatures.utils.parameter_flattener import flatten, stringify

# =============================================================================
# CONSTANTES DE WIRE
# =============================================================================

SHARED_SECRET_KEY = "sharedSecret"
MERCHANT_SIG_KEY = "merchantSig"
HMAC_SIGNATURE_KEY = "hmacSignature"

# Claves que nunca forman parte de lo firmado en el esquema A.
UNSIGNED_KEYS = frozenset({SHARED_SECRET_KEY, MERCHANT_SIG_KEY, HMAC_SIGNATURE_KEY})

# Orden canónico de la firma legacy del formulario de pago.
CANONICAL_FIELD_ORDER: Sequence[str] = (
    "paymentAmount",
    "currencyCode",
    "shipBeforeDate",
    "merchantReference",
    "skinCode",
    "merchantAccount",
    "sessionValidity",
    "shopperEmail",
    "shopperReference",
    "recurringContract",
    "allowedMethods",
    "blockedMethods",
    "shopperStatement",
    "merchantReturnData",
    "billingAddressType",
    "offset",
)

# billingAddressSig / deliveryAddressSig
ADDRESS_FIELD_ORDER: Sequence[str] = (
    "street",
    "houseNumberOrName",
    "city",
    "postalCode",
    "stateOrProvince",
    "country",
)

# shopperSig
SHOPPER_FIELD_ORDER: Sequence[str] = (
    "firstName",
    "lastName",
    "socialSecurityNumber",
)

# merchantSig del redirect de resultado (legacy SHA1)
REDIRECT_FIELD_ORDER: Sequence[str] = (
    "authResult",
    "pspReference",
    "merchantReference",
    "skinCode",
    "merchantReturnData",
)

# hmacSignature de notificaciones
NOTIFICATION_FIELD_ORDER: Sequence[str] = (
    "pspReference",
    "originalReference",
    "merchantAccountCode",
    "merchantReference",
    "value",
    "currency",
    "eventCode",
    "success",
)

OPEN_INVOICE_NAMESPACE = "openinvoicedata"


# =============================================================================
# ESCAPADO
# =============================================================================

def escape_value(value: Any) -> str:
    """Escapa "\\" y ":" (en ese orden) para el esquema de claves ordenadas."""
    return stringify(value).replace("\\", "\\\\").replace(":", "\\:")


def _camelized(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    return {camelize(k): v for k, v in (params or {}).items()}


# =============================================================================
# ESQUEMA A: CLAVES ORDENADAS
# =============================================================================

def signable_items(params: Mapping[str, Any]) -> list:
    """Pares (clave, valor) firmables, ordenados por clave."""
    return sorted(
        ((str(k), v) for k, v in params.items() if str(k) not in UNSIGNED_KEYS),
        key=lambda item: item[0],
    )


def build_sorted_signature_string(params: Mapping[str, Any]) -> str:
    """
    Cadena a firmar del esquema de claves ordenadas.

    Ejemplo:
        {"b": "v2", "a": "v1"} -> "a:b:v1:v2"
    """
    items = signable_items(params)
    keys = [escape_value(k) for k, _ in items]
    values = [escape_value(v) for _, v in items]
    return ":".join(keys + values)


# =============================================================================
# ESQUEMA B: POSICIONAL
# =============================================================================

def build_positional_signature_string(
    params: Optional[Mapping[str, Any]],
    fields: Iterable[str] = CANONICAL_FIELD_ORDER,
) -> str:
    """
    Concatena los valores de `fields` en orden, sin separadores ni escapado.

    Acepta claves snake_case o camelCase; los campos ausentes aportan "".
    """
    normalized = _camelized(params)
    return "".join(stringify(normalized.get(field)) for field in fields)


def build_address_signature_string(address: Optional[Mapping[str, Any]]) -> str:
    return build_positional_signature_string(address, ADDRESS_FIELD_ORDER)


def build_shopper_signature_string(shopper: Optional[Mapping[str, Any]]) -> str:
    return build_positional_signature_string(shopper, SHOPPER_FIELD_ORDER)


def build_redirect_signature_string(params: Optional[Mapping[str, Any]]) -> str:
    return build_positional_signature_string(params, REDIRECT_FIELD_ORDER)


# =============================================================================
# ESQUEMA C: OPEN INVOICE
# =============================================================================

def build_open_invoice_signature_string(
    merchant_sig: str,
    open_invoice_data: Optional[Mapping[str, Any]],
) -> str:
    """
    Cadena a firmar del open invoice.

    El merchantSig ya calculado entra como un campo más del sub-árbol
    openinvoicedata.* antes de ordenar.
    """
    flat = flatten({
        MERCHANT_SIG_KEY: merchant_sig,
        OPEN_INVOICE_NAMESPACE: open_invoice_data or {},
    })
    items = sorted(flat.items(), key=lambda item: item[0])
    keys = ":".join(k for k, _ in items)
    values = ":".join(v for _, v in items)
    return f"{keys}|{values}"


# =============================================================================
# NOTIFICACIONES
# =============================================================================

def build_notification_signature_string(params: Optional[Mapping[str, Any]]) -> str:
    """Valores escapados de NOTIFICATION_FIELD_ORDER unidos por ":"."""
    params = params or {}
    return ":".join(escape_value(params.get(field)) for field in NOTIFICATION_FIELD_ORDER)


__all__ = [
    "SHARED_SECRET_KEY",
    "MERCHANT_SIG_KEY",
    "HMAC_SIGNATURE_KEY",
    "UNSIGNED_KEYS",
    "CANONICAL_FIELD_ORDER",
    "ADDRESS_FIELD_ORDER",
    "SHOPPER_FIELD_ORDER",
    "REDIRECT_FIELD_ORDER",
    "NOTIFICATION_FIELD_ORDER",
    "OPEN_INVOICE_NAMESPACE",
    "escape_value",
    "signable_items",
    "build_sorted_signature_string",
    "build_positional_signature_string",
    "build_address_signature_string",
    "build_shopper_signature_string",
    "build_redirect_signature_string",
    "build_open_invoice_signature_string",
    "build_notification_signature_string",
]

# Fin del archivo adyenkit/modules/signatures/services/string_builders.py
