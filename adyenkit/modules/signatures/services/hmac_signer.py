# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/services/hmac_signer.py

Cálculo y verificación de firmas HMAC en base64.

Convenciones de llave:
- SHA1:   el secreto se usa como bytes UTF-8 (firmas legacy de formulario/redirect).
- SHA256: el secreto es una cadena hex que se decodifica antes de usarse
          (HPP moderno y notificaciones REST).

IMPORTANTE:
- La comparación es SIEMPRE en tiempo constante (nunca "==").
- Una firma que no coincide devuelve False; sólo la falta de secreto es error.
- El secreto nunca se registra en logs.

Fecha: 19/10/2026
"""

from __future__ import annotations

import base64
import binascii
import hmac
import logging
from typing import Optional, Union

from adyenkit.modules.signatures.enums import SignatureAlgorithm
from adyenkit.modules.signatures.errors import (
    InvalidSharedSecretError,
    MissingSharedSecretError,
)

logger = logging.getLogger(__name__)


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def signing_key(secret: Optional[Union[str, bytes]], algorithm: SignatureAlgorithm) -> bytes:
    """
    Convierte el secreto compartido en la llave HMAC según el algoritmo.

    Raises:
        MissingSharedSecretError: Si el secreto es None o vacío
        InvalidSharedSecretError: Si SHA256 recibe un secreto no hexadecimal o de longitud impar
    """
    if not secret:
        raise MissingSharedSecretError("Cannot sign without a shared secret")

    if not SignatureAlgorithm(algorithm).hex_encoded_secret:
        return _to_bytes(secret)

    try:
        if isinstance(secret, bytes):
            secret = secret.decode("ascii")
        return binascii.unhexlify(secret)
    except (binascii.Error, ValueError) as e:
        raise InvalidSharedSecretError(
            "Shared secret for HMAC-SHA256 must be an even-length hex string"
        ) from e


def sign(
    message: Union[str, bytes],
    secret: Optional[Union[str, bytes]],
    algorithm: SignatureAlgorithm = SignatureAlgorithm.SHA256,
) -> str:
    """
    Calcula la firma HMAC de `message` y la devuelve en base64 sin saltos de línea.

    Args:
        message: Cadena a firmar (se codifica en UTF-8)
        secret: Secreto compartido (raw para SHA1, hex para SHA256)
        algorithm: SignatureAlgorithm.SHA1 o SignatureAlgorithm.SHA256

    Returns:
        Firma base64 estricta
    """
    algorithm = SignatureAlgorithm(algorithm)
    key = signing_key(secret, algorithm)
    digest = hmac.new(key, _to_bytes(message), algorithm.digestmod).digest()
    return base64.b64encode(digest).decode("ascii")


def secure_compare(a: Union[str, bytes, None], b: Union[str, bytes, None]) -> bool:
    """
    Comparación en tiempo constante con chequeo previo de longitud.

    Longitudes distintas -> False de inmediato; en otro caso se recorren
    todos los bytes sin cortocircuito.
    """
    if a is None or b is None:
        return False
    a_bytes = _to_bytes(a)
    b_bytes = _to_bytes(b)
    if len(a_bytes) != len(b_bytes):
        return False
    return hmac.compare_digest(a_bytes, b_bytes)


def verify(
    message: Union[str, bytes],
    secret: Optional[Union[str, bytes]],
    algorithm: SignatureAlgorithm,
    claimed_signature: Union[str, bytes, None],
) -> bool:
    """
    Recalcula la firma y la compara con la recibida.

    Returns:
        True sólo si coinciden byte a byte

    Raises:
        MissingSharedSecretError / InvalidSharedSecretError: Secreto ausente o inválido
    """
    expected = sign(message, secret, algorithm)
    if secure_compare(expected, claimed_signature):
        return True
    logger.debug("HMAC %s: la firma recibida no coincide", SignatureAlgorithm(algorithm).value)
    return False


__all__ = [
    "signing_key",
    "sign",
    "verify",
    "secure_compare",
]

# Fin del archivo adyenkit/modules/signatures/services/hmac_signer.py
