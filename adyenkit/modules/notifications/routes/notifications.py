# -*- coding: utf-8 -*-
"""
adyenkit/modules/notifications/routes/notifications.py

Endpoints de Adyen.

Endpoints:
- POST /adyen/notifications    (form-encoded, server-to-server)
- GET  /adyen/payments/result  (redirect del navegador al volver del HPP)

Reglas:
- Firma inválida o ausente -> 401; el evento NO se procesa.
- Skin desconocido / sin secreto / payload inválido -> 400.
- Un campo repetido en el body o query string -> 400.
- Las notificaciones aceptadas se responden con "[accepted]".

Fecha: 19/10/2026
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from pydantic import ValidationError
from starlette.responses import PlainTextResponse

from adyenkit.modules.notifications.metrics.prometheus_exporter import (
    observe_notification_received,
    observe_notification_rejected,
    observe_notification_verified,
    observe_redirect_verified,
)
from adyenkit.modules.notifications.schemas import Notification
from adyenkit.modules.signatures.enums import RedirectSignatureScheme
from adyenkit.modules.signatures.errors import (
    InvalidSignatureError,
    MissingSignatureError,
    ParameterFormatError,
    SignatureConfigurationError,
    UnknownSkinError,
)
from adyenkit.modules.signatures.facades.form_signature import redirect_signature_check
from adyenkit.modules.signatures.facades.hpp_request import HppResponse
from adyenkit.modules.signatures.facades.notification_signature import verify_notification
from adyenkit.modules.signatures.services.hmac_signer import secure_compare
from adyenkit.modules.signatures.services.string_builders import MERCHANT_SIG_KEY
from adyenkit.shared.config.settings_adyen import AdyenSettings, get_adyen_settings
from adyenkit.shared.config.skin_registry import SkinRegistry, get_skin_registry

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/adyen",
    tags=["adyen"],
)

http_basic = HTTPBasic(auto_error=False)


# =============================================================================
# HELPERS
# =============================================================================

def _unique_params(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """
    Pares clave/valor como dict plano.

    Raises:
        ParameterFormatError: Si una clave aparece más de una vez
    """
    params: Dict[str, str] = {}
    for key, value in pairs:
        if key in params:
            logger.warning("Campo repetido en request de Adyen: %s", key)
            raise ParameterFormatError(f"Duplicate field: {key!r}")
        params[key] = value
    return params


async def _form_params(request: Request) -> Dict[str, str]:
    """Body application/x-www-form-urlencoded como dict plano."""
    body = (await request.body()).decode("utf-8")
    return _unique_params(parse_qsl(body, keep_blank_values=True))


def _is_authorized(
    credentials: Optional[HTTPBasicCredentials],
    settings: AdyenSettings,
) -> bool:
    """HTTP Basic sólo se exige si hay usuario configurado."""
    if not settings.adyen_notification_username:
        return True
    if credentials is None:
        return False
    username_ok = secure_compare(credentials.username, settings.adyen_notification_username)
    password_ok = secure_compare(credentials.password, settings.adyen_notification_password or "")
    return username_ok and password_ok


def _verify_notification_or_raise(params: Mapping[str, Any], hmac_key: str) -> None:
    """
    Raises:
        MissingSignatureError: Si falta hmacSignature
        InvalidSignatureError: Si la firma no coincide
    """
    valid = verify_notification(params, hmac_key, trust_params=False)
    observe_notification_verified("success" if valid else "failure")
    if not valid:
        raise InvalidSignatureError("Notification hmacSignature mismatch")


def _verify_redirect_or_raise(
    params: Mapping[str, Any],
    scheme: RedirectSignatureScheme,
    registry: SkinRegistry,
) -> None:
    """
    Raises:
        MissingSignatureError: Si falta merchantSig
        UnknownSkinError: Si skinCode no corresponde a ningún skin registrado
        MissingSharedSecretError: Si el skin no tiene secreto
        InvalidSignatureError: Si la firma no coincide
    """
    if not params.get(MERCHANT_SIG_KEY):
        raise MissingSignatureError("Redirect without merchantSig")
    if registry.by_code(params.get("skinCode")) is None:
        raise UnknownSkinError(f"Unknown skinCode: {params.get('skinCode')!r}")

    if scheme == RedirectSignatureScheme.LEGACY_SHA1:
        valid = redirect_signature_check(params, registry=registry)
    else:
        valid = HppResponse(params, registry=registry).has_valid_signature()

    observe_redirect_verified(scheme.value, "success" if valid else "failure")
    if not valid:
        raise InvalidSignatureError("Forgery!")


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post(
    "/notifications",
    status_code=status.HTTP_200_OK,
    response_class=PlainTextResponse,
)
async def receive_notification(
    request: Request,
    settings: AdyenSettings = Depends(get_adyen_settings),
    credentials: Optional[HTTPBasicCredentials] = Depends(http_basic),
) -> PlainTextResponse:
    """
    Notificación HTTP POST de Adyen.

    Verifica HTTP Basic (si está configurado) y hmacSignature (si hay llave HMAC).
    """
    observe_notification_received()

    if not _is_authorized(credentials, settings):
        observe_notification_rejected("unauthorized")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid notification credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    try:
        params = await _form_params(request)
    except ParameterFormatError as e:
        observe_notification_rejected("duplicate_field")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if settings.adyen_notification_hmac_key:
        try:
            _verify_notification_or_raise(params, settings.adyen_notification_hmac_key)
        except MissingSignatureError as e:
            observe_notification_rejected("missing_signature")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
        except InvalidSignatureError as e:
            observe_notification_rejected("invalid_signature")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    try:
        notification = Notification.from_params(params)
    except ValidationError as e:
        observe_notification_rejected("invalid_payload")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(
        "Notificación aceptada: eventCode=%s pspReference=%s success=%s",
        notification.event_code,
        notification.psp_reference,
        notification.success,
    )
    return PlainTextResponse("[accepted]")


@router.get("/payments/result")
async def payment_result(
    request: Request,
    settings: AdyenSettings = Depends(get_adyen_settings),
    registry: SkinRegistry = Depends(get_skin_registry),
) -> Dict[str, Any]:
    """
    Redirect del navegador tras el pago en el HPP.

    Si la firma no es válida el request puede ser una falsificación: 401.
    """
    try:
        params = _unique_params(request.query_params.multi_items())
    except ParameterFormatError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    scheme = RedirectSignatureScheme(settings.adyen_redirect_signature_scheme)

    try:
        _verify_redirect_or_raise(params, scheme, registry)
    except (MissingSignatureError, InvalidSignatureError) as e:
        logger.warning(
            "Redirect rechazado: merchantReference=%s reason=%s",
            params.get("merchantReference"),
            e,
        )
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except SignatureConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(
        "Resultado de pago recibido: merchantReference=%s authResult=%s",
        params.get("merchantReference"),
        params.get("authResult"),
    )
    return {
        "merchant_reference": params.get("merchantReference"),
        "psp_reference": params.get("pspReference"),
        "skin_code": params.get("skinCode"),
        "auth_result": params.get("authResult"),
        "authorised": params.get("authResult") == "AUTHORISED",
    }


__all__ = ["router"]

# Fin del archivo adyenkit/modules/notifications/routes/notifications.py
