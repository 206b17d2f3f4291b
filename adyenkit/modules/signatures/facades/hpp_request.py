# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/facades/hpp_request.py

Request y response del Hosted Payment Page (HPP).

HppRequest:
    Completa los parámetros de pago con los defaults de configuración y del
    skin, valida los obligatorios, formatea fechas, aplana y firma
    (merchantSig, HMAC-SHA256) y arma la URL de redirect.

HppResponse:
    Verifica el merchantSig que Adyen adjunta al volver del HPP.

Ejemplo:
    request = HppRequest(
        {"currency_code": "EUR", "payment_amount": 199, ...},
        skin="main",
        environment="test",
    )
    return RedirectResponse(request.redirect_url())

Fecha: 19/10/2026
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode

from adyenkit.modules.signatures.errors import (
    MissingParameterError,
    MissingSharedSecretError,
    MissingSignatureError,
    ParameterFormatError,
    UnknownSkinError,
)
from adyenkit.modules.signatures.facades.hpp_signature import (
    sign_hpp_params,
    verify_hpp_params,
)
from adyenkit.modules.signatures.services.string_builders import MERCHANT_SIG_KEY
from adyenkit.modules.signatures.utils import (
    FlatParameterMap,
    flatten,
    format_date,
    format_timestamp,
    gzip_base64,
)
from adyenkit.shared.config.settings_adyen import AdyenSettings, get_adyen_settings
from adyenkit.shared.config.skin_registry import Skin, SkinRegistry, get_skin_registry

logger = logging.getLogger(__name__)

HPP_DOMAIN = "{environment}.adyen.com"
HPP_URL = "https://{domain}/hpp/{payment_flow}.shtml"
PAYMENT_METHODS_FLOW = "directory"

MANDATORY_ATTRIBUTES = (
    "currency_code",
    "payment_amount",
    "merchant_account",
    "skin_code",
    "ship_before_date",
    "session_validity",
)


class HppRequest:
    """
    Request de pago para el HPP.

    Args:
        parameters: Parámetros de pago en snake_case (sin merchant_sig)
        skin: Skin explícito, nombre de un skin registrado, o None para el default
        environment: "test" / "live"; None usa el de configuración
        shared_secret: Secreto explícito; None usa el del skin
        settings: Configuración (default: get_adyen_settings())
        registry: Registro de skins (default: construido desde settings)

    Raises:
        UnknownSkinError: Si `skin` es un nombre no registrado
    """

    def __init__(
        self,
        parameters: Mapping[str, Any],
        *,
        skin: Union[Skin, str, None] = None,
        environment: Optional[str] = None,
        shared_secret: Optional[str] = None,
        settings: Optional[AdyenSettings] = None,
        registry: Optional[SkinRegistry] = None,
    ) -> None:
        self.parameters = parameters
        self._settings = settings
        self._registry = registry
        self._environment = environment
        self._shared_secret = shared_secret

        if skin is None or isinstance(skin, Skin):
            self._skin = skin
        else:
            self._skin = self.registry.by_name(skin)
            if self._skin is None:
                raise UnknownSkinError(f"Skin not registered: {skin!r}")

    # -------------------------------------------------------------------------
    # Colaboradores
    # -------------------------------------------------------------------------

    @property
    def settings(self) -> AdyenSettings:
        if self._settings is None:
            self._settings = get_adyen_settings()
        return self._settings

    @property
    def registry(self) -> SkinRegistry:
        if self._registry is None:
            if self._settings is not None:
                self._registry = SkinRegistry.from_settings(self._settings)
            else:
                self._registry = get_skin_registry()
        return self._registry

    @property
    def skin(self) -> Optional[Skin]:
        """Skin explícito o, en su defecto, el skin por defecto (None si no existe)."""
        if self._skin is not None:
            return self._skin
        return self.registry.by_name(self.settings.adyen_default_skin)

    @property
    def environment(self) -> str:
        return str(self._environment or self.settings.adyen_environment)

    @property
    def shared_secret(self) -> Optional[str]:
        if self._shared_secret:
            return self._shared_secret
        skin = self.skin
        return skin.shared_secret if skin else None

    # -------------------------------------------------------------------------
    # URLs
    # -------------------------------------------------------------------------

    def domain(self) -> str:
        return self.settings.adyen_payment_flow_domain or HPP_DOMAIN.format(
            environment=self.environment
        )

    def url(self, payment_flow: Optional[str] = None) -> str:
        """URL absoluta del HPP para `payment_flow` (default: configuración)."""
        payment_flow = payment_flow or self.settings.adyen_payment_flow
        return HPP_URL.format(domain=self.domain(), payment_flow=payment_flow)

    # -------------------------------------------------------------------------
    # Parámetros
    # -------------------------------------------------------------------------

    def formatted_parameters(self) -> Dict[str, Any]:
        """
        Parámetros completos y formateados (aún anidados, claves snake_case).

        Precedencia: defaults de configuración < defaults del skin < parámetros explícitos.

        Raises:
            ParameterFormatError: Si parameters no es un mapping o una fecha es inválida
            MissingParameterError: Si falta un atributo obligatorio
        """
        if not isinstance(self.parameters, Mapping):
            raise ParameterFormatError("Cannot generate request: parameters should be a mapping!")

        skin = self.skin
        formatted: Dict[str, Any] = dict(self.settings.adyen_default_form_params)
        if skin is not None:
            formatted.update(skin.default_form_params)
        formatted.update(self.parameters)
        if skin is not None and not self.parameters.get("skin_code"):
            formatted["skin_code"] = skin.skin_code

        for attribute in MANDATORY_ATTRIBUTES:
            value = formatted.get(attribute)
            if value is None or value is False:
                raise MissingParameterError(
                    f"Cannot generate request: :{attribute} attribute not found!"
                )

        if formatted.pop("recurring", None) is True:
            formatted["recurring_contract"] = "RECURRING"
        order_data_raw = formatted.pop("order_data_raw", None)
        if order_data_raw:
            formatted["order_data"] = gzip_base64(order_data_raw)
        formatted["ship_before_date"] = format_date(formatted["ship_before_date"])
        formatted["session_validity"] = format_timestamp(formatted["session_validity"])
        return formatted

    def flat_payment_parameters(self) -> FlatParameterMap:
        """Parámetros aplanados (claves camelCase, valores str) con merchantSig."""
        signed = sign_hpp_params(flatten(self.formatted_parameters()), self.shared_secret)
        logger.debug(
            "HPP request firmado: skinCode=%s merchantReference=%s",
            signed.get("skinCode"),
            signed.get("merchantReference"),
        )
        return signed

    def redirect_url(self) -> str:
        """URL del HPP con los parámetros firmados en el query string."""
        return f"{self.url()}?{urlencode(self.flat_payment_parameters())}"

    def payment_methods_url(self) -> str:
        """Como redirect_url, pero contra directory.shtml (lista de métodos de pago)."""
        return f"{self.url(PAYMENT_METHODS_FLOW)}?{urlencode(self.flat_payment_parameters())}"


class HppResponse:
    """
    Parámetros del redirect de vuelta desde el HPP.

    Si no se pasa shared_secret se usa el del skin cuyo código viene en skinCode.
    El sharedSecret que pudiera venir en `params` nunca se usa para verificar.

    Raises:
        ParameterFormatError: Si params no es un mapping
        MissingSignatureError: Si params no incluye merchantSig
        UnknownSkinError: Si skinCode no corresponde a ningún skin registrado
        MissingSharedSecretError: Si el skin no tiene shared secret
    """

    def __init__(
        self,
        params: Mapping[str, Any],
        shared_secret: Optional[str] = None,
        registry: Optional[SkinRegistry] = None,
    ) -> None:
        if not isinstance(params, Mapping):
            raise ParameterFormatError("params should be a mapping")
        if MERCHANT_SIG_KEY not in params:
            raise MissingSignatureError("params should contain 'merchantSig'")

        self.params = params
        registry = registry if registry is not None else get_skin_registry()
        if not shared_secret:
            skin = registry.by_code(params.get("skinCode"))
            if skin is None:
                raise UnknownSkinError(f"Skin code not registered: {params.get('skinCode')!r}")
            if not skin.shared_secret:
                raise MissingSharedSecretError(f"Skin {skin.name!r} has no shared secret")
            shared_secret = skin.shared_secret
        self.shared_secret = shared_secret

    def has_valid_signature(self) -> bool:
        """
        True sólo si el merchantSig es correcto.

        Si devuelve False el request puede ser una falsificación y no debe procesarse.
        """
        return verify_hpp_params(self.params, self.shared_secret, trust_params=False)

    def is_authorised(self) -> bool:
        return self.params.get("authResult") == "AUTHORISED"


__all__ = [
    "HPP_DOMAIN",
    "HPP_URL",
    "MANDATORY_ATTRIBUTES",
    "HppRequest",
    "HppResponse",
]

# Fin del archivo adyenkit/modules/signatures/facades/hpp_request.py
