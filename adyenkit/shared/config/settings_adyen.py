# -*- coding: utf-8 -*-
"""
adyenkit/shared/config/settings_adyen.py

Configuración de la integración con Adyen.

Descripción:
    Centraliza entorno (test/live), flujo del HPP, skins registrados con su
    shared secret, credenciales de notificaciones y logging.

    Variables de entorno (case-insensitive), p. ej.:
        ADYEN_ENVIRONMENT=live
        ADYEN_DEFAULT_SKIN=main
        ADYEN_SKINS='{"main": {"skin_code": "X7hsNDWp", "shared_secret": "4468..."}}'
        ADYEN_NOTIFICATION_HMAC_KEY=009E9E92...

Fecha: 19/10/2026
"""

from __future__ import annotations

import os
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from adyenkit.modules.signatures.enums import RedirectSignatureScheme

# Entornos de la app que se mapean a "live" en Adyen.
LIVE_PYTHON_ENVIRONMENTS = ("production",)


def autodetect_environment() -> str:
    """'live' si PYTHON_ENV es producción, 'test' en cualquier otro caso."""
    python_env = os.getenv("PYTHON_ENV", "").strip().lower()
    return "live" if python_env in LIVE_PYTHON_ENVIRONMENTS else "test"


class SkinSettings(BaseModel):
    """Skin tal como se declara en configuración."""

    skin_code: str = Field(description="Código del skin asignado por Adyen")
    shared_secret: str = Field(repr=False, description="Shared secret del skin")
    default_form_params: Dict[str, Any] = Field(
        default_factory=dict,
        description="Parámetros por defecto del skin para requests HPP"
    )


class AdyenSettings(BaseSettings):
    """Configuración de la integración Adyen."""

    # =========================================================================
    # ENTORNO Y HPP
    # =========================================================================

    adyen_environment: Literal["test", "live"] = Field(
        default=None,
        validate_default=True,
        description="Entorno de Adyen; si no se define se autodetecta desde PYTHON_ENV"
    )

    adyen_payment_flow: Literal["select", "pay", "details"] = Field(
        default="select",
        description="Página de flujo de pago del HPP"
    )

    adyen_payment_flow_domain: Optional[str] = Field(
        default=None,
        description="Dominio propio del HPP (p. ej. checkout.midominio.com)"
    )

    adyen_default_skin: Optional[str] = Field(
        default=None,
        description="Nombre simbólico del skin por defecto"
    )

    adyen_default_form_params: Dict[str, Any] = Field(
        default_factory=dict,
        description="Parámetros por defecto de todo request HPP (p. ej. merchant_account)"
    )

    adyen_skins: Dict[str, SkinSettings] = Field(
        default_factory=dict,
        description="Skins registrados: nombre -> {skin_code, shared_secret, default_form_params}"
    )

    # =========================================================================
    # NOTIFICACIONES Y REDIRECTS
    # =========================================================================

    adyen_notification_hmac_key: Optional[str] = Field(
        default=None,
        repr=False,
        description="Llave HMAC (hex) para verificar notificaciones; None = sin verificación HMAC"
    )

    adyen_notification_username: Optional[str] = Field(
        default=None,
        description="Usuario HTTP Basic del endpoint de notificaciones"
    )

    adyen_notification_password: Optional[str] = Field(
        default=None,
        repr=False,
        description="Password HTTP Basic del endpoint de notificaciones"
    )

    adyen_redirect_signature_scheme: RedirectSignatureScheme = Field(
        default=RedirectSignatureScheme.HMAC_SHA256,
        description="Esquema de verificación del merchantSig en redirects"
    )

    # =========================================================================
    # LOGGING
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Nivel de logging"
    )

    log_format: Literal["plain", "pretty", "json"] = Field(
        default="plain",
        description="Formato de logging (json en producción)"
    )

    @field_validator("adyen_environment", mode="before")
    @classmethod
    def _autodetect_environment(cls, v: Optional[str]) -> str:
        """Fallback a PYTHON_ENV si no se configuró explícitamente."""
        if v:
            return str(v).strip().lower()
        return autodetect_environment()

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    # =========================================================================
    # CONFIGURACIÓN DE PYDANTIC
    # =========================================================================

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton global
_adyen_settings: Optional[AdyenSettings] = None


def get_adyen_settings() -> AdyenSettings:
    """
    Obtiene la instancia global de configuración de Adyen.

    Returns:
        AdyenSettings: Configuración de Adyen
    """
    global _adyen_settings
    if _adyen_settings is None:
        _adyen_settings = AdyenSettings()
    return _adyen_settings


def reset_adyen_settings() -> None:
    """Descarta el singleton (útil para tests)."""
    global _adyen_settings
    _adyen_settings = None


__all__ = [
    "SkinSettings",
    "AdyenSettings",
    "autodetect_environment",
    "get_adyen_settings",
    "reset_adyen_settings",
]
# Fin del archivo adyenkit/shared/config/settings_adyen.py
