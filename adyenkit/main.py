# -*- coding: utf-8 -*-
"""
adyenkit/main.py

Punto de entrada de la capa web de adyenkit.

Ajustes clave:
- .env cargado antes de construir la configuración (sin pisar el entorno)
- Logging configurado desde AdyenSettings (plain/json)
- Router /adyen (notificaciones y redirect de resultado) y /metrics

Uso:
    uvicorn adyenkit.main:app

Fecha: 19/10/2026
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_ENV_PATH = Path.cwd() / ".env"
load_dotenv(dotenv_path=_ENV_PATH, override=False)

from fastapi import FastAPI

from adyenkit.modules.notifications.routes import router as adyen_router
from adyenkit.modules.signatures.enums import RedirectSignatureScheme
from adyenkit.shared.config import (
    AdyenSettings,
    SkinRegistry,
    get_adyen_settings,
    get_skin_registry,
    setup_logging,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[AdyenSettings] = None,
    registry: Optional[SkinRegistry] = None,
) -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Args:
        settings: Configuración explícita; si se pasa, reemplaza a get_adyen_settings()
        registry: Registro de skins explícito; por defecto se construye desde `settings`
    """
    app = FastAPI(title="adyenkit", version="0.1.0")
    app.include_router(adyen_router)

    if settings is not None:
        registry = registry or SkinRegistry.from_settings(settings)
        app.dependency_overrides[get_adyen_settings] = lambda: settings
    else:
        settings = get_adyen_settings()
    if registry is not None:
        app.dependency_overrides[get_skin_registry] = lambda: registry

    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "adyenkit listo: environment=%s redirect_scheme=%s hmac_notifications=%s",
        settings.adyen_environment,
        RedirectSignatureScheme(settings.adyen_redirect_signature_scheme).value,
        bool(settings.adyen_notification_hmac_key),
    )
    return app


app = create_app()

# Fin del archivo adyenkit/main.py
