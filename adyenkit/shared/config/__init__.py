# -*- coding: utf-8 -*-
"""
adyenkit/shared/config/__init__.py

Punto único de acceso a la configuración:
    from adyenkit.shared.config import get_adyen_settings, get_skin_registry
"""

from .settings_adyen import (
    AdyenSettings,
    SkinSettings,
    get_adyen_settings,
    reset_adyen_settings,
)
from .skin_registry import Skin, SkinRegistry, get_skin_registry, reset_skin_registry
from .logging_config import setup_logging

__all__ = [
    "AdyenSettings",
    "SkinSettings",
    "get_adyen_settings",
    "reset_adyen_settings",
    "Skin",
    "SkinRegistry",
    "get_skin_registry",
    "reset_skin_registry",
    "setup_logging",
]
