# -*- coding: utf-8 -*-
"""
Config global de tests para adyenkit.

- Aísla variables ADYEN_* / LOG_* / PYTHON_ENV del shell del dev
- Limpia los singletons de configuración y del registro de skins
- Fija anyio al backend asyncio
- Expone skins y secretos de prueba (vectores documentados por Adyen)
"""

import os

import pytest

from adyenkit.shared.config import (
    AdyenSettings,
    SkinRegistry,
    reset_adyen_settings,
    reset_skin_registry,
)

# Secretos de los ejemplos documentados por Adyen
LEGACY_SECRET = "Kah942*$7sdp0)"
HPP_SECRET_SKIN1 = "4468D9782DEF54FCD706C9100C71EC43932B1EBC2ACF6BA0560C05AAA7550C48"
HPP_SECRET_SKIN2 = "21F58626031F08A30F6BD07BB8AC12C19B56F6C99C6E1DA991A52A1C64A4C010"
NOTIFICATION_HMAC_KEY = "009E9E92268087AAD241638D3325201AFC8AAE6F3DCD369B6D32E87129FFAB10"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _isolate_env_and_singletons(monkeypatch):
    """Evita heredar configuración del shell y limpia singletons en cada test."""
    for k in list(os.environ.keys()):
        if k.startswith(("ADYEN_", "LOG_")):
            monkeypatch.delenv(k, raising=False)
    monkeypatch.delenv("PYTHON_ENV", raising=False)

    reset_adyen_settings()
    reset_skin_registry()
    yield
    reset_adyen_settings()
    reset_skin_registry()


@pytest.fixture
def adyen_settings():
    """Configuración con dos skins HPP y un skin legacy."""
    return AdyenSettings(
        _env_file=None,
        adyen_environment="test",
        adyen_default_skin="skin1",
        adyen_default_form_params={"merchant_account": "TestMerchant"},
        adyen_skins={
            "skin1": {"skin_code": "abcdefgh", "shared_secret": HPP_SECRET_SKIN1},
            "skin2": {
                "skin_code": "ijklmnop",
                "shared_secret": HPP_SECRET_SKIN2,
                "default_form_params": {"merchant_account": "OtherMerchant"},
            },
            "testing": {"skin_code": "4aD37dJA", "shared_secret": LEGACY_SECRET},
        },
        adyen_notification_hmac_key=NOTIFICATION_HMAC_KEY,
    )


@pytest.fixture
def skin_registry(adyen_settings):
    return SkinRegistry.from_settings(adyen_settings)
