# -*- coding: utf-8 -*-
"""
tests/shared/config/test_settings_adyen.py

Tests de configuración de Adyen.

Fecha: 19/10/2026
"""

import json

import pytest
from pydantic import ValidationError

from adyenkit.modules.signatures.enums import RedirectSignatureScheme
from adyenkit.shared.config.settings_adyen import (
    AdyenSettings,
    autodetect_environment,
    get_adyen_settings,
    reset_adyen_settings,
)


def test_adyen_settings_defaults():
    """Verifica defaults seguros."""
    settings = AdyenSettings(_env_file=None)

    assert settings.adyen_environment == "test"
    assert settings.adyen_payment_flow == "select"
    assert settings.adyen_payment_flow_domain is None
    assert settings.adyen_default_skin is None
    assert settings.adyen_default_form_params == {}
    assert settings.adyen_skins == {}

    # Notificaciones: sin verificación HMAC ni Basic hasta configurarse
    assert settings.adyen_notification_hmac_key is None
    assert settings.adyen_notification_username is None
    assert settings.adyen_redirect_signature_scheme is RedirectSignatureScheme.HMAC_SHA256

    assert settings.log_level == "INFO"
    assert settings.log_format == "plain"


class TestEnvironment:

    def test_autodetect_from_python_env(self, monkeypatch):
        monkeypatch.setenv("PYTHON_ENV", "production")
        assert autodetect_environment() == "live"
        assert AdyenSettings(_env_file=None).adyen_environment == "live"

    def test_non_production_is_test(self, monkeypatch):
        monkeypatch.setenv("PYTHON_ENV", "staging")
        assert AdyenSettings(_env_file=None).adyen_environment == "test"

    def test_explicit_environment_wins(self, monkeypatch):
        monkeypatch.setenv("PYTHON_ENV", "production")
        monkeypatch.setenv("ADYEN_ENVIRONMENT", "TEST")
        assert AdyenSettings(_env_file=None).adyen_environment == "test"

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            AdyenSettings(_env_file=None, adyen_environment="staging")


class TestFromEnv:

    def test_skins_from_json(self, monkeypatch):
        monkeypatch.setenv("ADYEN_SKINS", json.dumps({
            "main": {
                "skin_code": "X7hsNDWp",
                "shared_secret": "4468D978",
                "default_form_params": {"merchant_account": "TestMerchant"},
            }
        }))
        settings = AdyenSettings(_env_file=None)
        assert settings.adyen_skins["main"].skin_code == "X7hsNDWp"
        assert settings.adyen_skins["main"].default_form_params == {"merchant_account": "TestMerchant"}

    def test_secrets_are_not_in_repr(self, monkeypatch):
        monkeypatch.setenv("ADYEN_NOTIFICATION_HMAC_KEY", "009E9E92")
        monkeypatch.setenv("ADYEN_SKINS", json.dumps({"main": {"skin_code": "a", "shared_secret": "CAFEBABE"}}))
        text = repr(AdyenSettings(_env_file=None))
        assert "009E9E92" not in text
        assert "CAFEBABE" not in text

    def test_log_level_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert AdyenSettings(_env_file=None).log_level == "DEBUG"

    def test_redirect_scheme(self, monkeypatch):
        monkeypatch.setenv("ADYEN_REDIRECT_SIGNATURE_SCHEME", "legacy_sha1")
        settings = AdyenSettings(_env_file=None)
        assert settings.adyen_redirect_signature_scheme is RedirectSignatureScheme.LEGACY_SHA1


def test_get_adyen_settings_singleton():
    """get_adyen_settings devuelve siempre la misma instancia hasta reset."""
    settings1 = get_adyen_settings()
    settings2 = get_adyen_settings()
    assert settings1 is settings2

    reset_adyen_settings()
    assert get_adyen_settings() is not settings1
# Fin del archivo tests/shared/config/test_settings_adyen.py
