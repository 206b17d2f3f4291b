# -*- coding: utf-8 -*-
"""
Tests del hmacSignature de notificaciones.

Fecha: 19/10/2026
"""

import pytest

from adyenkit.modules.signatures.errors import MissingSharedSecretError, MissingSignatureError
from adyenkit.modules.signatures.facades.notification_signature import (
    sign_notification,
    verify_notification,
)

HMAC_KEY = "009E9E92268087AAD241638D3325201AFC8AAE6F3DCD369B6D32E87129FFAB10"
EXPECTED_SIG = "S+5bAYKLd+L2A07Pal0pG/qBarnInaIe709YNzNcHOA="


@pytest.fixture
def notification_params():
    return {
        "pspReference": "7914073251449896",
        "originalReference": "",
        "merchantAccountCode": "TestMerchant",
        "merchantReference": "TestPayment-1407325143704",
        "value": "8650",
        "currency": "EUR",
        "eventCode": "AUTHORISATION",
        "success": "true",
    }


class TestNotificationSignature:

    def test_known_vector(self, notification_params):
        assert sign_notification(notification_params, HMAC_KEY) == EXPECTED_SIG

    def test_verify_known_vector(self, notification_params):
        params = dict(notification_params, hmacSignature=EXPECTED_SIG)
        assert verify_notification(params, HMAC_KEY) is True

    def test_verify_with_other_secret(self, notification_params):
        params = dict(notification_params, hmacSignature=EXPECTED_SIG)
        assert verify_notification(params, "1234") is False

    def test_shared_secret_in_params(self, notification_params):
        params = dict(notification_params, sharedSecret=HMAC_KEY, hmacSignature=EXPECTED_SIG)
        assert verify_notification(params) is True

    def test_untrusted_params_ignore_shared_secret(self, notification_params):
        params = dict(notification_params, sharedSecret=HMAC_KEY, hmacSignature=EXPECTED_SIG)
        with pytest.raises(MissingSharedSecretError):
            verify_notification(params, trust_params=False)

    def test_untrusted_params_with_explicit_secret(self, notification_params):
        params = dict(notification_params, sharedSecret="1234", hmacSignature=EXPECTED_SIG)
        assert verify_notification(params, HMAC_KEY, trust_params=False) is True

    def test_explicit_secret_wins_over_params(self, notification_params):
        params = dict(notification_params, sharedSecret="1234", hmacSignature=EXPECTED_SIG)
        assert verify_notification(params, HMAC_KEY) is True

    def test_extra_fields_are_not_signed(self, notification_params):
        params = dict(notification_params, paymentMethod="visa", hmacSignature=EXPECTED_SIG)
        assert verify_notification(params, HMAC_KEY) is True

    def test_tampered_success(self, notification_params):
        params = dict(notification_params, success="false", hmacSignature=EXPECTED_SIG)
        assert verify_notification(params, HMAC_KEY) is False

    def test_missing_signature_raises(self, notification_params):
        with pytest.raises(MissingSignatureError):
            verify_notification(notification_params, HMAC_KEY)

    def test_missing_secret_raises(self, notification_params):
        with pytest.raises(MissingSharedSecretError):
            sign_notification(notification_params)
