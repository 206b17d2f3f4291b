# -*- coding: utf-8 -*-
"""
Tests de las firmas legacy del formulario (HMAC-SHA1, secreto raw) y del
merchantSig del redirect de resultado.

Vectores tomados de los ejemplos documentados por Adyen.

Fecha: 19/10/2026
"""

import json

import pytest

from adyenkit.modules.signatures.enums import SignatureAlgorithm
from adyenkit.modules.signatures.errors import MissingSharedSecretError
from adyenkit.modules.signatures.facades import form_signature
from adyenkit.modules.signatures.services.hmac_signer import sign
from adyenkit.shared.config.skin_registry import SkinRegistry

LEGACY_SECRET = "Kah942*$7sdp0)"


@pytest.fixture
def payment_attributes():
    return {
        "shared_secret": LEGACY_SECRET,
        "merchant_account": "TestMerchant",
        "skin_code": "4aD37dJA",
        "currency_code": "GBP",
        "payment_amount": 10000,
        "merchant_reference": "Internet Order 12345",
        "ship_before_date": "2007-10-20",
        "session_validity": "2007-10-11T11:00:00Z",
        "billing_address": {
            "street": "Alexanderplatz",
            "house_number_or_name": "0815",
            "city": "Berlin",
            "postal_code": "10119",
            "state_or_province": "Berlin",
            "country": "Germany",
        },
        "delivery_address": {
            "street": "Pecunialaan",
            "house_number_or_name": "316",
            "city": "Geldrop",
            "state_or_province": "None",
            "postal_code": "1234 AB",
            "country": "Netherlands",
        },
        "shopper": {
            "telephone_number": "1234512345",
            "first_name": "John",
            "last_name": "Doe",
            "social_security_number": "123-45-1234",
        },
        "openinvoicedata": {
            "number_of_lines": 1,
            "line1": {
                "number_of_items": 2,
                "item_amount": 4000,
                "currency_code": "GBP",
                "item_vat_amount": 1000,
                "item_vat_percentage": 2500,
                "item_vat_category": "High",
                "description": "Product Awesome",
            },
            "refund_description": "Refund for 12345",
        },
    }


def _without_secret(params):
    return {k: v for k, v in params.items() if k != "shared_secret"}


class TestMerchantSignature:

    def test_signature_string(self, payment_attributes):
        assert form_signature.calculate_signature_string(payment_attributes) == (
            "10000GBP2007-10-20Internet Order 123454aD37dJATestMerchant2007-10-11T11:00:00Z"
        )

    def test_known_vector(self, payment_attributes):
        assert form_signature.calculate_signature(payment_attributes) == "x58ZcRVL1H6y+XSeBGrySJ9ACVo="

    def test_explicit_secret(self, payment_attributes):
        signature = form_signature.calculate_signature(_without_secret(payment_attributes), LEGACY_SECRET)
        assert signature == "x58ZcRVL1H6y+XSeBGrySJ9ACVo="

    def test_missing_secret_raises(self, payment_attributes):
        with pytest.raises(MissingSharedSecretError):
            form_signature.calculate_signature(_without_secret(payment_attributes))

    def test_selectable_algorithm(self, payment_attributes):
        hex_secret = "4468D9782DEF54FCD706C9100C71EC43932B1EBC2ACF6BA0560C05AAA7550C48"
        signature = form_signature.calculate_signature(
            payment_attributes, hex_secret, SignatureAlgorithm.SHA256
        )
        expected = sign(
            form_signature.calculate_signature_string(payment_attributes),
            hex_secret,
            SignatureAlgorithm.SHA256,
        )
        assert signature == expected


class TestSubSignatures:

    def test_billing_address(self, payment_attributes):
        assert form_signature.calculate_billing_address_signature_string(
            payment_attributes["billing_address"]
        ) == "Alexanderplatz0815Berlin10119BerlinGermany"
        assert form_signature.calculate_billing_address_signature(payment_attributes) == (
            "5KQb7VJq4cz75cqp11JDajntCY4="
        )

    def test_delivery_address(self, payment_attributes):
        assert form_signature.calculate_delivery_address_signature_string(
            payment_attributes["delivery_address"]
        ) == "Pecunialaan316Geldrop1234 ABNoneNetherlands"
        assert form_signature.calculate_delivery_address_signature(payment_attributes) == (
            "g8wPEWYrDPatkGXzuQbN1++JVbE="
        )

    def test_shopper(self, payment_attributes):
        assert form_signature.calculate_shopper_signature_string(
            payment_attributes["shopper"]
        ) == "JohnDoe123-45-1234"
        assert form_signature.calculate_shopper_signature(payment_attributes) == sign(
            "JohnDoe123-45-1234", LEGACY_SECRET, SignatureAlgorithm.SHA1
        )

    def test_open_invoice(self, payment_attributes):
        merchant_sig = form_signature.calculate_signature(payment_attributes)
        signing_string = form_signature.calculate_open_invoice_signature_string(
            merchant_sig, payment_attributes["openinvoicedata"]
        )
        assert signing_string.startswith("merchantSig:openinvoicedata.line1.currencyCode:")
        assert signing_string.endswith(f"|{merchant_sig}:GBP:Product Awesome:4000:1000:High:2500:2:1:Refund for 12345")
        assert form_signature.calculate_open_invoice_signature(payment_attributes) == (
            "OI71VGB7G3vKBRrtE6Ibv+RWvYY="
        )

    @pytest.mark.parametrize(
        "calculate",
        [
            form_signature.calculate_billing_address_signature,
            form_signature.calculate_delivery_address_signature,
            form_signature.calculate_shopper_signature,
            form_signature.calculate_open_invoice_signature,
        ],
    )
    def test_missing_secret_raises(self, payment_attributes, calculate):
        with pytest.raises(MissingSharedSecretError):
            calculate(_without_secret(payment_attributes))


class TestRedirectSignature:

    @pytest.fixture
    def redirect_params(self):
        return {
            "authResult": "AUTHORISED",
            "pspReference": "1211992213193029",
            "merchantReference": "Internet Order 12345",
            "skinCode": "4aD37dJA",
            "merchantSig": "ytt3QxWoEhAskUzUne0P5VA9lPw=",
        }

    @pytest.fixture
    def registry(self):
        registry = SkinRegistry()
        registry.register("testing", "4aD37dJA", LEGACY_SECRET)
        registry.register("other", "sk1nC0de", "shared_secret")
        return registry

    def test_signature_from_registered_skin(self, redirect_params, registry):
        assert form_signature.redirect_signature(redirect_params, registry=registry) == redirect_params["merchantSig"]

    def test_check_with_registered_skin(self, redirect_params, registry):
        assert form_signature.redirect_signature_check(redirect_params, registry=registry) is True

    def test_global_registry_is_the_default(self, redirect_params, monkeypatch):
        monkeypatch.setenv(
            "ADYEN_SKINS",
            json.dumps({"testing": {"skin_code": "4aD37dJA", "shared_secret": LEGACY_SECRET}}),
        )
        assert form_signature.redirect_signature_check(redirect_params) is True

    def test_check_with_explicit_secret(self, redirect_params):
        assert form_signature.redirect_signature_check(redirect_params, LEGACY_SECRET) is True

    def test_other_skin_fails(self, redirect_params, registry):
        params = dict(redirect_params, skinCode="sk1nC0de")
        assert form_signature.redirect_signature_check(params, registry=registry) is False

    def test_wrong_secret_fails(self, redirect_params):
        assert form_signature.redirect_signature_check(redirect_params, "wrong_shared_secret") is False

    def test_tampered_psp_reference_fails(self, redirect_params, registry):
        params = dict(redirect_params, pspReference="tampered")
        assert form_signature.redirect_signature_check(params, registry=registry) is False

    def test_tampered_signature_fails(self, redirect_params, registry):
        params = dict(redirect_params, merchantSig="tampered")
        assert form_signature.redirect_signature_check(params, registry=registry) is False

    def test_unknown_skin_without_secret_raises(self, redirect_params, registry):
        params = dict(redirect_params, skinCode="unknown")
        with pytest.raises(MissingSharedSecretError):
            form_signature.redirect_signature_check(params, registry=registry)

    def test_ignores_shared_secret_sent_in_params(self, registry):
        params = {
            "authResult": "AUTHORISED",
            "pspReference": "1",
            "merchantReference": "X",
            "skinCode": "4aD37dJA",
            "sharedSecret": "attacker",
        }
        params["merchantSig"] = sign("AUTHORISED1X4aD37dJA", "attacker", SignatureAlgorithm.SHA1)
        assert form_signature.redirect_signature(params, registry=registry) != params["merchantSig"]
        assert form_signature.redirect_signature_check(params, registry=registry) is False

    def test_shared_secret_in_params_does_not_replace_unknown_skin(self, registry):
        params = {"authResult": "AUTHORISED", "skinCode": "unknown", "shared_secret": "attacker"}
        params["merchantSig"] = sign("AUTHORISEDunknown", "attacker", SignatureAlgorithm.SHA1)
        with pytest.raises(MissingSharedSecretError):
            form_signature.redirect_signature_check(params, registry=registry)

    def test_empty_params_raise(self, registry):
        with pytest.raises(MissingSharedSecretError):
            form_signature.redirect_signature_check({}, registry=registry)

    def test_return_url_example(self):
        params = {
            "merchantReference": "HPP test order #1",
            "skinCode": "tifSfXeX",
            "shopperLocale": "en_GB",
            "paymentMethod": "visa",
            "authResult": "AUTHORISED",
            "pspReference": "8814131148758652",
            "merchantSig": "q8J9P/p/YsbnnFn/83TFsv7Hais=",
        }
        assert form_signature.redirect_signature(params, "testing123") == params["merchantSig"]
        assert form_signature.is_payment_success(params) is True
