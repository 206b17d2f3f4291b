# -*- coding: utf-8 -*-
"""
Tests de flatten / deflatten.

Fecha: 19/10/2026
"""

import pytest

from adyenkit.modules.signatures.errors import (
    DuplicateKeyError,
    FlattenStructureError,
    KeyNestingConflictError,
)
from adyenkit.modules.signatures.utils.parameter_flattener import deflatten, flatten, stringify


class TestFlatten:

    def test_prefixes_and_camelizes_nested_keys(self):
        assert flatten({"billing_address": {"street": "My Street"}}) == {
            "billingAddress.street": "My Street"
        }

    def test_empty_input(self):
        assert flatten(None) == {}
        assert flatten({}) == {}

    def test_stringifies_leaves(self):
        flat = flatten({"payment_amount": 10000, "live": True, "reason": None})
        assert flat == {"paymentAmount": "10000", "live": "true", "reason": ""}

    def test_keeps_insertion_order(self):
        flat = flatten({"z_key": 1, "a_key": {"b": 2, "a": 3}})
        assert list(flat) == ["zKey", "aKey.b", "aKey.a"]

    def test_deeply_nested(self):
        flat = flatten({"openinvoicedata": {"line1": {"item_amount": 4000}}})
        assert flat == {"openinvoicedata.line1.itemAmount": "4000"}


class TestDeflatten:

    def test_rebuilds_tree_with_underscored_keys(self):
        tree = deflatten({
            "paymentDetails.billingAddress.street": "Bell Street",
            "paymentDetails.billingAddress.number": 123,
            "paymentDetails.billingAddress.city": "Ottawa",
            "paymentDetails.result": "Authorized",
            "paymentDetails.authCode": "A40B8",
        })
        assert tree == {
            "payment_details": {
                "billing_address": {
                    "street": "Bell Street",
                    "number": 123,
                    "city": "Ottawa",
                },
                "result": "Authorized",
                "auth_code": "A40B8",
            }
        }

    def test_empty_input(self):
        assert deflatten(None) == {}
        assert deflatten({}) == {}

    def test_nesting_under_a_leaf_raises(self):
        with pytest.raises(KeyNestingConflictError):
            deflatten({"a": 1, "a.b": 2})

    def test_leaf_over_a_subtree_raises(self):
        with pytest.raises(DuplicateKeyError):
            deflatten({"a.b": 1, "a": 2})

    def test_keys_colliding_after_underscore_raise(self):
        with pytest.raises(DuplicateKeyError):
            deflatten({"authCode": "1", "auth_code": "2"})

    def test_structural_errors_are_value_errors(self):
        with pytest.raises(FlattenStructureError):
            deflatten({"a": 1, "a.b": 2})
        with pytest.raises(ValueError):
            deflatten({"a": 1, "a.b": 2})


def test_deflatten_inverts_flatten():
    tree = {
        "merchant_reference": "Internet Order 12345",
        "billing_address": {"street": "Alexanderplatz", "house_number_or_name": "0815"},
        "shopper": {"first_name": "John", "last_name": "Doe"},
    }
    assert deflatten(flatten(tree)) == tree


def test_stringify_scalars():
    assert stringify(None) == ""
    assert stringify(False) == "false"
    assert stringify(199) == "199"
