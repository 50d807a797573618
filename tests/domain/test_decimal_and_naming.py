"""Tests for decimal helpers and label policies."""

from decimal import Decimal

import pytest

from household_ledger.domain.policies.naming import labels_match, normalize_label
from household_ledger.utils.decimal_utils import (
    coerce_decimal,
    has_at_most_two_places,
    quantize_money,
)


def test_coerce_decimal_normalizes_inputs():
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal("12.5") == Decimal("12.5")
    assert coerce_decimal(3) == Decimal("3")


@pytest.mark.parametrize("value", ["abc", True])
def test_coerce_decimal_rejects_non_numbers(value):
    with pytest.raises(ValueError):
        coerce_decimal(value)


def test_quantize_money_rounds_half_up():
    assert quantize_money("2.345") == Decimal("2.35")
    assert quantize_money(Decimal("7")) == Decimal("7.00")


def test_has_at_most_two_places():
    assert has_at_most_two_places(Decimal("1.10"))
    assert has_at_most_two_places(Decimal("1.100"))
    assert not has_at_most_two_places(Decimal("1.101"))
    assert not has_at_most_two_places(Decimal("NaN"))


def test_labels_match_ignores_case_and_padding():
    assert normalize_label("  Ana ") == "Ana"
    assert normalize_label(None) == ""
    assert labels_match("ana", " ANA ")
    assert not labels_match("Ana", "Anna")
