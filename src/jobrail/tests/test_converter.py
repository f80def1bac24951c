"""Tests for CurrencyConverter."""

from __future__ import annotations

import math

import pytest

from jobrail.converter import CurrencyConverter
from jobrail.errors import ErrorCode


@pytest.fixture
def converter() -> CurrencyConverter:
    return CurrencyConverter()


@pytest.mark.parametrize("amount", [0.0, 1.0, 95000.0, 120000.0, 1e9])
def test_convert_multiplies_by_rate(converter: CurrencyConverter, amount: float) -> None:
    assert math.isclose(converter.convert(amount).unwrap(), amount * 0.91)


@pytest.mark.parametrize("amount", [-0.01, -1.0, None, float("nan")])
def test_convert_rejects_invalid(converter: CurrencyConverter, amount: float | None) -> None:
    err = converter.convert(amount).unwrap_err()
    
    assert err.error_code == ErrorCode.INVALID_INPUT
    assert err.root_operation == "convert"


def test_defaults_from_settings(converter: CurrencyConverter) -> None:
    assert converter.rate == 0.91
    assert converter.pair == "USD/EUR"


def test_rate_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    from jobrail.config import clear_settings_cache
    monkeypatch.setenv("JOBRAIL_CONVERSION_RATE", "0.5")
    clear_settings_cache()
    
    assert CurrencyConverter().convert(10.0).unwrap() == 5.0


def test_explicit_rate_wins() -> None:
    assert CurrencyConverter(rate=2.0, target="GBP").convert(3.0).unwrap() == 6.0
    assert CurrencyConverter(rate=0.0).convert(3.0).unwrap() == 0.0


def test_negative_rate_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        CurrencyConverter(rate=-0.1)
