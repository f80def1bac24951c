"""Currency conversion with explicit failure."""

from __future__ import annotations

import math

from .config import get_settings
from .errors import ErrorTrace, Err, Ok, Result, invalid_input


class CurrencyConverter:
    """Multiplies an amount by a fixed, non-negative rate.
    
    Defaults come from ConversionSettings (USD to EUR at 0.91).
    
    Example:
        >>> CurrencyConverter(rate=0.91).convert(100.0)
        Ok(91.0)
        >>> CurrencyConverter(rate=0.91).convert(-1.0).is_err()
        True
    """
    
    __slots__ = ("rate", "source", "target")
    
    def __init__(self, rate: float | None = None, *, source: str | None = None, target: str | None = None) -> None:
        conf = get_settings().conversion
        self.rate = conf.rate if rate is None else rate
        if self.rate < 0 or math.isnan(self.rate):
            raise ValueError(f"Conversion rate must be non-negative, got {self.rate}")
        self.source = source or conf.source_currency
        self.target = target or conf.target_currency
    
    def convert(self, amount: float | None) -> Result[float, ErrorTrace]:
        """amount * rate, or an INVALID_INPUT failure for a missing, negative or NaN amount."""
        if amount is None:
            return Err(invalid_input("Amount is missing", "convert", pair=self.pair))
        if amount < 0 or math.isnan(amount):
            return Err(invalid_input(f"Amount must be non-negative, got {amount}", "convert", amount=amount, pair=self.pair))
        return Ok(amount * self.rate)
    
    @property
    def pair(self) -> str:
        return f"{self.source}/{self.target}"
    
    def __repr__(self) -> str:
        return f"CurrencyConverter({self.pair} @ {self.rate})"
