"""
Pricing-related data models for the retail pricing engine.
Includes the ExchangeRate value object and the StoreSettings snapshot.
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ExchangeRate:
    """
    Cost-currency to display-currency conversion rate.

    Passed explicitly into every price computation instead of being read from a
    process-wide settings record.
    """

    rate: Decimal
    base_currency: str = "USD"
    display_currency: str = "SDG"

    def convert(self, amount: Decimal) -> Decimal:
        """Convert an amount in the base currency into the display currency."""
        return amount * self.rate


@dataclass(frozen=True)
class StoreSettings:
    """
    Immutable snapshot of the store-wide settings the engine needs.
    """

    exchange_rate: ExchangeRate
    delivery_fee: Decimal = Decimal("0")
    rounding_step: Decimal = field(default=Decimal("10"))
