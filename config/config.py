"""
Configuration classes for the retail pricing engine.
Defines store-wide pricing defaults in a type-safe way, overridable from the environment.
"""

import os
from dataclasses import dataclass
from decimal import Decimal

from models.pricing import ExchangeRate, StoreSettings
from utils.env import load_project_dotenv, read_env_decimal

ENV_PREFIX = "PRICING_"


@dataclass
class PricingConfig:
    exchange_rate: Decimal = Decimal("450")  # USD -> SDG
    delivery_fee: Decimal = Decimal("500")
    rounding_step: Decimal = Decimal("10")
    base_currency: str = "USD"
    display_currency: str = "SDG"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "PricingConfig":
        """Build a config from PRICING_* environment variables (and the project .env)."""
        load_project_dotenv()
        defaults = cls()
        return cls(
            exchange_rate=read_env_decimal(f"{ENV_PREFIX}EXCHANGE_RATE", defaults.exchange_rate),
            delivery_fee=read_env_decimal(f"{ENV_PREFIX}DELIVERY_FEE", defaults.delivery_fee),
            rounding_step=read_env_decimal(f"{ENV_PREFIX}ROUNDING_STEP", defaults.rounding_step),
            base_currency=os.getenv(f"{ENV_PREFIX}BASE_CURRENCY", defaults.base_currency),
            display_currency=os.getenv(f"{ENV_PREFIX}DISPLAY_CURRENCY", defaults.display_currency),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
        )

    def to_settings(self) -> StoreSettings:
        return StoreSettings(
            exchange_rate=ExchangeRate(
                rate=self.exchange_rate,
                base_currency=self.base_currency,
                display_currency=self.display_currency,
            ),
            delivery_fee=self.delivery_fee,
            rounding_step=self.rounding_step,
        )


# Example usage:
# settings = PricingConfig.from_env().to_settings()
# price = compute_sell_price(item, settings)
