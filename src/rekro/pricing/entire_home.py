"""Weekly rent for booking a whole property instead of a single room."""

from typing import Any

from rekro.models.pricing import DEFAULT_PRICING_CONFIG, PricingConfig
from rekro.pricing.money import money, non_negative


def entire_home_weekly_rent(base_weekly_rent: Any, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> float:
    """Base rent plus the whole-home markup, rounded to cents. Invalid base → 0."""
    return money(non_negative(base_weekly_rent) * (1 + config.entire_home_markup))


def entire_home_bond(base_weekly_rent: Any, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> float:
    return money(entire_home_weekly_rent(base_weekly_rent, config) * config.bond_multiplier)
