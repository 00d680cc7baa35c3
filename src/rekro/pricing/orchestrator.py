"""Compose base rent, inclusions and bond into the quote a UI renders."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from rekro.logging import get_logger
from rekro.models.pricing import (
    DEFAULT_PRICING_CONFIG,
    InclusionCosts,
    InclusionType,
    OccupancyType,
    PricingConfig,
    PricingContext,
    PricingResult,
)
from rekro.pricing.allocation import allocated_rent_for
from rekro.pricing.costs import books_entire_home, inclusion_weekly_cost, lease_months, selected_room
from rekro.pricing.entire_home import entire_home_weekly_rent
from rekro.pricing.money import finite_or_none, money

logger = get_logger(__name__)


def zero_pricing_result() -> PricingResult:
    """Quote shown while the selection is incomplete or invalid."""
    return PricingResult()


def effective_occupancy(context: PricingContext) -> OccupancyType:
    """Dual only for a room listing whose selected room sleeps exactly two."""
    if books_entire_home(context):
        return OccupancyType.SINGLE
    room = selected_room(context)
    if room is None or room.max_occupancy != 2:
        return OccupancyType.SINGLE
    return context.occupancy_type


def lease_multiplier(rental_duration_months: Any, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> float:
    months = int(lease_months(rental_duration_months, config))
    multiplier = finite_or_none(config.lease_multipliers.get(months, 1.0))
    return multiplier if multiplier is not None and multiplier > 0 else 1.0


def _base_rent(context: PricingContext, config: PricingConfig) -> float | None:
    if context.selected_unit is None:
        return None

    prop = context.property
    if books_entire_home(context):
        return entire_home_weekly_rent(prop.base_weekly_rent, config)

    room = selected_room(context)
    if room is None:
        return None
    allocation = allocated_rent_for(room, prop.base_weekly_rent, prop.rooms, config)
    return allocation.weekly_rent if allocation else None


def calculate_pricing(context: PricingContext, *, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> PricingResult:
    """Price one unit from scratch.

    Inclusion prices are recomputed from the current context; the prices
    stored on the selection are ignored. A missing unit, or a room that is not
    part of the property, gives :func:`zero_pricing_result`.
    """
    base_rent = _base_rent(context, config)
    if base_rent is None:
        return zero_pricing_result()

    occupancy = effective_occupancy(context)
    priced_context = context.model_copy(update={"occupancy_type": occupancy})

    costs = {inclusion.value: 0.0 for inclusion in InclusionType}
    for inclusion in context.inclusions.selected_types():
        costs[inclusion.value] = inclusion_weekly_cost(inclusion, priced_context, config)
    inclusion_costs = InclusionCosts(**costs, total=money(sum(costs.values())))

    adjusted = money(base_rent * lease_multiplier(context.rental_duration_months, config))
    total = money(adjusted + inclusion_costs.total)

    return PricingResult(
        base_rent=base_rent,
        adjusted_base_rent=adjusted,
        bond=money(total * config.bond_multiplier),
        inclusion_costs=inclusion_costs,
        total_weekly_rent=total,
        occupancy_type=occupancy,
    )


def quote_from_payload(
    payload: Mapping[str, Any] | None, *, config: PricingConfig = DEFAULT_PRICING_CONFIG
) -> PricingResult:
    """Validate a raw pricing context (as posted by a form) and price it."""
    try:
        context = PricingContext.model_validate(payload or {})
    except ValidationError as e:
        logger.warning("pricing_payload_invalid", error_count=e.error_count(), errors=e.errors(include_url=False))
        return zero_pricing_result()
    return calculate_pricing(context, config=config)
