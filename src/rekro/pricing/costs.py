"""Weekly cost of each inclusion type.

Every function here is total: bad or missing numbers count as absent, and the
result is always a finite dollar amount >= 0 rounded to cents. The UI calls
these on every keystroke and must always have a number to show.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from rekro.models.pricing import (
    DEFAULT_PRICING_CONFIG,
    ENTIRE_HOME,
    InclusionType,
    OccupancyType,
    PricingConfig,
    PricingContext,
    RoomShape,
)
from rekro.pricing.catalog import has_carpark, has_storage
from rekro.pricing.money import finite_or_none, money


def lease_months(rental_duration_months: Any, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> float:
    """Lease length used for amortisation; zero, negative or invalid means the default."""
    months = finite_or_none(rental_duration_months)
    if months is None or months <= 0:
        return float(config.default_lease_months)
    return months


def furniture_weekly_cost(
    furnished: bool,
    rental_duration_months: Any,
    is_entire_home: bool,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> float:
    """Furniture package amortised over the lease, for unfurnished whole homes only."""
    if not is_entire_home or furnished:
        return 0.0
    weeks = lease_months(rental_duration_months, config) * config.weeks_per_month
    return money(config.furniture_total_cost / weeks)


def bills_weekly_cost(
    bedroom_count: Any,
    is_entire_home: bool,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> float:
    if not is_entire_home:
        return 0.0
    bedrooms = finite_or_none(bedroom_count)
    key = int(bedrooms) if bedrooms is not None and bedrooms >= 0 else 0
    return money(config.bills_by_bedrooms.get(key, config.bills_default))


def _room_cleaning_rate(occupants: Any, config: PricingConfig) -> float:
    count = finite_or_none(occupants)
    if count is not None and count >= 2:
        return config.room_cleaning_dual
    return config.room_cleaning_single


def cleaning_weekly_cost(
    is_entire_home: bool,
    rooms: Sequence[RoomShape] | None,
    occupancy_type: OccupancyType | str,
    unit_max_occupancy: Any = None,
    bedroom_count: Any = 0,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> float:
    """Regular cleaning.

    Room listings pay the single rate, or the dual rate when two people share a
    room built for exactly two. Whole homes pay the per-room rate for every
    room; a home listed without rooms is charged per bedroom (at least one).
    """
    if not is_entire_home:
        dual = occupancy_type == OccupancyType.DUAL and finite_or_none(unit_max_occupancy) == 2
        return money(config.room_cleaning_dual if dual else config.room_cleaning_single)

    if rooms:
        return money(sum(_room_cleaning_rate(room.max_occupancy, config) for room in rooms))

    bedrooms = finite_or_none(bedroom_count)
    units = max(1, int(bedrooms)) if bedrooms is not None else 1
    return money(units * config.room_cleaning_single)


def end_of_lease_cleaning_cost(
    rooms: Sequence[RoomShape] | None,
    bedroom_count: Any = 0,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> float:
    """One-off bond clean, charged per room (studios and 1-beds pay one room)."""
    if rooms:
        units = len(rooms)
    else:
        bedrooms = finite_or_none(bedroom_count)
        units = max(1, int(bedrooms)) if bedrooms is not None else 1
    return money(units * config.end_of_lease_cleaning_per_room)


def carpark_weekly_cost(
    amenities: Iterable[str] | None,
    is_entire_home: bool,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> float:
    if is_entire_home or not has_carpark(amenities, config):
        return 0.0
    return money(config.carpark_weekly)


def storage_weekly_cost(
    amenities: Iterable[str] | None,
    is_entire_home: bool,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> float:
    if is_entire_home or not has_storage(amenities, config):
        return 0.0
    return money(config.storage_weekly)


def books_entire_home(context: PricingContext) -> bool:
    return context.is_entire_home or context.selected_unit == ENTIRE_HOME


def selected_room(context: PricingContext) -> RoomShape | None:
    unit = context.selected_unit
    return unit if isinstance(unit, RoomShape) else None


def inclusion_weekly_cost(
    inclusion: InclusionType,
    context: PricingContext,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> float:
    """Current weekly price of ``inclusion`` for the booking described by ``context``.

    The toggle reducer and the orchestrator both price through here, so a
    stored price and a freshly rendered total cannot disagree.
    """
    prop = context.property
    entire_home = books_entire_home(context)

    match inclusion:
        case InclusionType.FURNITURE:
            return furniture_weekly_cost(
                prop.furnished, context.rental_duration_months, entire_home, config
            )
        case InclusionType.BILLS:
            return bills_weekly_cost(prop.bedroom_count, entire_home, config)
        case InclusionType.CLEANING:
            room = selected_room(context)
            return cleaning_weekly_cost(
                entire_home,
                prop.rooms,
                context.occupancy_type,
                unit_max_occupancy=room.max_occupancy if room else None,
                bedroom_count=prop.bedroom_count,
                config=config,
            )
        case InclusionType.CARPARK:
            return carpark_weekly_cost(prop.amenities, entire_home, config)
        case InclusionType.STORAGE:
            return storage_weekly_cost(prop.amenities, entire_home, config)
