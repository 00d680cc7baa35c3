"""Rental pricing: inclusion costs, room allocation and weekly quotes."""

from rekro.pricing.allocation import (
    OCCUPANCY_WEIGHT_SHARE,
    RoomAllocation,
    allocate_room_rents,
    fix_rounding_drift,
    room_weights,
)
from rekro.pricing.catalog import CatalogEntry, InclusionAvailability, inclusion_availability, inclusion_catalog
from rekro.pricing.costs import (
    bills_weekly_cost,
    carpark_weekly_cost,
    cleaning_weekly_cost,
    end_of_lease_cleaning_cost,
    furniture_weekly_cost,
    inclusion_weekly_cost,
    storage_weekly_cost,
)
from rekro.pricing.entire_home import entire_home_bond, entire_home_weekly_rent
from rekro.pricing.inclusions import is_inclusion_selected, reprice_selection, toggle_inclusion
from rekro.pricing.orchestrator import calculate_pricing, quote_from_payload, zero_pricing_result

__all__ = [
    "OCCUPANCY_WEIGHT_SHARE",
    "CatalogEntry",
    "InclusionAvailability",
    "RoomAllocation",
    "allocate_room_rents",
    "bills_weekly_cost",
    "calculate_pricing",
    "carpark_weekly_cost",
    "cleaning_weekly_cost",
    "end_of_lease_cleaning_cost",
    "entire_home_bond",
    "entire_home_weekly_rent",
    "fix_rounding_drift",
    "furniture_weekly_cost",
    "inclusion_availability",
    "inclusion_catalog",
    "inclusion_weekly_cost",
    "is_inclusion_selected",
    "quote_from_payload",
    "reprice_selection",
    "room_weights",
    "storage_weekly_cost",
    "toggle_inclusion",
    "zero_pricing_result",
]
