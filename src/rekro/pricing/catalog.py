"""Inclusion catalog: which add-ons a listing offers, bundles or lacks."""

from collections.abc import Iterable
from enum import StrEnum
from typing import Final, NamedTuple

from rekro.models.pricing import (
    DEFAULT_PRICING_CONFIG,
    InclusionType,
    PricingConfig,
    PropertyShape,
)


class InclusionAvailability(StrEnum):
    INCLUDED = "included"  # bundled into rent, shown ticked and disabled
    OPTIONAL = "optional"  # paid toggle
    UNAVAILABLE = "unavailable"  # not offered for this listing


class CatalogEntry(NamedTuple):
    inclusion: InclusionType
    title: str
    availability: InclusionAvailability


INCLUSION_TITLES: Final[dict[InclusionType, str]] = {
    InclusionType.FURNITURE: "Furniture",
    InclusionType.BILLS: "Bills",
    InclusionType.CLEANING: "Regular cleaning",
    InclusionType.CARPARK: "Carpark",
    InclusionType.STORAGE: "Storage cage",
}


def amenity_matches(amenities: Iterable[str] | None, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring match of any keyword against any amenity."""
    if not amenities:
        return False
    lowered = [k.lower() for k in keywords if k]
    return any(
        keyword in amenity.lower()
        for amenity in amenities
        if isinstance(amenity, str)
        for keyword in lowered
    )


def has_carpark(amenities: Iterable[str] | None, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> bool:
    return amenity_matches(amenities, config.carpark_keywords)


def has_storage(amenities: Iterable[str] | None, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> bool:
    return amenity_matches(amenities, config.storage_keywords)


def inclusion_availability(
    inclusion: InclusionType,
    property: PropertyShape,
    is_entire_home: bool,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> InclusionAvailability:
    """How ``inclusion`` behaves for a room or whole-home booking of ``property``."""
    match inclusion:
        case InclusionType.FURNITURE:
            # Room rents already price in furnishing.
            if not is_entire_home or property.furnished:
                return InclusionAvailability.INCLUDED
            return InclusionAvailability.OPTIONAL
        case InclusionType.BILLS:
            if not is_entire_home:
                return InclusionAvailability.INCLUDED
            return InclusionAvailability.OPTIONAL
        case InclusionType.CLEANING:
            return InclusionAvailability.OPTIONAL
        case InclusionType.CARPARK:
            if not is_entire_home and has_carpark(property.amenities, config):
                return InclusionAvailability.OPTIONAL
            return InclusionAvailability.UNAVAILABLE
        case InclusionType.STORAGE:
            if not is_entire_home and has_storage(property.amenities, config):
                return InclusionAvailability.OPTIONAL
            return InclusionAvailability.UNAVAILABLE


def is_chargeable(
    inclusion: InclusionType,
    property: PropertyShape,
    is_entire_home: bool,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> bool:
    availability = inclusion_availability(inclusion, property, is_entire_home, config)
    return availability is InclusionAvailability.OPTIONAL


def inclusion_catalog(
    property: PropertyShape,
    is_entire_home: bool,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> list[CatalogEntry]:
    """Catalog entries in display order, one per inclusion type."""
    return [
        CatalogEntry(
            inclusion=inclusion,
            title=INCLUSION_TITLES[inclusion],
            availability=inclusion_availability(inclusion, property, is_entire_home, config),
        )
        for inclusion in InclusionType
    ]
