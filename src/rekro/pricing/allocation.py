"""Split a property's weekly rent across its rooms.

Rooms are weighted by occupancy and, when sizes are known, by floor area.
Amounts are computed in whole cents and any rounding residual is settled by
:func:`fix_rounding_drift`, the only place rounding drift is corrected, so
the room rents always add back up to the property rent to the cent.
"""

import statistics
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final

from rekro.models.pricing import DEFAULT_PRICING_CONFIG, PricingConfig, RoomShape
from rekro.pricing.money import finite_or_none, from_cents, to_cents

# Share of a room's weight driven by occupancy when sizes are known; floor
# area drives the rest. Provisional until checked against live listings.
OCCUPANCY_WEIGHT_SHARE: Final = 0.7


@dataclass(frozen=True)
class RoomAllocation:
    """Weekly rent and bond allocated to one room."""

    room: RoomShape
    weight: float
    weekly_rent_cents: int
    bond: float

    @property
    def weekly_rent(self) -> float:
        return from_cents(self.weekly_rent_cents)


def _occupancy(room: RoomShape) -> int:
    occupants = finite_or_none(room.max_occupancy)
    return max(1, int(occupants)) if occupants is not None else 1


def _size(room: RoomShape) -> float | None:
    size = finite_or_none(room.size_sqm)
    return size if size is not None and size > 0 else None


def room_weights(rooms: Sequence[RoomShape]) -> list[float]:
    """Normalised weights (summing to 1) for each room, in input order."""
    if not rooms:
        return []

    occupancies = [_occupancy(room) for room in rooms]
    total_occupancy = sum(occupancies)
    occupancy_shares = [o / total_occupancy for o in occupancies]

    known_sizes = [s for s in (_size(room) for room in rooms) if s is not None]
    if not known_sizes:
        return occupancy_shares

    # Unknown sizes count as a typical room so they neither gain nor lose.
    typical = statistics.median(known_sizes)
    sizes = [_size(room) or typical for room in rooms]
    total_size = sum(sizes)

    return [
        OCCUPANCY_WEIGHT_SHARE * occupancy_share
        + (1 - OCCUPANCY_WEIGHT_SHARE) * (size / total_size)
        for occupancy_share, size in zip(occupancy_shares, sizes, strict=True)
    ]


def fix_rounding_drift(target_cents: int, values: Sequence[int], weights: Sequence[float]) -> list[int]:
    """Settle ``target_cents - sum(values)`` so the values sum to the target.

    The whole residual goes to the heaviest room (the first one on ties). A
    negative residual larger than that room's rent, which only happens when a
    few cents are spread over many rooms, carries over to the next heaviest
    rooms without taking any room below zero.
    """
    result = list(values)
    residual = target_cents - sum(result)
    if not result or residual == 0:
        return result

    # sorted() is stable: equal weights keep input order.
    by_weight = sorted(range(len(result)), key=lambda i: -weights[i])

    if residual > 0:
        result[by_weight[0]] += residual
        return result

    for index in by_weight:
        taken = min(result[index], -residual)
        result[index] -= taken
        residual += taken
        if residual == 0:
            break
    return result


def allocate_room_rents(
    base_weekly_rent: Any,
    rooms: Sequence[RoomShape] | None,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> list[RoomAllocation]:
    """Distribute ``base_weekly_rent`` over ``rooms``.

    Returns one allocation per room in input order; the allocated rents sum to
    the base rent (in cents) exactly. Invalid base rents allocate 0.
    """
    if not rooms:
        return []

    target_cents = to_cents(base_weekly_rent)
    weights = room_weights(rooms)
    rounded = [round(target_cents * weight) for weight in weights]
    cents = fix_rounding_drift(target_cents, rounded, weights)

    return [
        RoomAllocation(
            room=room,
            weight=weight,
            weekly_rent_cents=room_cents,
            bond=from_cents(round(room_cents * config.bond_multiplier)),
        )
        for room, weight, room_cents in zip(rooms, weights, cents, strict=True)
    ]


def allocated_rent_for(
    room: RoomShape,
    base_weekly_rent: Any,
    rooms: Sequence[RoomShape] | None,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> RoomAllocation | None:
    """Allocation of ``room``, or None if it is not listed.

    The listed room object itself is matched first, so identical rooms without
    an ``id`` keep their own allocations. A copy (e.g. parsed from JSON) gets
    the allocation of the first room equal to it.
    """
    allocations = allocate_room_rents(base_weekly_rent, rooms, config)
    for allocation in allocations:
        if allocation.room is room:
            return allocation
    for allocation in allocations:
        if allocation.room == room:
            return allocation
    return None
