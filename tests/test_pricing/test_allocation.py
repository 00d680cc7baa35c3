"""Tests for splitting a property's rent across its rooms."""

import math

import pytest

from rekro.models import PricingConfig, RoomShape
from rekro.pricing.allocation import (
    OCCUPANCY_WEIGHT_SHARE,
    allocate_room_rents,
    allocated_rent_for,
    fix_rounding_drift,
    room_weights,
)


class TestRoomWeights:
    def test_empty(self) -> None:
        assert room_weights([]) == []

    def test_occupancy_only_when_no_sizes(self) -> None:
        weights = room_weights([RoomShape(max_occupancy=1), RoomShape(max_occupancy=3)])
        assert weights == pytest.approx([0.25, 0.75])

    def test_blend_when_sizes_known(self) -> None:
        weights = room_weights([RoomShape(size_sqm=10), RoomShape(size_sqm=20)])
        occupancy = OCCUPANCY_WEIGHT_SHARE * 0.5
        assert weights == pytest.approx([occupancy + 0.3 / 3, occupancy + 0.6 / 3])

    def test_missing_size_is_median_of_known(self) -> None:
        weights = room_weights([RoomShape(size_sqm=10), RoomShape(), RoomShape(size_sqm=30)])
        # Sizes become 10, 20, 30.
        assert weights[1] == pytest.approx(0.7 / 3 + 0.3 * 20 / 60)

    def test_zero_occupancy_floored_to_one(self) -> None:
        weights = room_weights([RoomShape(max_occupancy=0), RoomShape(max_occupancy=1)])
        assert weights == pytest.approx([0.5, 0.5])

    def test_weights_sum_to_one(self) -> None:
        rooms = [RoomShape(max_occupancy=o, size_sqm=s) for o, s in [(1, 9), (2, None), (1, 14.5), (3, 22)]]
        assert sum(room_weights(rooms)) == pytest.approx(1.0)


class TestFixRoundingDrift:
    def test_no_drift(self) -> None:
        assert fix_rounding_drift(300, [100, 200], [0.3, 0.7]) == [100, 200]

    def test_positive_residual_to_heaviest(self) -> None:
        assert fix_rounding_drift(1000, [333, 333, 332], [0.3, 0.4, 0.3]) == [333, 335, 332]

    def test_tie_goes_to_first_room(self) -> None:
        assert fix_rounding_drift(10000, [3333, 3333, 3333], [1 / 3, 1 / 3, 1 / 3]) == [3334, 3333, 3333]

    def test_negative_residual_from_heaviest(self) -> None:
        assert fix_rounding_drift(999, [334, 333, 333], [0.4, 0.3, 0.3]) == [333, 333, 333]

    def test_negative_residual_never_goes_below_zero(self) -> None:
        assert fix_rounding_drift(1, [1, 1, 1], [0.34, 0.33, 0.33]) == [0, 0, 1]

    def test_does_not_mutate_input(self) -> None:
        values = [1, 1]
        fix_rounding_drift(5, values, [0.5, 0.5])
        assert values == [1, 1]


class TestAllocateRoomRents:
    def test_double_size_room_pays_more(self) -> None:
        rooms = [RoomShape(max_occupancy=1, size_sqm=10), RoomShape(max_occupancy=1, size_sqm=20)]
        first, second = allocate_room_rents(300, rooms)
        assert second.weekly_rent > first.weekly_rent
        assert first.weekly_rent == 135.0
        assert second.weekly_rent == 165.0
        assert first.weekly_rent_cents + second.weekly_rent_cents == 30000

    def test_bond_is_four_weeks(self) -> None:
        rooms = [RoomShape(size_sqm=10), RoomShape(size_sqm=20)]
        first, second = allocate_room_rents(300, rooms)
        assert first.bond == 540.0
        assert second.bond == 660.0

    def test_bond_multiplier_from_config(self) -> None:
        (only,) = allocate_room_rents(250, [RoomShape()], PricingConfig(bond_multiplier=6))
        assert only.bond == 1500.0

    def test_sum_is_exact_after_drift(self) -> None:
        allocations = allocate_room_rents(100, [RoomShape(), RoomShape(), RoomShape()])
        assert [a.weekly_rent_cents for a in allocations] == [3334, 3333, 3333]

    def test_preserves_input_order(self) -> None:
        rooms = [RoomShape(id="a", max_occupancy=2), RoomShape(id="b")]
        assert [a.room.id for a in allocate_room_rents(450, rooms)] == ["a", "b"]

    def test_no_rooms(self) -> None:
        assert allocate_room_rents(500, []) == []
        assert allocate_room_rents(500, None) == []

    @pytest.mark.parametrize("base", [-100, math.nan, math.inf, None, "500"])
    def test_invalid_base_allocates_zero(self, base: object) -> None:
        allocations = allocate_room_rents(base, [RoomShape(), RoomShape(max_occupancy=2)])
        assert [a.weekly_rent for a in allocations] == [0.0, 0.0]
        assert [a.bond for a in allocations] == [0.0, 0.0]


class TestAllocatedRentFor:
    def test_finds_room_by_value(self) -> None:
        rooms = [RoomShape(id="a", size_sqm=10), RoomShape(id="b", size_sqm=20)]
        allocation = allocated_rent_for(RoomShape(id="b", size_sqm=20), 300, rooms)
        assert allocation is not None
        assert allocation.weekly_rent == 165.0

    def test_unknown_room(self) -> None:
        assert allocated_rent_for(RoomShape(id="z"), 300, [RoomShape(id="a")]) is None

    def test_identical_rooms_keep_their_own_allocation(self) -> None:
        rooms = (RoomShape(), RoomShape())
        first = allocated_rent_for(rooms[0], 100.01, rooms)
        second = allocated_rent_for(rooms[1], 100.01, rooms)
        assert first is not None and second is not None
        assert (first.weekly_rent, second.weekly_rent) == (50.01, 50.0)

    def test_copy_of_identical_room_gets_first_match(self) -> None:
        rooms = (RoomShape(), RoomShape())
        allocation = allocated_rent_for(RoomShape(), 100.01, rooms)
        assert allocation is not None
        assert allocation.weekly_rent == 50.01
