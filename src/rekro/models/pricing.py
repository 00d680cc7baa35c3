"""Pydantic models for property shapes, inclusion selections and price quotes."""

import math
from enum import StrEnum
from typing import Annotated, Any, Final, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

ENTIRE_HOME: Final = "entire_home"


# ── Lenient numeric types ──────────────────────────────────────────────────────
# Storage hands us half-filled listings. Bad numbers degrade to a safe value
# instead of failing validation.


def _out_of_float_range(value: Any) -> bool:
    """JSON ints have no size limit; some do not fit in a float."""
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    try:
        float(value)
    except OverflowError:
        return True
    return False


def _none_to_zero(value: Any) -> Any:
    return 0.0 if value is None or _out_of_float_range(value) else value


def _finite_non_negative(value: float) -> float:
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def _whole_number(default: int) -> Any:
    def convert(value: Any) -> Any:
        if value is None or _out_of_float_range(value):
            return default
        if isinstance(value, float):
            return math.floor(value) if math.isfinite(value) else default
        return value

    return convert


def _positive_area(value: Any) -> Any:
    if _out_of_float_range(value):
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value) or value <= 0:
            return None
    return value


Money = Annotated[float, BeforeValidator(_none_to_zero), AfterValidator(_finite_non_negative)]
"""Weekly or one-off amount in dollars. Negative/NaN/inf/None become 0."""

Count = Annotated[int, BeforeValidator(_whole_number(0)), AfterValidator(lambda v: max(0, v))]
Occupancy = Annotated[int, BeforeValidator(_whole_number(1)), AfterValidator(lambda v: max(1, v))]
LeaseMonths = Annotated[int, BeforeValidator(_whole_number(0))]
AreaSqm = Annotated[float | None, BeforeValidator(_positive_area)]


class InclusionType(StrEnum):
    """Add-ons a tenant can bundle into their weekly rent."""

    FURNITURE = "furniture"
    BILLS = "bills"
    CLEANING = "cleaning"
    CARPARK = "carpark"
    STORAGE = "storage"


class OccupancyType(StrEnum):
    """How many people occupy the rented room."""

    SINGLE = "single"
    DUAL = "dual"


class RoomShape(BaseModel):
    """A bookable room, used only as an allocation weight."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="Optional unit id from storage")
    max_occupancy: Occupancy = 1
    size_sqm: AreaSqm = None


class PropertyShape(BaseModel):
    """Read-only snapshot of a listing as supplied by the storage collaborator."""

    model_config = ConfigDict(frozen=True)

    bedroom_count: Count = 0
    furnished: bool = False
    base_weekly_rent: Money = 0.0
    amenities: frozenset[str] = frozenset()
    rooms: tuple[RoomShape, ...] = ()

    @field_validator("amenities", "rooms", mode="before")
    @classmethod
    def empty_when_missing(cls, v: Any) -> Any:
        return () if v is None else v

    @field_validator("furnished", mode="before")
    @classmethod
    def unset_means_unfurnished(cls, v: Any) -> Any:
        return False if v is None else v


class InclusionState(BaseModel):
    """Selection flag and current weekly price of one inclusion."""

    model_config = ConfigDict(frozen=True)

    selected: bool = False
    weekly_price: Money = 0.0

    @field_validator("weekly_price")
    @classmethod
    def zero_unless_selected(cls, v: float, info: ValidationInfo) -> float:
        """An unselected inclusion never carries a price."""
        return v if info.data.get("selected") else 0.0


class InclusionSelection(BaseModel):
    """One state per inclusion type. Unknown keys are dropped on validation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    furniture: InclusionState = Field(default_factory=InclusionState)
    bills: InclusionState = Field(default_factory=InclusionState)
    cleaning: InclusionState = Field(default_factory=InclusionState)
    carpark: InclusionState = Field(default_factory=InclusionState)
    storage: InclusionState = Field(default_factory=InclusionState)

    def get(self, inclusion: InclusionType) -> InclusionState:
        state: InclusionState = getattr(self, inclusion.value)
        return state

    def replace(self, inclusion: InclusionType, state: InclusionState) -> "InclusionSelection":
        """Return a copy with one state swapped; the other states are shared."""
        return self.model_copy(update={inclusion.value: state})

    def selected_types(self) -> tuple[InclusionType, ...]:
        return tuple(t for t in InclusionType if self.get(t).selected)


class PricingContext(BaseModel):
    """Everything one pricing call needs, rebuilt from caller state per call."""

    model_config = ConfigDict(frozen=True)

    property: PropertyShape
    selected_unit: RoomShape | Literal["entire_home"] | None = None
    is_entire_home: bool = False
    occupancy_type: OccupancyType = OccupancyType.SINGLE
    rental_duration_months: LeaseMonths = 12
    inclusions: InclusionSelection = Field(default_factory=InclusionSelection)


class InclusionCosts(BaseModel):
    model_config = ConfigDict(frozen=True)

    furniture: float = 0.0
    bills: float = 0.0
    cleaning: float = 0.0
    carpark: float = 0.0
    storage: float = 0.0
    total: float = 0.0


class PricingResult(BaseModel):
    """Weekly rent and bond quoted for one unit."""

    model_config = ConfigDict(frozen=True)

    base_rent: float = 0.0
    adjusted_base_rent: float = 0.0
    bond: float = 0.0
    inclusion_costs: InclusionCosts = Field(default_factory=InclusionCosts)
    total_weekly_rent: float = 0.0
    occupancy_type: OccupancyType = OccupancyType.SINGLE


class PricingConfig(BaseModel):
    """Named pricing constants. Built from :class:`rekro.config.Settings` or defaulted."""

    model_config = ConfigDict(frozen=True)

    entire_home_markup: float = Field(default=0.12, ge=0)
    furniture_total_cost: float = Field(default=2000.0, ge=0)
    bills_by_bedrooms: dict[int, float] = Field(
        default_factory=lambda: {0: 10.0, 1: 20.0, 2: 15.0, 3: 10.0, 4: 7.0}
    )
    bills_default: float = Field(default=10.0, ge=0)
    room_cleaning_single: float = Field(default=35.0, ge=0)
    room_cleaning_dual: float = Field(default=60.0, ge=0)
    end_of_lease_cleaning_per_room: float = Field(default=200.0, ge=0)
    carpark_weekly: float = Field(default=25.0, ge=0)
    storage_weekly: float = Field(default=15.0, ge=0)
    weeks_per_month: float = Field(default=4.33, gt=0)
    bond_multiplier: float = Field(default=4.0, ge=0)
    default_lease_months: int = Field(default=12, ge=1)
    # Months -> multiplier on the base rent. Shorter leases cost more per week.
    lease_multipliers: dict[int, float] = Field(
        default_factory=lambda: {4: 1.575, 6: 1.05, 9: 4 / 3, 12: 1.0}
    )
    carpark_keywords: tuple[str, ...] = (
        "carpark",
        "car park",
        "parking",
        "garage",
        "carport",
        "driveway",
        "underground",
        "secure",
        "street",
        "visitor",
        "tandem",
    )
    storage_keywords: tuple[str, ...] = ("storage",)


DEFAULT_PRICING_CONFIG: Final = PricingConfig()
