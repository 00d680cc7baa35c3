"""Application configuration using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rekro.models.pricing import PricingConfig


def _parse_table(raw: str) -> dict[int, float]:
    """Parse ``"0:10,1:20"`` into ``{0: 10.0, 1: 20.0}``.

    Raises:
        ValueError: If an entry is not ``key:value`` or either side is not a number.
    """
    table: dict[int, float] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        key, sep, value = entry.partition(":")
        if not sep:
            raise ValueError(f"Expected 'key:value', got {entry!r}")
        table[int(key.strip())] = float(value.strip())
    return table


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REKRO_",
        extra="ignore",
    )

    # Whole-home bookings
    entire_home_markup: float = Field(
        default=0.12,
        ge=0,
        le=1,
        description="Fraction added to the base rent when the whole property is booked",
    )
    furniture_total_cost: float = Field(
        default=2000.0,
        ge=0,
        description="Furniture package cost, amortised over the lease",
    )
    bills_by_bedrooms: str = Field(
        default="0:10,1:20,2:15,3:10,4:7",
        description="Comma-separated bedrooms:weekly_bills pairs",
    )
    bills_default: float = Field(default=10.0, ge=0)

    # Cleaning
    room_cleaning_single: float = Field(default=35.0, ge=0)
    room_cleaning_dual: float = Field(default=60.0, ge=0)
    end_of_lease_cleaning_per_room: float = Field(default=200.0, ge=0)

    # Room add-ons
    carpark_weekly: float = Field(default=25.0, ge=0)
    storage_weekly: float = Field(default=15.0, ge=0)

    # Lease and bond
    weeks_per_month: float = Field(default=4.33, gt=0)
    bond_multiplier: float = Field(default=4.0, ge=0)
    default_lease_months: int = Field(default=12, ge=1, le=60)
    lease_multipliers: str = Field(
        default="4:1.575,6:1.05,9:1.3333333333333333,12:1",
        description="Comma-separated months:multiplier pairs applied to the base rent; empty disables",
    )

    # Web
    web_host: str = Field(default="127.0.0.1", description="Web server host")
    web_port: int = Field(default=8000, description="Web server port")
    log_json: bool = Field(default=False, description="Emit JSON log lines instead of console output")

    def get_bills_table(self) -> dict[int, float]:
        """Parse bills_by_bedrooms into a lookup table."""
        return _parse_table(self.bills_by_bedrooms)

    def get_lease_multipliers(self) -> dict[int, float]:
        """Parse lease_multipliers into a months -> multiplier table."""
        return _parse_table(self.lease_multipliers)

    def get_pricing_config(self) -> PricingConfig:
        """Build the PricingConfig handed to the pricing functions."""
        return PricingConfig(
            entire_home_markup=self.entire_home_markup,
            furniture_total_cost=self.furniture_total_cost,
            bills_by_bedrooms=self.get_bills_table(),
            bills_default=self.bills_default,
            room_cleaning_single=self.room_cleaning_single,
            room_cleaning_dual=self.room_cleaning_dual,
            end_of_lease_cleaning_per_room=self.end_of_lease_cleaning_per_room,
            carpark_weekly=self.carpark_weekly,
            storage_weekly=self.storage_weekly,
            weeks_per_month=self.weeks_per_month,
            bond_multiplier=self.bond_multiplier,
            default_lease_months=self.default_lease_months,
            lease_multipliers=self.get_lease_multipliers(),
        )
