"""Tests for application configuration."""

import pytest
from pydantic import ValidationError

from rekro.config import Settings
from rekro.models import DEFAULT_PRICING_CONFIG


@pytest.fixture
def settings() -> Settings:
    return Settings()


class TestGetBillsTable:
    def test_default_table(self, settings: Settings) -> None:
        assert settings.get_bills_table() == {0: 10.0, 1: 20.0, 2: 15.0, 3: 10.0, 4: 7.0}

    def test_custom_table(self) -> None:
        s = Settings(bills_by_bedrooms="1:25, 2:18.5")
        assert s.get_bills_table() == {1: 25.0, 2: 18.5}

    def test_trailing_comma_ignored(self) -> None:
        assert Settings(bills_by_bedrooms="0:12,").get_bills_table() == {0: 12.0}

    def test_missing_separator_raises(self) -> None:
        with pytest.raises(ValueError):
            Settings(bills_by_bedrooms="0=12").get_bills_table()

    def test_non_numeric_raises(self) -> None:
        with pytest.raises(ValueError):
            Settings(bills_by_bedrooms="one:12").get_bills_table()


class TestGetLeaseMultipliers:
    def test_default_table(self, settings: Settings) -> None:
        assert settings.get_lease_multipliers() == {4: 1.575, 6: 1.05, 9: 4 / 3, 12: 1.0}

    def test_blank_disables(self) -> None:
        assert Settings(lease_multipliers="").get_lease_multipliers() == {}

    def test_parses_pairs(self) -> None:
        s = Settings(lease_multipliers="6:1.1,3:1.25")
        assert s.get_lease_multipliers() == {6: 1.1, 3: 1.25}


class TestGetPricingConfig:
    def test_defaults_match_module_defaults(self, settings: Settings) -> None:
        assert settings.get_pricing_config() == DEFAULT_PRICING_CONFIG

    def test_maps_settings_to_config(self) -> None:
        s = Settings(
            entire_home_markup=0.15,
            furniture_total_cost=2400,
            carpark_weekly=30,
            storage_weekly=12,
            bond_multiplier=6,
            default_lease_months=6,
        )
        config = s.get_pricing_config()
        assert config.entire_home_markup == 0.15
        assert config.furniture_total_cost == 2400
        assert config.carpark_weekly == 30
        assert config.storage_weekly == 12
        assert config.bond_multiplier == 6
        assert config.default_lease_months == 6

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REKRO_CARPARK_WEEKLY", "40")
        monkeypatch.setenv("REKRO_LEASE_MULTIPLIERS", "6:1.05")
        config = Settings().get_pricing_config()
        assert config.carpark_weekly == 40
        assert config.lease_multipliers == {6: 1.05}


class TestValidation:
    def test_negative_markup_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(entire_home_markup=-0.1)

    def test_zero_weeks_per_month_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(weeks_per_month=0)
