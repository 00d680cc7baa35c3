"""Shared pytest fixtures."""

import os
import sys

import pytest
from hypothesis import HealthCheck, settings

from rekro.config import Settings
from rekro.models import (
    ENTIRE_HOME,
    ApplicationProfile,
    PricingContext,
    PropertyShape,
    RoomShape,
    UserProfile,
)


def pytest_configure(config: pytest.Config) -> None:
    """Force line-buffered stdout when piped."""
    if hasattr(sys.stdout, "reconfigure") and not sys.stdout.isatty():
        sys.stdout.reconfigure(line_buffering=True)
    if hasattr(sys.stderr, "reconfigure") and not sys.stderr.isatty():
        sys.stderr.reconfigure(line_buffering=True)


# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=10)
settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent the local .env file from leaking into test Settings instances."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )


@pytest.fixture
def single_room() -> RoomShape:
    return RoomShape(id="r1", max_occupancy=1, size_sqm=10)


@pytest.fixture
def double_room() -> RoomShape:
    return RoomShape(id="r2", max_occupancy=2, size_sqm=20)


@pytest.fixture
def share_house(single_room: RoomShape, double_room: RoomShape) -> PropertyShape:
    """Two-bedroom share house with parking and a storage cage."""
    return PropertyShape(
        bedroom_count=2,
        furnished=True,
        base_weekly_rent=600,
        amenities=frozenset({"Off-street Parking", "Storage Cage"}),
        rooms=(single_room, double_room),
    )


@pytest.fixture
def unfurnished_home() -> PropertyShape:
    """Unfurnished three-bedroom house let as a whole."""
    return PropertyShape(
        bedroom_count=3,
        furnished=False,
        base_weekly_rent=700,
        amenities=frozenset({"Garage"}),
        rooms=(
            RoomShape(max_occupancy=1),
            RoomShape(max_occupancy=2),
            RoomShape(max_occupancy=1),
        ),
    )


@pytest.fixture
def room_context(share_house: PropertyShape, double_room: RoomShape) -> PricingContext:
    return PricingContext(property=share_house, selected_unit=double_room)


@pytest.fixture
def home_context(unfurnished_home: PropertyShape) -> PricingContext:
    return PricingContext(property=unfurnished_home, selected_unit=ENTIRE_HOME, is_entire_home=True)


@pytest.fixture
def complete_user() -> UserProfile:
    """A user whose persisted record completes every required section."""
    return UserProfile(
        full_name="Alex Tran",
        username="alext",
        email="alex@example.com",
        phone="+61 400 000 000",
        date_of_birth="1996-04-02",
        gender="non-binary",
        occupation="Nurse",
        bio="Quiet, tidy, early riser.",
        native_language="Vietnamese",
        preferred_contact_method="email",
        image_url="https://cdn.example.com/a.png",
        discoverable=True,
        application_profile=ApplicationProfile(
            employment_status="working",
            employment_type="full_time",
            income_source="salary",
            income_frequency="fortnightly",
            income_amount=3100,
            max_budget_per_week=450,
            preferred_locality="Carlton",
            documents={"passport": {"name": "passport.pdf"}, "payslips": {"name": "payslips.pdf"}},
        ),
    )
