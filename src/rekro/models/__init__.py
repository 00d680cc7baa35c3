"""Domain models for pricing and profile completion."""

from rekro.models.pricing import (
    DEFAULT_PRICING_CONFIG,
    ENTIRE_HOME,
    InclusionCosts,
    InclusionSelection,
    InclusionState,
    InclusionType,
    OccupancyType,
    PricingConfig,
    PricingContext,
    PricingResult,
    PropertyShape,
    RoomShape,
)
from rekro.models.profile import (
    ApplicationProfile,
    ProfileCompletion,
    ProfileCompletionDetails,
    ProfileSection,
    UploadedDocuments,
    UserProfile,
)

__all__ = [
    "DEFAULT_PRICING_CONFIG",
    "ENTIRE_HOME",
    "ApplicationProfile",
    "InclusionCosts",
    "InclusionSelection",
    "InclusionState",
    "InclusionType",
    "OccupancyType",
    "PricingConfig",
    "PricingContext",
    "PricingResult",
    "ProfileCompletion",
    "ProfileCompletionDetails",
    "ProfileSection",
    "PropertyShape",
    "RoomShape",
    "UploadedDocuments",
    "UserProfile",
]
