"""Tenant profile completion."""

from rekro.profile.completion import (
    BADGE_READY_TO_CONNECT,
    BADGE_RENT_PASS,
    BADGE_TRUSTED,
    CompletionCheck,
    ScoringInput,
    calculate_profile_completion,
    details_from_user,
    is_profile_complete_from_user,
    merge_form_state,
)

__all__ = [
    "BADGE_READY_TO_CONNECT",
    "BADGE_RENT_PASS",
    "BADGE_TRUSTED",
    "CompletionCheck",
    "ScoringInput",
    "calculate_profile_completion",
    "details_from_user",
    "is_profile_complete_from_user",
    "merge_form_state",
]
