"""Pydantic models for tenant profiles and profile completion results."""

from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

UploadedDocuments = Mapping[str, Any]
"""Document key (``passport``, ``payslips``, ...) to upload metadata. Only presence matters."""


class ApplicationProfile(BaseModel):
    """Rental application answers as persisted for a user."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    visa_status: str | None = None
    employment_status: str | None = None
    employment_type: str | None = None
    income_source: str | None = None
    income_frequency: str | None = None
    income_amount: float | None = None
    student_status: str | None = None
    finance_support_type: str | None = None
    finance_support_details: str | None = None
    max_budget_per_week: float | None = None
    preferred_locality: str | None = None
    documents: dict[str, Any] = Field(default_factory=dict)

    @field_validator("documents", mode="before")
    @classmethod
    def no_documents_when_missing(cls, v: Any) -> Any:
        return {} if v is None else v


class UserProfile(BaseModel):
    """The persisted user record."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    full_name: str | None = None
    username: str | None = None
    email: str | None = None
    phone: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    occupation: str | None = None
    bio: str | None = None
    native_language: str | None = None
    preferred_contact_method: str | None = None
    image_url: str | None = None
    discoverable: bool = False
    application_profile: ApplicationProfile | None = None

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def blank_date_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("discoverable", mode="before")
    @classmethod
    def unset_is_not_discoverable(cls, v: Any) -> Any:
        return False if v is None else v


class ProfileCompletionDetails(BaseModel):
    """Conditionally relevant answers, usually taken from in-progress form state."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Residency
    is_citizen: bool | None = None
    visa_status: str | None = None

    # Income / study
    employment_status: str | None = None  # "working" | "not_working"
    employment_type: str | None = None
    income_source: str | None = None
    income_frequency: str | None = None
    income_amount: float | None = None
    student_status: str | None = None  # "student" | "not_student"
    finance_support_type: str | None = None
    finance_support_details: str | None = None

    # Rental preferences
    max_budget_per_week: float | None = None
    preferred_locality: str | None = None


class ProfileSection(BaseModel):
    """Completion of one profile section. Derived, never stored."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    completion_percentage: int = Field(ge=0, le=100)
    required: bool
    completed: bool
    missing: tuple[str, ...] = ()


class ProfileCompletion(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_percentage: int = Field(ge=0, le=100)
    sections: tuple[ProfileSection, ...]
    unlocked_badges: tuple[str, ...] = ()
    is_complete: bool = False

    def section(self, section_id: str) -> ProfileSection | None:
        return next((s for s in self.sections if s.id == section_id), None)
