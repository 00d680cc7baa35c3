"""Profile completion scoring.

Each section is an ordered list of :class:`CompletionCheck` built from a
:class:`ScoringInput`. A section scores the share of checks that pass; the
overall score averages the required sections only.
"""

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from rekro.models.profile import (
    ProfileCompletion,
    ProfileCompletionDetails,
    ProfileSection,
    UploadedDocuments,
    UserProfile,
)

BADGE_TRUSTED: Final = "Rekro Trusted"
BADGE_READY_TO_CONNECT: Final = "Ready to Connect"
BADGE_RENT_PASS: Final = "Rent Pass Acquired"

PERSONAL_DETAILS: Final = "personal-details"
VISA_DETAILS: Final = "visa-details"
INCOME_DETAILS: Final = "income-details"
DOCUMENTS: Final = "documents"
LOCATION_PREFERENCES: Final = "location-preferences"


@dataclass(frozen=True)
class ScoringInput:
    user: UserProfile
    details: ProfileCompletionDetails
    documents: UploadedDocuments = field(default_factory=dict)


@dataclass(frozen=True)
class CompletionCheck:
    description: str
    predicate: Callable[[ScoringInput], bool]

    def passes(self, data: ScoringInput) -> bool:
        return bool(self.predicate(data))


@dataclass(frozen=True)
class SectionRules:
    id: str
    title: str
    description: str
    required: bool
    checks: Callable[[ScoringInput], list[CompletionCheck]]


def is_filled(value: Any) -> bool:
    """Set, and for strings not just whitespace."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def has_document(documents: UploadedDocuments, key: str) -> bool:
    return documents.get(key) is not None


def percent(passed: int, total: int) -> int:
    """Whole percentage, halves rounded up. No checks scores 0."""
    if total <= 0:
        return 0
    return math.floor(passed / total * 100 + 0.5)


# ── Section check lists ────────────────────────────────────────────────────────


def _field_check(description: str, name: str) -> CompletionCheck:
    return CompletionCheck(description, lambda d: is_filled(getattr(d.user, name)))


def _document_check(description: str, key: str) -> CompletionCheck:
    return CompletionCheck(description, lambda d: has_document(d.documents, key))


def personal_details_checks(data: ScoringInput) -> list[CompletionCheck]:
    return [
        _field_check("Full name", "full_name"),
        _field_check("Username", "username"),
        _field_check("Phone number", "phone"),
        _field_check("Date of birth", "date_of_birth"),
        _field_check("Gender", "gender"),
        _field_check("Occupation", "occupation"),
        _field_check("Bio", "bio"),
        _field_check("Native language", "native_language"),
        _field_check("Preferred contact method", "preferred_contact_method"),
    ]


def visa_details_checks(data: ScoringInput) -> list[CompletionCheck]:
    non_citizen = data.details.is_citizen is False
    checks = [CompletionCheck("Citizenship status", lambda d: d.details.is_citizen is not None)]
    if non_citizen:
        checks.append(CompletionCheck("Visa type", lambda d: is_filled(d.details.visa_status)))
    checks.append(_document_check("Passport", "passport"))
    if non_citizen:
        checks.append(_document_check("Visa document", "visa"))
    return checks


def income_details_checks(data: ScoringInput) -> list[CompletionCheck]:
    status = data.details.employment_status
    checks = [
        CompletionCheck(
            "Employment status",
            lambda d: d.details.employment_status in ("working", "not_working"),
        )
    ]

    if status == "working":
        checks += [
            CompletionCheck("Employment type", lambda d: is_filled(d.details.employment_type)),
            CompletionCheck("Income source", lambda d: is_filled(d.details.income_source)),
            CompletionCheck("Income frequency", lambda d: is_filled(d.details.income_frequency)),
            CompletionCheck("Income amount", lambda d: is_number(d.details.income_amount)),
            _document_check("Payslips", "payslips"),
        ]
    elif status == "not_working":
        checks += [
            CompletionCheck(
                "Student status",
                lambda d: d.details.student_status in ("student", "not_student"),
            ),
            CompletionCheck("Finance support type", lambda d: is_filled(d.details.finance_support_type)),
            CompletionCheck("Finance support details", lambda d: is_filled(d.details.finance_support_details)),
            _document_check("Proof of funds", "proofOfFunds"),
        ]
        if data.details.student_status == "student":
            checks += [
                _document_check("Student ID", "studentId"),
                _document_check("Confirmation of enrolment", "coe"),
            ]
    return checks


def additional_documents_checks(data: ScoringInput) -> list[CompletionCheck]:
    return [
        _document_check("Driving license", "drivingLicense"),
        _document_check("Reference letter", "referenceLetter"),
        _document_check("Guarantor letter", "guarantorLetter"),
    ]


def _preference(data: ScoringInput, name: str) -> Any:
    value = getattr(data.details, name)
    if value is None and data.user.application_profile is not None:
        value = getattr(data.user.application_profile, name)
    return value


def rental_preferences_checks(data: ScoringInput) -> list[CompletionCheck]:
    return [
        CompletionCheck("Maximum weekly budget", lambda d: is_number(_preference(d, "max_budget_per_week"))),
        CompletionCheck("Preferred locality", lambda d: is_filled(_preference(d, "preferred_locality"))),
    ]


SECTIONS: Final = (
    SectionRules(PERSONAL_DETAILS, "Personal Details", "Basic information about you", True, personal_details_checks),
    SectionRules(
        VISA_DETAILS, "Visa Details", "Citizenship status and visa documentation", True, visa_details_checks
    ),
    SectionRules(
        INCOME_DETAILS, "Income Details", "Employment and financial information", True, income_details_checks
    ),
    SectionRules(DOCUMENTS, "Additional Documents", "Upload remaining documents", False, additional_documents_checks),
    SectionRules(
        LOCATION_PREFERENCES,
        "Rental Preference",
        "Your preferred locality and budget",
        True,
        rental_preferences_checks,
    ),
)


# ── Scoring ────────────────────────────────────────────────────────────────────


def score_section(rules: SectionRules, data: ScoringInput) -> ProfileSection:
    checks = rules.checks(data)
    missing = tuple(check.description for check in checks if not check.passes(data))
    score = percent(len(checks) - len(missing), len(checks))
    return ProfileSection(
        id=rules.id,
        title=rules.title,
        description=rules.description,
        completion_percentage=score,
        required=rules.required,
        completed=score == 100,
        missing=missing,
    )


def _badges(user: UserProfile, sections: Mapping[str, ProfileSection]) -> list[str]:
    badges = []
    if is_filled(user.image_url) and is_filled(user.full_name) and is_filled(user.phone):
        badges.append(BADGE_TRUSTED)

    personal_done = sections[PERSONAL_DETAILS].completed
    if personal_done and user.discoverable is True:
        badges.append(BADGE_READY_TO_CONNECT)

    if all(sections[s].completed for s in (PERSONAL_DETAILS, VISA_DETAILS, INCOME_DETAILS, LOCATION_PREFERENCES)):
        badges.append(BADGE_RENT_PASS)
    return badges


def calculate_profile_completion(
    user: UserProfile | None,
    details: ProfileCompletionDetails | None = None,
    documents: UploadedDocuments | None = None,
) -> ProfileCompletion:
    """Score every section for ``user``.

    ``details`` holds in-progress answers; ``documents`` the uploads, falling
    back to the documents stored on the user's application profile. Without a
    user the sections are still scored (against an empty record) but the
    profile is never complete and earns no badges.
    """
    record = user if user is not None else UserProfile()
    if documents is None:
        app = record.application_profile
        documents = app.documents if app is not None else {}
    data = ScoringInput(user=record, details=details or ProfileCompletionDetails(), documents=documents)

    sections = tuple(score_section(rules, data) for rules in SECTIONS)
    required = [s for s in sections if s.required]
    total = math.floor(sum(s.completion_percentage for s in required) / len(required) + 0.5)

    if user is None:
        return ProfileCompletion(total_percentage=total, sections=sections)

    return ProfileCompletion(
        total_percentage=total,
        sections=sections,
        unlocked_badges=tuple(_badges(user, {s.id: s for s in sections})),
        is_complete=all(s.completed for s in required),
    )


# ── Persisted-user helpers ─────────────────────────────────────────────────────


def details_from_user(user: UserProfile | None) -> ProfileCompletionDetails:
    """Completion details implied by the stored application profile alone.

    A user without a visa status is taken to be a citizen; employment defaults
    to working and student status to not a student.
    """
    app = user.application_profile if user is not None else None
    if app is None:
        return ProfileCompletionDetails(is_citizen=True, employment_status="working", student_status="not_student")

    return ProfileCompletionDetails(
        is_citizen=not app.visa_status,
        visa_status=app.visa_status,
        employment_status=app.employment_status or "working",
        employment_type=app.employment_type,
        income_source=app.income_source,
        income_frequency=app.income_frequency,
        income_amount=app.income_amount,
        student_status=app.student_status or "not_student",
        finance_support_type=app.finance_support_type,
        finance_support_details=app.finance_support_details,
        max_budget_per_week=app.max_budget_per_week,
        preferred_locality=app.preferred_locality,
    )


def is_profile_complete_from_user(user: UserProfile | None) -> bool:
    """Completion gate for callers that only hold the persisted user."""
    if user is None:
        return False
    return calculate_profile_completion(user, details_from_user(user)).is_complete


def merge_form_state(details: ProfileCompletionDetails | None, overrides: Mapping[str, Any] | None) -> ProfileCompletionDetails:
    """Overlay in-progress form edits on ``details``. Unknown keys are ignored."""
    base = details.model_dump() if details is not None else {}
    return ProfileCompletionDetails.model_validate({**base, **(overrides or {})})
