"""JSON routes over the pricing and profile functions."""

from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from rekro.logging import get_logger
from rekro.models.pricing import (
    InclusionSelection,
    Money,
    PricingConfig,
    PricingContext,
    PricingResult,
    PropertyShape,
    RoomShape,
)
from rekro.models.profile import ProfileCompletion, ProfileCompletionDetails, UserProfile
from rekro.pricing.allocation import allocate_room_rents
from rekro.pricing.catalog import inclusion_catalog
from rekro.pricing.costs import end_of_lease_cleaning_cost
from rekro.pricing.inclusions import toggle_inclusion
from rekro.pricing.orchestrator import calculate_pricing, quote_from_payload
from rekro.profile.completion import calculate_profile_completion, details_from_user, merge_form_state

logger = get_logger(__name__)

router = APIRouter()


def _get_pricing_config(request: Request) -> PricingConfig:
    return request.app.state.pricing_config  # type: ignore[no-any-return]


# ── Request / response bodies ──────────────────────────────────────────────────


class ToggleRequest(BaseModel):
    context: PricingContext
    inclusion: str
    selection: InclusionSelection | None = None


class ToggleResponse(BaseModel):
    selection: InclusionSelection
    pricing: PricingResult


class CatalogRequest(BaseModel):
    property: PropertyShape
    is_entire_home: bool = False


class CatalogItem(BaseModel):
    inclusion: str
    title: str
    availability: str


class CatalogResponse(BaseModel):
    items: list[CatalogItem]
    end_of_lease_cleaning: float


class AllocateRequest(BaseModel):
    base_weekly_rent: Money = 0.0
    rooms: list[RoomShape] = Field(default_factory=list)


class RoomRent(BaseModel):
    room: RoomShape
    weight: float
    weekly_rent: float
    bond: float


class ProfileCompletionRequest(BaseModel):
    user: UserProfile | None = None
    details: ProfileCompletionDetails | None = None
    form_state: dict[str, Any] = Field(default_factory=dict)
    documents: dict[str, Any] | None = None


# ── Routes ─────────────────────────────────────────────────────────────────────


@router.get("/health")
def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse({"status": "ok"})


@router.post("/api/pricing/quote")
def quote(request: Request, payload: Any = Body(default=None)) -> PricingResult:
    """Price a pricing context. Malformed contexts quote zero."""
    result = quote_from_payload(payload if isinstance(payload, dict) else None, config=_get_pricing_config(request))
    logger.debug("pricing_quoted", total_weekly_rent=result.total_weekly_rent)
    return result


@router.post("/api/pricing/inclusions/toggle")
def toggle(request: Request, body: ToggleRequest) -> ToggleResponse:
    """Flip one inclusion and return the new selection with its quote."""
    config = _get_pricing_config(request)
    current = body.selection if body.selection is not None else body.context.inclusions
    selection = toggle_inclusion(current, body.inclusion, body.context, config=config)
    pricing = calculate_pricing(body.context.model_copy(update={"inclusions": selection}), config=config)
    logger.info(
        "inclusion_toggled",
        inclusion=body.inclusion,
        selected=list(selection.selected_types()),
        total_weekly_rent=pricing.total_weekly_rent,
    )
    return ToggleResponse(selection=selection, pricing=pricing)


@router.post("/api/pricing/inclusions/catalog")
def catalog(request: Request, body: CatalogRequest) -> CatalogResponse:
    config = _get_pricing_config(request)
    items = [
        CatalogItem(inclusion=entry.inclusion.value, title=entry.title, availability=entry.availability.value)
        for entry in inclusion_catalog(body.property, body.is_entire_home, config)
    ]
    return CatalogResponse(
        items=items,
        end_of_lease_cleaning=end_of_lease_cleaning_cost(body.property.rooms, body.property.bedroom_count, config),
    )


@router.post("/api/pricing/rooms/allocate")
def allocate(request: Request, body: AllocateRequest) -> list[RoomRent]:
    """Split a property's weekly rent across its rooms."""
    allocations = allocate_room_rents(body.base_weekly_rent, body.rooms, _get_pricing_config(request))
    return [
        RoomRent(room=a.room, weight=a.weight, weekly_rent=a.weekly_rent, bond=a.bond) for a in allocations
    ]


@router.post("/api/profile/completion")
def profile_completion(body: ProfileCompletionRequest) -> ProfileCompletion:
    """Score a profile.

    Without ``details`` the answers stored on the user are used; ``form_state``
    overlays unsaved form edits on top of them.
    """
    details = body.details
    if details is None and body.user is not None:
        details = details_from_user(body.user)
    if body.form_state:
        try:
            details = merge_form_state(details, body.form_state)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False)) from e

    completion = calculate_profile_completion(body.user, details, body.documents)
    logger.info(
        "profile_scored",
        total_percentage=completion.total_percentage,
        is_complete=completion.is_complete,
        badges=list(completion.unlocked_badges),
    )
    return completion
