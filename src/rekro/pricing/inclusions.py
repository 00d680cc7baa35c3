"""The single path by which an inclusion selection changes.

Selections are immutable; every function returns a new one. A selected
inclusion's price always comes from the cost functions, never from the caller.
"""

from rekro.models.pricing import (
    DEFAULT_PRICING_CONFIG,
    InclusionSelection,
    InclusionState,
    InclusionType,
    PricingConfig,
    PricingContext,
)
from rekro.pricing.costs import inclusion_weekly_cost


def _coerce(inclusion: InclusionType | str) -> InclusionType | None:
    try:
        return InclusionType(inclusion)
    except ValueError:
        return None


def is_inclusion_selected(selection: InclusionSelection, inclusion: InclusionType | str) -> bool:
    kind = _coerce(inclusion)
    return kind is not None and selection.get(kind).selected


def toggle_inclusion(
    selection: InclusionSelection,
    inclusion: InclusionType | str,
    context: PricingContext,
    *,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> InclusionSelection:
    """Flip ``inclusion`` on or off.

    Switching on prices it for ``context``; switching off zeroes the price.
    Unknown inclusion names return ``selection`` unchanged.
    """
    kind = _coerce(inclusion)
    if kind is None:
        return selection

    if selection.get(kind).selected:
        return selection.replace(kind, InclusionState())
    price = inclusion_weekly_cost(kind, context, config)
    return selection.replace(kind, InclusionState(selected=True, weekly_price=price))


def reprice_selection(
    selection: InclusionSelection,
    context: PricingContext,
    *,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> InclusionSelection:
    """Refresh every selected price, e.g. after the lease length changes."""
    repriced = selection
    for kind in selection.selected_types():
        price = inclusion_weekly_cost(kind, context, config)
        repriced = repriced.replace(kind, InclusionState(selected=True, weekly_price=price))
    return repriced
