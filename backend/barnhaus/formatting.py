"""Formatting helpers for pricing output.

Provides the display strings the estimator shows: whole-dollar totals,
package labels, and multipliers (e.g. '$304,169', 'Economy Package', '1.15x').
"""

from __future__ import annotations

from barnhaus.models.enums import PricingTier

_TIER_LABELS: dict[PricingTier, str] = {
    PricingTier.ECONOMY: "Economy Package",
    PricingTier.STANDARD: "Standard Package",
    PricingTier.LUXURY: "Luxury Package",
}


def format_currency(amount: float) -> str:
    """Format an amount as whole US dollars with comma separators."""
    rounded = round(amount)
    if rounded < 0:
        return f"-${-rounded:,}"
    return f"${rounded:,}"


def tier_label(tier: PricingTier) -> str:
    return _TIER_LABELS[tier]


def format_multiplier(value: float) -> str:
    """Format a cost multiplier as e.g. '1.15x'."""
    return f"{value:.2f}x"
