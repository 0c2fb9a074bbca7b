# eventbook/utils/tiers.py
"""
Loyalty tier helpers for booking eligibility checks.

Tier hierarchy: BRONZE (lowest) -> SILVER -> GOLD -> PLATINUM (highest)
"""

from typing import List, Optional, Union

from eventbook.schemas.tier import LoyaltyTier

TIER_ORDER = {
    LoyaltyTier.BRONZE: 1,
    LoyaltyTier.SILVER: 2,
    LoyaltyTier.GOLD: 3,
    LoyaltyTier.PLATINUM: 4,
}

TIER_COLOR_CLASSES = {
    LoyaltyTier.BRONZE: "bg-amber-100 text-amber-800",
    LoyaltyTier.SILVER: "bg-slate-100 text-slate-700",
    LoyaltyTier.GOLD: "bg-yellow-100 text-yellow-800",
    LoyaltyTier.PLATINUM: "bg-indigo-100 text-indigo-800",
}
DEFAULT_TIER_COLOR_CLASSES = "bg-gray-100 text-gray-700"

TierLike = Union[LoyaltyTier, str]


def _as_tier(tier: TierLike) -> LoyaltyTier:
    return tier if isinstance(tier, LoyaltyTier) else LoyaltyTier(tier)


def get_tier_level(tier: TierLike) -> int:
    """Get the tier level (1-4) for comparison."""
    return TIER_ORDER[_as_tier(tier)]


def can_book(user_tier: Optional[TierLike], min_tier: TierLike) -> bool:
    """
    Check if a user's tier meets or exceeds the minimum required tier.

    A user without a tier can only book BRONZE events.
    """
    if not user_tier:
        return _as_tier(min_tier) == LoyaltyTier.BRONZE
    return get_tier_level(user_tier) >= get_tier_level(min_tier)


def get_tier_display_name(tier: TierLike) -> str:
    """'GOLD' -> 'Gold'"""
    return _as_tier(tier).value.capitalize()


def get_accessible_tiers(user_tier: Optional[TierLike]) -> List[LoyaltyTier]:
    """Get all tiers that a user can access based on their tier."""
    if not user_tier:
        return [LoyaltyTier.BRONZE]
    user_level = get_tier_level(user_tier)
    return [tier for tier, level in TIER_ORDER.items() if level <= user_level]


def get_tier_color_classes(tier: Optional[TierLike]) -> str:
    if not tier:
        return DEFAULT_TIER_COLOR_CLASSES
    return TIER_COLOR_CLASSES.get(_as_tier(tier), DEFAULT_TIER_COLOR_CLASSES)
