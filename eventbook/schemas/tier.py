# eventbook/schemas/tier.py
from enum import Enum


class LoyaltyTier(str, Enum):
    """Loyalty tiers, lowest first."""
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
