"""
Domain models and value objects.

Contains the position records flowing through the leaderboard computation:
RawPosition, ValuatedPosition, AggregatedPosition, Leaderboard.
"""

from src.core.domain.positions import (
    AggregatedPosition,
    Leaderboard,
    MarketPrices,
    RawPosition,
    UserRef,
    ValuatedPosition,
)

__all__ = [
    # Raw input
    "RawPosition",
    "MarketPrices",
    "UserRef",
    # Derived records
    "ValuatedPosition",
    "AggregatedPosition",
    "Leaderboard",
]
