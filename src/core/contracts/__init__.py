"""
Contract Validation Module

Модуль для валидации JSON контрактов на границах leaderboard расчёта.
"""

from .validators import (
    ContractValidator,
    LeaderboardValidator,
    RawPositionValidator,
    SchemaLoader,
    validate_leaderboard,
    validate_raw_position,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RawPositionValidator",
    "LeaderboardValidator",
    # Functions
    "validate_raw_position",
    "validate_leaderboard",
]
