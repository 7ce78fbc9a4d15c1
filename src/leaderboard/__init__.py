"""
Leaderboard computation: valuation, aggregation, ranking.
"""

from src.leaderboard.aggregation import (
    aggregate_positions,
    group_positions_by_user,
    valuate_positions,
)
from src.leaderboard.errors import (
    AmountParseError,
    ContractViolation,
    LeaderboardError,
    OutcomeIndexError,
    ZeroInvestmentError,
)
from src.leaderboard.pipeline import LeaderboardPipeline, compute_leaderboard
from src.leaderboard.ranking import LEADERBOARD_SIZE_DEFAULT, get_top_ten, rank_positions
from src.leaderboard.valuation import (
    PositionAmounts,
    get_earnings,
    get_roi,
    invested_amount,
    outcome_token_price,
    parse_position,
    valuate_position,
)

__all__ = [
    # Errors
    "LeaderboardError",
    "ZeroInvestmentError",
    "OutcomeIndexError",
    "AmountParseError",
    "ContractViolation",
    # Valuation
    "PositionAmounts",
    "get_earnings",
    "get_roi",
    "invested_amount",
    "outcome_token_price",
    "parse_position",
    "valuate_position",
    # Aggregation
    "valuate_positions",
    "group_positions_by_user",
    "aggregate_positions",
    # Ranking
    "LEADERBOARD_SIZE_DEFAULT",
    "rank_positions",
    "get_top_ten",
    # Pipeline
    "LeaderboardPipeline",
    "compute_leaderboard",
]
