"""
Ranking — Top-N пользователей по earnings

Стабильная сортировка по earnings по убыванию: при равных earnings
сохраняется порядок агрегации, вторичного ключа нет.
"""

import logging
from typing import Final, Iterable

from src.core.domain.positions import AggregatedPosition, Leaderboard

logger = logging.getLogger(__name__)

# Размер leaderboard по умолчанию
LEADERBOARD_SIZE_DEFAULT: Final[int] = 10


def rank_positions(
    positions: Iterable[AggregatedPosition],
    limit: int = LEADERBOARD_SIZE_DEFAULT,
) -> Leaderboard:
    """
    Сортировка по earnings (desc) и усечение до limit.

    Args:
        positions: Агрегированные позиции (по одной на пользователя)
        limit: Максимальный размер leaderboard

    Returns:
        Leaderboard длиной min(limit, число пользователей)

    Raises:
        ValueError: Если limit < 0

    Examples:
        >>> board = rank_positions([])
        >>> len(board)
        0
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    # reverse=True сохраняет стабильность для равных ключей
    ranked = sorted(positions, key=lambda position: position.earnings, reverse=True)
    board = Leaderboard(positions=ranked[:limit])

    logger.debug("Ranked %d users, leaderboard size %d", len(ranked), len(board))
    return board


def get_top_ten(positions: Iterable[AggregatedPosition]) -> Leaderboard:
    """Top-10 пользователей по earnings."""
    return rank_positions(positions, LEADERBOARD_SIZE_DEFAULT)
