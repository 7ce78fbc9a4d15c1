"""
Aggregation — Оценка всех позиций и свёртка по пользователю

Шаги:
1. Каждая позиция оценивается независимо (valuate_position)
2. Оценённые позиции группируются по user (точное совпадение строки,
   порядок внутри группы = порядок входа)
3. По каждой группе суммируются invested, earnings и roi

ИНВАРИАНТЫ:
1. Каждый user из входа встречается в выходе ровно один раз
2. sum(invested) сохраняется при агрегации
3. roi пользователя = НЕВЗВЕШЕННАЯ сумма ROI его позиций (не среднее
   и не взвешенное по invested); воспроизводится как есть
"""

import logging
from typing import Iterable, Sequence

from src.config.settings import ZeroInvestmentPolicy
from src.core.domain.positions import AggregatedPosition, RawPosition, ValuatedPosition
from src.core.math.scaled_arithmetic import DEFAULT_SCALE
from src.leaderboard.valuation import invested_amount, valuate_position

logger = logging.getLogger(__name__)


def valuate_positions(
    positions: Iterable[RawPosition],
    scale: int = DEFAULT_SCALE,
    zero_investment_policy: ZeroInvestmentPolicy = ZeroInvestmentPolicy.RAISE,
) -> list[ValuatedPosition]:
    """
    Оценка всех позиций в порядке входа.

    Args:
        positions: Позиции из subgraph
        scale: Fixed-point scale factor
        zero_investment_policy: RAISE — ZeroInvestmentError пробрасывается;
            EXCLUDE — позиции с valueBought == 0 пропускаются

    Returns:
        Список ValuatedPosition (тот же порядок, что и вход)
    """
    valuated: list[ValuatedPosition] = []
    excluded = 0

    for position in positions:
        if (
            zero_investment_policy is ZeroInvestmentPolicy.EXCLUDE
            and invested_amount(position) == 0
        ):
            excluded += 1
            continue
        valuated.append(valuate_position(position, scale))

    if excluded:
        logger.warning("Excluded %d zero-investment positions", excluded)

    logger.debug("Valuated %d positions (scale=%d)", len(valuated), scale)
    return valuated


def group_positions_by_user(
    positions: Iterable[ValuatedPosition],
) -> dict[str, list[ValuatedPosition]]:
    """Группировка по user; порядок групп = первое появление user."""
    groups: dict[str, list[ValuatedPosition]] = {}
    for position in positions:
        groups.setdefault(position.user, []).append(position)
    return groups


def aggregate_positions(positions: Sequence[ValuatedPosition]) -> list[AggregatedPosition]:
    """
    Свёртка оценённых позиций по пользователю.

    Один проход: upsert-or-initialize аккумулятора на каждую позицию.
    roi суммируется слева направо обычным сложением float: sum() в новых
    версиях Python использует компенсированное суммирование и дал бы другой
    последний бит.

    Returns:
        По одной AggregatedPosition на пользователя, в порядке первого
        появления пользователя во входе
    """
    totals: dict[str, tuple[int, int, float]] = {}

    for position in positions:
        invested, earnings, roi = totals.get(position.user, (0, 0, 0.0))
        totals[position.user] = (
            invested + position.invested,
            earnings + position.earnings,
            roi + position.roi,
        )

    aggregated = [
        AggregatedPosition(user=user, invested=invested, earnings=earnings, roi=roi)
        for user, (invested, earnings, roi) in totals.items()
    ]

    logger.debug(
        "Aggregated %d positions into %d users", len(positions), len(aggregated)
    )
    return aggregated
