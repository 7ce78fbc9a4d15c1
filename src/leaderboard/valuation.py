"""
Valuation — Earnings и ROI одной позиции

Алгоритм (mark-to-market по текущей цене outcome token):
    net_value = scaled_multiply(netQuantity, outcomeTokenPrices[outcomeIndex])
    earnings  = net_value + valueSold - valueBought
    roi       = scaled_divide(earnings, valueBought) * 100

Все amounts — int произвольной точности, float появляется только в ROI.
Функции чистые, без побочных эффектов.
"""

from decimal import Decimal
from typing import NamedTuple

from src.core.domain.positions import RawPosition, ValuatedPosition
from src.core.math.scaled_arithmetic import (
    DEFAULT_SCALE,
    parse_amount,
    parse_price,
    scaled_divide,
    scaled_multiply,
)
from src.leaderboard.errors import AmountParseError, OutcomeIndexError, ZeroInvestmentError


class PositionAmounts(NamedTuple):
    """Распарсенные числовые поля позиции."""

    net_quantity: int
    value_sold: int
    value_bought: int
    outcome_token_price: Decimal


def _parse_field(value: int | str, field: str) -> int:
    try:
        return parse_amount(value, field)
    except ValueError as exc:
        raise AmountParseError(field, value) from exc


def outcome_token_price(position: RawPosition) -> Decimal:
    """
    Цена outcome token, на который открыта позиция.

    Raises:
        OutcomeIndexError: outcomeIndex вне диапазона (отрицательные индексы
            тоже невалидны, без wrap-around)
        AmountParseError: цена не является конечным десятичным числом
    """
    prices = position.market.outcome_token_prices
    index = position.outcome_index

    if not 0 <= index < len(prices):
        raise OutcomeIndexError(index, len(prices))

    raw_price = prices[index]
    try:
        return parse_price(raw_price)
    except ValueError as exc:
        raise AmountParseError(f"outcomeTokenPrices[{index}]", raw_price) from exc


def invested_amount(position: RawPosition) -> int:
    """valueBought позиции как int."""
    return _parse_field(position.value_bought, "valueBought")


def parse_position(position: RawPosition) -> PositionAmounts:
    """Парсинг amounts и цены позиции."""
    return PositionAmounts(
        net_quantity=_parse_field(position.net_quantity, "netQuantity"),
        value_sold=_parse_field(position.value_sold, "valueSold"),
        value_bought=_parse_field(position.value_bought, "valueBought"),
        outcome_token_price=outcome_token_price(position),
    )


def _earnings(amounts: PositionAmounts, scale: int) -> int:
    net_value = scaled_multiply(amounts.net_quantity, amounts.outcome_token_price, scale)
    return net_value + amounts.value_sold - amounts.value_bought


def _roi(earnings: int, value_bought: int, user: str, scale: int) -> float:
    if value_bought == 0:
        raise ZeroInvestmentError(user)
    return scaled_divide(earnings, value_bought, scale) * 100


def get_earnings(position: RawPosition, scale: int = DEFAULT_SCALE) -> int:
    """
    Earnings позиции: рыночная стоимость остатка + продажи - покупки.

    Args:
        position: Позиция из subgraph
        scale: Fixed-point scale factor

    Returns:
        Earnings в token units (может быть отрицательным)
    """
    return _earnings(parse_position(position), scale)


def get_roi(position: RawPosition, scale: int = DEFAULT_SCALE) -> float:
    """
    ROI позиции в процентах относительно valueBought.

    Raises:
        ZeroInvestmentError: valueBought == 0
    """
    amounts = parse_position(position)
    return _roi(_earnings(amounts, scale), amounts.value_bought, position.user_id, scale)


def valuate_position(position: RawPosition, scale: int = DEFAULT_SCALE) -> ValuatedPosition:
    """
    Оценка одной позиции: earnings, invested, roi.

    Args:
        position: Позиция из subgraph
        scale: Fixed-point scale factor (одинаковый на весь расчёт)

    Returns:
        ValuatedPosition

    Raises:
        AmountParseError: amount или цена не парсится
        OutcomeIndexError: outcomeIndex вне диапазона цен
        ZeroInvestmentError: valueBought == 0
    """
    amounts = parse_position(position)
    earnings = _earnings(amounts, scale)

    return ValuatedPosition(
        user=position.user_id,
        earnings=earnings,
        invested=amounts.value_bought,
        roi=_roi(earnings, amounts.value_bought, position.user_id, scale),
    )
