"""Общие fixtures: построение payload позиций в формате subgraph."""

import pytest


def build_position_payload(
    user: str,
    net_quantity: int | str = "0",
    value_sold: int | str = "0",
    value_bought: int | str = "100",
    prices: tuple[str, ...] = ("0.5", "0.5"),
    outcome_index: int = 0,
) -> dict:
    """Payload позиции в camelCase, как его отдаёт GraphQL запрос."""
    return {
        "netQuantity": str(net_quantity),
        "valueSold": str(value_sold),
        "valueBought": str(value_bought),
        "outcomeIndex": outcome_index,
        "market": {"outcomeTokenPrices": list(prices)},
        "user": {"id": user},
    }


def build_closed_position_payload(user: str, earnings: int, invested: int = 100) -> dict:
    """Закрытая позиция (netQuantity == 0) с заданными earnings."""
    return build_position_payload(
        user,
        net_quantity=0,
        value_sold=invested + earnings,
        value_bought=invested,
    )


@pytest.fixture
def position_payload():
    """Фабрика payload позиций."""
    return build_position_payload


@pytest.fixture
def closed_position_payload():
    """Фабрика закрытых позиций с заданными earnings."""
    return build_closed_position_payload
