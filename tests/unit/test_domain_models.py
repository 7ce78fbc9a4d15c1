"""
Тесты для доменных моделей: RawPosition, ValuatedPosition, AggregatedPosition, Leaderboard

Проверяет:
1. Создание моделей из camelCase payload и snake_case имён
2. Immutability (frozen=True)
3. Сохранение amounts в исходном виде (парсинг — при оценке)
4. Сериализацию/десериализацию JSON
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    AggregatedPosition,
    Leaderboard,
    MarketPrices,
    RawPosition,
    UserRef,
    ValuatedPosition,
)


class TestRawPosition:
    """Тесты для модели RawPosition"""

    def test_from_graphql_payload(self, position_payload) -> None:
        position = RawPosition.model_validate(
            position_payload("0xalice", net_quantity=-15, value_sold=3, value_bought=7,
                             prices=("0.2", "0.8"), outcome_index=1)
        )

        assert position.net_quantity == "-15"
        assert position.value_sold == "3"
        assert position.value_bought == "7"
        assert position.outcome_index == 1
        assert position.market.outcome_token_prices == ("0.2", "0.8")
        assert position.user_id == "0xalice"

    def test_from_attribute_names(self) -> None:
        position = RawPosition(
            net_quantity=10**30,
            value_sold=0,
            value_bought=1,
            outcome_index=0,
            market=MarketPrices(outcome_token_prices=("1",)),
            user=UserRef(id="0xbob"),
        )
        assert position.net_quantity == 10**30
        assert position.user.id == "0xbob"

    def test_amounts_kept_as_received(self, position_payload) -> None:
        """Битая строка не отклоняется моделью: ошибка — при оценке"""
        position = RawPosition.model_validate(position_payload("u", value_sold="oops"))
        assert position.value_sold == "oops"

    def test_missing_field_raises(self, position_payload) -> None:
        payload = position_payload("u")
        del payload["valueBought"]
        with pytest.raises(ValidationError):
            RawPosition.model_validate(payload)

    def test_immutable(self, position_payload) -> None:
        position = RawPosition.model_validate(position_payload("u"))
        with pytest.raises(ValidationError):
            position.outcome_index = 1  # type: ignore

    def test_json_roundtrip_by_alias(self, position_payload) -> None:
        position = RawPosition.model_validate(position_payload("u", net_quantity=5))
        restored = RawPosition.model_validate_json(position.model_dump_json(by_alias=True))
        assert restored == position

    def test_float_and_bool_amounts_kept_as_is(self, position_payload) -> None:
        """float и bool не приводятся к int: их отвергает parse_amount"""
        payload = position_payload("u")
        payload["netQuantity"] = 1.0
        payload["valueBought"] = True

        position = RawPosition.model_validate(payload)

        assert type(position.net_quantity) is float
        assert position.value_bought is True


class TestDerivedRecords:
    """Тесты ValuatedPosition / AggregatedPosition / Leaderboard"""

    def test_valuated_immutable(self) -> None:
        valuated = ValuatedPosition(user="A", earnings=1, invested=2, roi=50.0)
        with pytest.raises(ValidationError):
            valuated.earnings = 5  # type: ignore

    def test_aggregated_immutable(self) -> None:
        aggregated = AggregatedPosition(user="A", invested=2, earnings=1, roi=50.0)
        with pytest.raises(ValidationError):
            aggregated.roi = 0.0  # type: ignore

    def test_negative_invested_rejected(self) -> None:
        with pytest.raises(ValidationError, match="invested"):
            ValuatedPosition(user="A", earnings=0, invested=-1, roi=0.0)

        with pytest.raises(ValidationError, match="invested"):
            AggregatedPosition(user="A", invested=-1, earnings=0, roi=0.0)

    def test_leaderboard_positions_immutable(self) -> None:
        board = Leaderboard(
            positions=[AggregatedPosition(user="A", invested=1, earnings=1, roi=100.0)]
        )

        assert isinstance(board.positions, tuple)
        assert not hasattr(board.positions, "append")
        with pytest.raises(ValidationError):
            board.positions = ()  # type: ignore

    def test_large_integers_preserved(self) -> None:
        aggregated = AggregatedPosition(user="A", invested=2**255, earnings=-(2**200), roi=0.0)
        restored = AggregatedPosition.model_validate(aggregated.model_dump())
        assert restored.invested == 2**255
        assert restored.earnings == -(2**200)

    def test_leaderboard_defaults_empty(self) -> None:
        board = Leaderboard()
        assert len(board) == 0
        assert board.users == []

    def test_leaderboard_users_in_order(self) -> None:
        board = Leaderboard(
            positions=[
                AggregatedPosition(user="B", invested=1, earnings=2, roi=0.0),
                AggregatedPosition(user="A", invested=1, earnings=1, roi=0.0),
            ]
        )
        assert board.users == ["B", "A"]
        assert len(board) == 2
