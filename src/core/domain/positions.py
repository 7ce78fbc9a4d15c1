"""
Positions — Модели позиций prediction market и leaderboard

Immutable Pydantic модели:
- RawPosition: позиция пользователя в том виде, в каком её отдаёт subgraph
- ValuatedPosition: earnings/ROI одной позиции
- AggregatedPosition: сумма по всем позициям одного пользователя
- Leaderboard: top-N пользователей по earnings

Amounts (netQuantity, valueSold, valueBought) хранятся как пришли, без
lax-коэрсии Pydantic (float и bool не превращаются в int), и парсятся в int
только при оценке позиции: там float и bool отклоняются как AmountParseError.
"""

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Amount в исходном виде; валидный — только int или десятичная строка
RawAmount = StrictInt | StrictStr | StrictFloat | StrictBool


# =============================================================================
# RAW INPUT
# =============================================================================


class MarketPrices(BaseModel):
    """Рынок позиции: текущие цены outcome tokens по индексу outcome."""

    outcome_token_prices: tuple[str | float, ...] = Field(
        ...,
        alias="outcomeTokenPrices",
        description="Цены outcome tokens (десятичные строки), индекс = outcomeIndex",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class UserRef(BaseModel):
    """Ссылка на пользователя (opaque id)."""

    id: str = Field(..., description="Идентификатор пользователя (адрес)")

    model_config = {"frozen": True}


class RawPosition(BaseModel):
    """
    Позиция пользователя по одному outcome одного рынка.

    Принимает camelCase ключи GraphQL payload (netQuantity, valueBought, ...)
    и snake_case имена атрибутов.
    """

    net_quantity: RawAmount = Field(
        ..., alias="netQuantity", description="Чистое количество outcome tokens (signed)"
    )
    value_sold: RawAmount = Field(
        ..., alias="valueSold", description="Суммарная выручка от продаж (token units)"
    )
    value_bought: RawAmount = Field(
        ..., alias="valueBought", description="Суммарные затраты на покупки (token units)"
    )
    outcome_index: int = Field(
        ..., alias="outcomeIndex", description="Индекс outcome в outcomeTokenPrices"
    )
    market: MarketPrices = Field(..., description="Рынок позиции")
    user: UserRef = Field(..., description="Владелец позиции")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def user_id(self) -> str:
        return self.user.id


# =============================================================================
# DERIVED RECORDS
# =============================================================================


class ValuatedPosition(BaseModel):
    """Earnings и ROI одной позиции."""

    user: str = Field(..., description="Идентификатор пользователя")
    earnings: int = Field(..., description="netValue + valueSold - valueBought (signed)")
    invested: int = Field(..., ge=0, description="Вложено (= valueBought)")
    roi: float = Field(..., description="ROI в процентах")

    model_config = {"frozen": True}


class AggregatedPosition(BaseModel):
    """
    Сумма позиций одного пользователя.

    ВАЖНО: roi — невзвешенная СУММА ROI позиций, а не средневзвешенное
    по invested. При нескольких позициях это не процент в обычном смысле.
    """

    user: str = Field(..., description="Идентификатор пользователя (уникальный)")
    invested: int = Field(..., ge=0, description="Сумма invested по позициям")
    earnings: int = Field(..., description="Сумма earnings по позициям")
    roi: float = Field(..., description="Сумма ROI по позициям")

    model_config = {"frozen": True}


class Leaderboard(BaseModel):
    """Top-N пользователей, отсортированных по earnings по убыванию."""

    positions: tuple[AggregatedPosition, ...] = Field(
        default_factory=tuple,
        alias="leaderBoardPositions",
        description="Пользователи по убыванию earnings",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def users(self) -> list[str]:
        """Пользователи в порядке рейтинга."""
        return [position.user for position in self.positions]
