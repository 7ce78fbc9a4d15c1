"""
Pipeline — Полный расчёт leaderboard

raw positions → valuate → aggregate → rank → Leaderboard

Fail-fast: любая ошибка (ZeroInvestmentError, OutcomeIndexError,
AmountParseError, ContractViolation) пробрасывается, частичного
результата нет. Повторный запуск на том же входе даёт идентичный
Leaderboard.
"""

import logging
from typing import Any, Iterable, Mapping

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from src.config.settings import LeaderboardSettings, get_settings
from src.core.contracts.validators import LeaderboardValidator, RawPositionValidator
from src.core.domain.positions import Leaderboard, RawPosition
from src.core.math.scaled_arithmetic import validate_scale
from src.leaderboard.aggregation import aggregate_positions, valuate_positions
from src.leaderboard.errors import ContractViolation
from src.leaderboard.ranking import rank_positions

logger = logging.getLogger(__name__)


class LeaderboardPipeline:
    """
    Расчёт leaderboard по настройкам.

    scale, top_n и политика zero-investment читаются из settings один раз
    при создании и не меняются в пределах прогона.
    """

    def __init__(self, settings: LeaderboardSettings | None = None):
        self.settings = settings or get_settings()
        validate_scale(self.settings.scale)

        self._raw_validator = RawPositionValidator() if self.settings.validate_contracts else None
        self._board_validator = LeaderboardValidator() if self.settings.validate_contracts else None

    def coerce(self, positions: Iterable[RawPosition | Mapping[str, Any]]) -> list[RawPosition]:
        """
        Приведение входа к RawPosition.

        Mapping (GraphQL payload) опционально проверяется по JSON Schema
        и затем валидируется Pydantic моделью.

        Raises:
            ContractViolation: payload не соответствует контракту
        """
        coerced: list[RawPosition] = []

        for index, item in enumerate(positions):
            if isinstance(item, RawPosition):
                coerced.append(item)
                continue

            if self._raw_validator is not None:
                try:
                    self._raw_validator.validate(item)
                except SchemaValidationError as exc:
                    raise ContractViolation("raw_position", exc.message, index) from exc

            try:
                coerced.append(RawPosition.model_validate(item))
            except ValidationError as exc:
                raise ContractViolation("raw_position", str(exc), index) from exc

        return coerced

    def run(self, positions: Iterable[RawPosition | Mapping[str, Any]]) -> Leaderboard:
        """
        Полный расчёт leaderboard.

        Args:
            positions: RawPosition или dict в формате subgraph

        Returns:
            Leaderboard (≤ top_n пользователей, earnings по убыванию)
        """
        raw_positions = self.coerce(positions)

        valuated = valuate_positions(
            raw_positions,
            scale=self.settings.scale,
            zero_investment_policy=self.settings.zero_investment_policy,
        )
        aggregated = aggregate_positions(valuated)
        board = rank_positions(aggregated, limit=self.settings.top_n)

        if self._board_validator is not None:
            try:
                self._board_validator.validate(board.model_dump(mode="json", by_alias=True))
            except SchemaValidationError as exc:
                raise ContractViolation("leaderboard", exc.message) from exc

        logger.debug(
            "Leaderboard computed: %d positions, %d users, %d ranked",
            len(raw_positions),
            len(aggregated),
            len(board),
        )
        return board


def compute_leaderboard(
    positions: Iterable[RawPosition | Mapping[str, Any]],
    settings: LeaderboardSettings | None = None,
) -> Leaderboard:
    """Расчёт leaderboard с настройками по умолчанию (или переданными)."""
    return LeaderboardPipeline(settings).run(positions)
