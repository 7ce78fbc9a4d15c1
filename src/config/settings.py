"""
Settings — Параметры leaderboard расчёта

Загружаются из переменных окружения с префиксом LEADERBOARD_ (и .env).
scale фиксирован на весь расчёт: смешивание scale между вызовами внутри
одного прогона нарушает согласованность точности.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.math.scaled_arithmetic import DEFAULT_SCALE


class ZeroInvestmentPolicy(str, Enum):
    """Обработка позиций с valueBought == 0 (ROI не определён)."""

    RAISE = "raise"
    EXCLUDE = "exclude"


class LeaderboardSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LEADERBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    scale: int = Field(default=DEFAULT_SCALE, gt=0, description="Fixed-point scale factor")
    top_n: int = Field(default=10, ge=0, description="Размер leaderboard")
    zero_investment_policy: ZeroInvestmentPolicy = Field(
        default=ZeroInvestmentPolicy.RAISE,
        description="raise: ZeroInvestmentError; exclude: позиция пропускается",
    )
    validate_contracts: bool = Field(
        default=False, description="Проверять raw payload по JSON Schema"
    )


@lru_cache
def get_settings() -> LeaderboardSettings:
    return LeaderboardSettings()
