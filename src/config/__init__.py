"""Runtime configuration."""

from src.config.settings import LeaderboardSettings, ZeroInvestmentPolicy, get_settings

__all__ = [
    "LeaderboardSettings",
    "ZeroInvestmentPolicy",
    "get_settings",
]
