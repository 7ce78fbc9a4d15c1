"""
Errors — Исключения leaderboard расчёта

Все ошибки fail-fast: пробрасываются из pipeline без частичного результата.
Каждый класс наследует и соответствующий builtin, поэтому стандартные
except ZeroDivisionError / IndexError / ValueError продолжают работать.
"""


class LeaderboardError(Exception):
    """Базовое исключение leaderboard расчёта."""
    pass


class ZeroInvestmentError(LeaderboardError, ZeroDivisionError):
    """
    ROI не определён: valueBought == 0.

    Вызывающий код решает: исключить такие позиции заранее
    (ZeroInvestmentPolicy.EXCLUDE) или позволить расчёту упасть.
    """

    def __init__(self, user: str):
        self.user = user
        super().__init__(
            f"Cannot compute ROI for position of user {user!r}: valueBought is 0"
        )


class OutcomeIndexError(LeaderboardError, IndexError):
    """outcomeIndex вне диапазона outcomeTokenPrices (битые данные subgraph)."""

    def __init__(self, outcome_index: int, price_count: int):
        self.outcome_index = outcome_index
        self.price_count = price_count
        super().__init__(
            f"outcomeIndex {outcome_index} out of range for {price_count} outcome token prices"
        )


class AmountParseError(LeaderboardError, ValueError):
    """Amount или цена не парсится в число."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Cannot parse {field}: {value!r}")


class ContractViolation(LeaderboardError, ValueError):
    """Raw payload не соответствует JSON Schema контракту."""

    def __init__(self, schema_name: str, message: str, index: int | None = None):
        self.schema_name = schema_name
        self.index = index
        location = f" at position #{index}" if index is not None else ""
        super().__init__(f"{schema_name} contract violation{location}: {message}")
