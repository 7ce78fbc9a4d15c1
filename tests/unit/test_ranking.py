"""
Тесты для Ranking — top-N по earnings

Проверяет:
1. Сортировку по earnings по убыванию
2. Усечение до limit (по умолчанию 10)
3. Стабильность при равных earnings (без вторичного ключа)
4. Пустой вход → пустой leaderboard
5. Сериализацию Leaderboard (leaderBoardPositions)
"""

import pytest

from src.core.domain import AggregatedPosition, Leaderboard
from src.leaderboard.ranking import LEADERBOARD_SIZE_DEFAULT, get_top_ten, rank_positions


def _aggregated(user: str, earnings: int) -> AggregatedPosition:
    return AggregatedPosition(user=user, invested=100, earnings=earnings, roi=float(earnings))


class TestRankPositions:
    """Тесты rank_positions"""

    def test_default_size(self) -> None:
        assert LEADERBOARD_SIZE_DEFAULT == 10

    def test_reference_scenario(self) -> None:
        board = rank_positions([_aggregated("A", 150), _aggregated("B", 200)])
        assert board.users == ["B", "A"]
        assert [p.earnings for p in board.positions] == [200, 150]

    def test_fifteen_users_truncated_to_top_ten(self) -> None:
        positions = [_aggregated(f"user{i}", i) for i in range(1, 16)]
        board = rank_positions(positions)

        assert len(board) == 10
        assert [p.earnings for p in board.positions] == list(range(15, 5, -1))

    def test_fewer_users_than_limit(self) -> None:
        board = rank_positions([_aggregated("A", 1), _aggregated("B", 3), _aggregated("C", 2)])
        assert board.users == ["B", "C", "A"]

    def test_earnings_non_increasing(self) -> None:
        earnings = [5, -3, 12, 0, 12, 7, -10, 99, 1, 1, 4, 8]
        board = rank_positions([_aggregated(f"u{i}", e) for i, e in enumerate(earnings)])

        ranked = [p.earnings for p in board.positions]
        assert all(a >= b for a, b in zip(ranked, ranked[1:]))
        assert len(board) == min(10, len(earnings))

    def test_ties_keep_input_order(self) -> None:
        board = rank_positions(
            [_aggregated("A", 10), _aggregated("B", 20), _aggregated("C", 10), _aggregated("D", 10)]
        )
        assert board.users == ["B", "A", "C", "D"]

    def test_tie_at_cutoff_keeps_first_seen(self) -> None:
        board = rank_positions([_aggregated("A", 5), _aggregated("B", 5)], limit=1)
        assert board.users == ["A"]

    def test_negative_earnings_ranked_last(self) -> None:
        board = rank_positions([_aggregated("A", -1), _aggregated("B", 0)])
        assert board.users == ["B", "A"]

    def test_large_earnings_compared_exactly(self) -> None:
        """2**60 и 2**60 + 1 неразличимы во float, но не в int"""
        board = rank_positions([_aggregated("A", 2**60), _aggregated("B", 2**60 + 1)])
        assert board.users == ["B", "A"]

    def test_empty(self) -> None:
        board = rank_positions([])
        assert isinstance(board, Leaderboard)
        assert len(board) == 0
        assert board.positions == ()

    def test_custom_limit(self) -> None:
        positions = [_aggregated(f"u{i}", i) for i in range(5)]
        assert rank_positions(positions, limit=3).users == ["u4", "u3", "u2"]
        assert rank_positions(positions, limit=0).users == []

    def test_negative_limit_raises(self) -> None:
        with pytest.raises(ValueError, match="limit must be non-negative"):
            rank_positions([], limit=-1)

    def test_input_not_mutated(self) -> None:
        positions = [_aggregated("A", 1), _aggregated("B", 2)]
        rank_positions(positions)
        assert [p.user for p in positions] == ["A", "B"]


class TestGetTopTen:
    """Тесты get_top_ten"""

    def test_top_ten(self) -> None:
        positions = [_aggregated(f"u{i}", i) for i in range(20)]
        board = get_top_ten(positions)
        assert board.users == [f"u{i}" for i in range(19, 9, -1)]


class TestLeaderboardModel:
    """Тесты модели Leaderboard"""

    def test_dump_by_alias(self) -> None:
        board = rank_positions([_aggregated("A", 1)])
        assert board.model_dump(mode="json", by_alias=True) == {
            "leaderBoardPositions": [
                {"user": "A", "invested": 100, "earnings": 1, "roi": 1.0}
            ]
        }

    def test_load_by_alias(self) -> None:
        board = Leaderboard.model_validate(
            {"leaderBoardPositions": [{"user": "A", "invested": 1, "earnings": 2, "roi": 3.0}]}
        )
        assert board.users == ["A"]
