"""Service for ranking players and building leaderboard rows."""

from __future__ import annotations

from dataclasses import dataclass

from solo_quiz.core.models import User


@dataclass(slots=True, frozen=True)
class ScoreboardRow:
    """Immutable snapshot returned to consumers."""

    rank: int
    name: str
    score: int
    questions_answered: int


def rank_users(users: list[User], limit: int) -> list[User]:
    """Return the top ``limit`` users by score, highest first.

    Ties keep the order in which the users were first stored; ``sorted`` is
    stable, so repeated calls over an unchanged collection agree.
    """
    if limit <= 0:
        return []
    return sorted(users, key=lambda user: -user.score)[:limit]


def scoreboard_rows(ranked_users: list[User]) -> list[ScoreboardRow]:
    """Number already-ranked users 1..n for display."""
    return [
        ScoreboardRow(
            rank=position,
            name=user.name,
            score=user.score,
            questions_answered=user.questions_answered,
        )
        for position, user in enumerate(ranked_users, start=1)
    ]


def build_scoreboard(users: list[User], limit: int) -> list[ScoreboardRow]:
    """Rank users and number them for display."""
    return scoreboard_rows(rank_users(users, limit))
