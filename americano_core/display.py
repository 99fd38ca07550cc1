"""Read-side presentation order for matches within a round."""
from __future__ import annotations

from typing import Sequence

from .config import TournamentConfig
from .models import Match, Session, SwapByRound


def order_round(
    matches: Sequence[Match], round_number: int, swap_by_round: SwapByRound
) -> tuple[Match, ...]:
    """Return the round's matches in display order.

    Court 1 comes first unless the round is swapped. Match fields, including
    area, are never touched; only the order changes.
    """
    round_matches = sorted(
        (m for m in matches if m.round == round_number), key=lambda m: m.area
    )
    if swap_by_round.is_swapped(round_number):
        round_matches.reverse()
    return tuple(round_matches)


def rounds_in_display_order(session: Session) -> list[tuple[Match, ...]]:
    return [
        order_round(session.matches, round_number, session.swap_by_round)
        for round_number in range(1, TournamentConfig.ROUND_COUNT + 1)
    ]


def score_b(match: Match, scoring_scale: int) -> int:
    # Unplayed matches read as 0 : full scale in the score entry.
    if match.score_a is None:
        return scoring_scale
    return scoring_scale - match.score_a
