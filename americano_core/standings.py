"""Americano standings engine.

Single source of truth for standings across the match list, the standings
view and the shared summary:
- Each player collects the points their team scored in every played match.
- Team B's score is always derived as scoring_scale - score_a.
- Order: points descending, then name ascending.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .models import Match, Participant


@dataclass(frozen=True)
class StandingsRow:
    participant: Participant
    points: int
    matches_played: int


@dataclass
class _Tally:
    points: int = 0
    matches_played: int = 0


def _standings_sort_key(row: StandingsRow) -> tuple[int, str, str]:
    # Case-insensitive first so "anna" sits next to "Anna"; exact name keeps the order total.
    return (-row.points, row.participant.name.casefold(), row.participant.name)


def _credit(totals: dict[int, _Tally], player_ids: Sequence[int], points: int) -> None:
    for player_id in player_ids:
        tally = totals.get(player_id)
        if tally is None:
            continue
        tally.points += points
        tally.matches_played += 1


def compute_standings(
    participants: Sequence[Participant],
    matches: Sequence[Match],
    scoring_scale: int,
) -> tuple[StandingsRow, ...]:
    """Aggregate played matches into ranked point totals.

    Args:
        participants: All session participants; each one always gets a row
        matches: Session matches; unplayed ones contribute nothing
        scoring_scale: Points split per match (24 or 32)

    Returns:
        Tuple of StandingsRow ordered by points desc, then name asc
    """
    totals: dict[int, _Tally] = {p.id: _Tally() for p in participants}

    for match in matches:
        if match.score_a is None:
            continue
        score_a = match.score_a
        _credit(totals, match.team_a.players, score_a)
        _credit(totals, match.team_b.players, scoring_scale - score_a)

    rows = [
        StandingsRow(
            participant=p,
            points=totals[p.id].points,
            matches_played=totals[p.id].matches_played,
        )
        for p in participants
    ]
    rows.sort(key=_standings_sort_key)
    return tuple(rows)
