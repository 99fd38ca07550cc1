"""Fixed Americano schedule for 8 players on 2 courts over 7 rounds.

Every one of the 28 possible partnerships occurs exactly once:
- Each round splits the 8 player ids into 4 disjoint teammate pairs.
- Pairs 1+2 meet on court 1, pairs 3+4 on court 2.
"""
from __future__ import annotations

from typing import Iterator, Sequence

from .models import Match, Team


PAIRINGS_BY_ROUND: tuple[tuple[tuple[int, int], ...], ...] = (
    ((0, 7), (1, 6), (2, 5), (3, 4)),
    ((0, 6), (7, 5), (1, 4), (2, 3)),
    ((0, 5), (6, 4), (7, 3), (1, 2)),
    ((0, 4), (5, 3), (6, 2), (7, 1)),
    ((0, 3), (4, 2), (5, 1), (6, 7)),
    ((0, 2), (3, 1), (4, 7), (5, 6)),
    ((0, 1), (2, 7), (3, 6), (4, 5)),
)


def generate_matches() -> tuple[Match, ...]:
    """Build the 14 unplayed matches of a session, ordered by round then court."""
    matches: list[Match] = []
    for round_idx, round_pairings in enumerate(PAIRINGS_BY_ROUND):
        round_number = round_idx + 1
        teams = [
            Team(id=f"r{round_number}t{team_idx + 1}", players=pair)
            for team_idx, pair in enumerate(round_pairings)
        ]
        for area in (1, 2):
            matches.append(
                Match(
                    id=f"r{round_number}c{area}",
                    round=round_number,
                    area=area,
                    team_a=teams[2 * (area - 1)],
                    team_b=teams[2 * (area - 1) + 1],
                    score_a=None,
                )
            )
    return tuple(matches)


def iter_teammate_pairs(matches: Sequence[Match]) -> Iterator[frozenset[int]]:
    for match in matches:
        yield frozenset(match.team_a.players)
        yield frozenset(match.team_b.players)
