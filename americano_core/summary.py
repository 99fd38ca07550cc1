"""Plain-text session summary for sharing or copying."""
from __future__ import annotations

from typing import List

from .display import rounds_in_display_order
from .models import Match, Session, Team
from .standings import compute_standings


NO_SCORE = "No score"


def _team_label(session: Session, team: Team) -> str:
    first, second = team.players
    return f"{session.participant_name(first)} / {session.participant_name(second)}"


def _score_label(match: Match, scoring_scale: int) -> str:
    if match.score_a is None:
        return NO_SCORE
    return f"{match.score_a}-{scoring_scale - match.score_a}"


def build_summary(session: Session, scoring_scale: int) -> str:
    """Render standings and all rounds as a plain-text block.

    Courts are numbered by display position, so a swapped round lists its
    court-2 match as "Court 1".
    """
    lines: List[str] = [session.name, "", "Standings:"]
    standings = compute_standings(session.participants, session.matches, scoring_scale)
    for idx, row in enumerate(standings):
        lines.append(
            f"{idx + 1}. {row.participant.name} - {row.points} pts "
            f"({row.matches_played} matches)"
        )

    lines.append("")
    lines.append("Matches:")
    for round_idx, round_matches in enumerate(rounds_in_display_order(session)):
        lines.append(f"Round {round_idx + 1}")
        for position, match in enumerate(round_matches):
            lines.append(
                f"  Court {position + 1}: {_team_label(session, match.team_a)} vs "
                f"{_team_label(session, match.team_b)} ({_score_label(match, scoring_scale)})"
            )

    return "\n".join(lines)
