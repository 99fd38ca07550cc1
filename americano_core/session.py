"""Core session state transitions (pure, no storage/UI).

This module implements the business rules of an 8-player Americano session.
All functions are deterministic and side-effect free (no I/O, no storage).

Architecture:
- A Session is an immutable record (see models.py); None means no active session
- Commands are plain dicts with a 'type' field (CREATE_SESSION, UPDATE_SCORE, ...)
- apply_command() takes (session, cmd, scoring_scale) and returns CommandOutcome
  with a complete replacement session and the (possibly changed) scoring scale
- Callers (SessionService) persist the outcome when `changed` is set

Key concepts:
- scoring_scale: points split per match (24 or 32); team B's score is always
  scoring_scale - score_a and is never stored
- swap_by_round: display-only court order per round; match areas never change

Validation:
- CREATE_SESSION rejects blank or duplicate (case-insensitive) names with a
  ValidationError in the outcome; the previous session is kept
- Every other malformed input (unknown match, non-numeric score, bad round,
  unsupported scale) is a silent no-op

State transitions:
- CREATE_SESSION: Builds participants and the fixed 14-match schedule
- UPDATE_SCORE: Clamps into [0, scoring_scale] and stores score_a for one match
- TOGGLE_COURT_SWAP: Flips display order of a round's two courts
- SET_SCORING_SCALE: Changes the scale and re-clamps recorded scores downward
- RESET: Drops the session; the scoring scale survives
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Sequence

from .config import TournamentConfig
from .models import Match, Participant, Session, SwapByRound
from .schedule import generate_matches
from .validation import InputSanitizer

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """Represents a user-facing validation failure (pure core)."""

    kind: str
    message: str | None = None


@dataclass
class CommandOutcome:
    """Result of applying a core command."""

    session: Session | None
    scoring_scale: int
    changed: bool
    error: ValidationError | None = None
    # Transient, display-only text; never persisted.
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def default_session_name(today: date | None = None) -> str:
    """Session name used when none is given, e.g. "Americano 16.10.2026"."""
    today = today or date.today()
    return f"{TournamentConfig.DEFAULT_SESSION_PREFIX} {today:%d.%m.%Y}"


def parse_scoring_scale(value: Any) -> int | None:
    """Parse a scoring scale from an int or its string form.

    Returns:
        24 or 32, or None for anything else (including bools and "32.0")
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        candidate = value
    elif isinstance(value, str):
        stripped = value.strip()
        if not stripped.isdigit():
            return None
        candidate = int(stripped)
    else:
        return None
    if candidate in TournamentConfig.ALLOWED_SCORING_SCALES:
        return candidate
    return None


def clamp_score(value: float, scoring_scale: int) -> int:
    """Clamp a raw score into [0, scoring_scale], dropping any fraction."""
    return int(max(0, min(scoring_scale, value)))


def _coerce_score(value: Any) -> int | float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        # Kept as int; huge ints do not fit a float.
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            return int(stripped, 10)
        except ValueError:
            pass
        try:
            parsed = float(stripped)
            if not math.isfinite(parsed):
                return None
            return parsed
        except ValueError:
            return None
    return None


def _coerce_round(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if 1 <= value <= TournamentConfig.ROUND_COUNT:
        return value
    return None


def _normalize_names(names: Any) -> List[str] | None:
    """Trim raw names; None when the list is not exactly 8 non-blank names."""
    if not isinstance(names, (list, tuple)):
        return None
    if len(names) != TournamentConfig.PARTICIPANT_COUNT:
        return None
    trimmed = [InputSanitizer.sanitize_participant_name(name) for name in names]
    if any(not name for name in trimmed):
        return None
    return trimmed


def _reclamp(matches: Sequence[Match], scoring_scale: int) -> tuple[Match, ...]:
    return tuple(
        m if m.score_a is None or m.score_a <= scoring_scale
        else m.with_score(clamp_score(m.score_a, scoring_scale))
        for m in matches
    )


def reclamp_session(session: Session, scoring_scale: int) -> Session:
    """Cap every recorded score at scoring_scale; lower scores are untouched."""
    return session.with_matches(_reclamp(session.matches, scoring_scale))


def _create_session(
    cmd: Dict[str, Any], today: date | None
) -> tuple[Session | None, ValidationError | None]:
    names = _normalize_names(cmd.get("names"))
    if names is None:
        return None, ValidationError(kind="incomplete_names", message="incomplete names")
    if len({name.casefold() for name in names}) != len(names):
        return None, ValidationError(kind="duplicate_names", message="duplicate names")

    raw_name = cmd.get("sessionName")
    session_name = InputSanitizer.sanitize_string(raw_name) if isinstance(raw_name, str) else ""
    return (
        Session(
            name=session_name or default_session_name(today),
            participants=tuple(
                Participant(id=idx, name=name) for idx, name in enumerate(names)
            ),
            matches=generate_matches(),
            swap_by_round=SwapByRound(),
        ),
        None,
    )


def _apply_transition(
    session: Session | None,
    cmd: Dict[str, Any],
    scoring_scale: int,
    today: date | None,
) -> CommandOutcome:
    """Apply pure state transition without side effects.

    Args:
        session: Current session or None (never mutated; records are frozen)
        cmd: Command dict with 'type' field and command-specific params
        scoring_scale: Current scoring scale
        today: Date used for the default session name

    Returns:
        CommandOutcome with the next session, next scoring scale and change flag
    """
    ctype = cmd.get("type")
    unchanged = CommandOutcome(session=session, scoring_scale=scoring_scale, changed=False)

    if ctype == "CREATE_SESSION":
        created, error = _create_session(cmd, today)
        if error is not None:
            return CommandOutcome(
                session=session,
                scoring_scale=scoring_scale,
                changed=False,
                error=error,
                message=error.message,
            )
        return CommandOutcome(session=created, scoring_scale=scoring_scale, changed=True)

    elif ctype == "UPDATE_SCORE":
        if session is None:
            return unchanged
        match_id = cmd.get("matchId")
        if session.find_match(match_id) is None:
            return unchanged
        raw_value = _coerce_score(cmd.get("value"))
        if raw_value is None:
            return unchanged
        score_a = clamp_score(raw_value, scoring_scale)
        next_session = session.with_matches(
            m.with_score(score_a) if m.id == match_id else m for m in session.matches
        )
        return CommandOutcome(session=next_session, scoring_scale=scoring_scale, changed=True)

    elif ctype == "TOGGLE_COURT_SWAP":
        round_number = _coerce_round(cmd.get("round"))
        if session is None or round_number is None:
            return unchanged
        next_session = replace(
            session, swap_by_round=session.swap_by_round.toggled(round_number)
        )
        return CommandOutcome(session=next_session, scoring_scale=scoring_scale, changed=True)

    elif ctype == "SET_SCORING_SCALE":
        new_scale = parse_scoring_scale(cmd.get("scoringScale"))
        if new_scale is None:
            return unchanged
        next_session = (
            reclamp_session(session, new_scale)
            if session is not None
            else None
        )
        return CommandOutcome(session=next_session, scoring_scale=new_scale, changed=True)

    elif ctype == "RESET":
        return CommandOutcome(
            session=None,
            scoring_scale=scoring_scale,
            changed=True,
            message="Session reset.",
        )

    return unchanged


def apply_command(
    session: Session | None,
    cmd: Dict[str, Any],
    scoring_scale: int,
    *,
    today: date | None = None,
) -> CommandOutcome:
    """Apply a session command.

    Args:
        session: Current session or None when no session is active
        cmd: Command dict with 'type' field and command-specific params
        scoring_scale: Current scoring scale (24 or 32)
        today: Optional date for the default session name (defaults to today)

    Returns:
        CommandOutcome; failures are reported in `error`, never raised
    """
    outcome = _apply_transition(session, cmd, scoring_scale, today)
    if outcome.error is not None:
        logger.debug(f"{cmd.get('type')} rejected: {outcome.error.kind}")
    elif outcome.changed:
        logger.debug(f"{cmd.get('type')} applied")
    return outcome
