"""Command facade tying the pure core to storage and sharing.

SessionService owns the current session and scoring scale. Each command runs
to completion, including the storage write, before returning. Storage and
share failures are logged and never change the in-memory state.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Sequence

from .display import rounds_in_display_order
from .models import Match, Session
from .session import CommandOutcome, ValidationError, apply_command, reclamp_session
from .share import Clipboard, ShareOutcome, ShareTarget, share_summary
from .standings import StandingsRow, compute_standings
from .storage import (
    InMemoryStore,
    KeyValueStore,
    load_scoring_scale,
    load_session,
    save_scoring_scale,
    save_session,
)
from .summary import build_summary
from .validation import InputSanitizer

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(self, store: KeyValueStore | None = None) -> None:
        self._store: KeyValueStore = store if store is not None else InMemoryStore()
        self._scoring_scale = load_scoring_scale(self._store)
        session = load_session(self._store)
        # Scores saved under a larger scale are capped to the loaded one
        self._session = (
            reclamp_session(session, self._scoring_scale) if session is not None else None
        )

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def scoring_scale(self) -> int:
        return self._scoring_scale

    def dispatch(self, cmd: Dict[str, Any], *, today: date | None = None) -> CommandOutcome:
        """Validate a raw command payload, apply it and persist the result."""
        try:
            validated = InputSanitizer.validate_and_sanitize_cmd(cmd)
        except ValueError as e:
            error = ValidationError(kind="invalid_command", message=str(e))
            return CommandOutcome(
                session=self._session,
                scoring_scale=self._scoring_scale,
                changed=False,
                error=error,
                message=error.message,
            )
        payload = validated.model_dump(exclude_none=True)
        return self._run(payload, today=today)

    def _run(self, cmd: Dict[str, Any], *, today: date | None = None) -> CommandOutcome:
        outcome = apply_command(self._session, cmd, self._scoring_scale, today=today)
        if not outcome.changed:
            return outcome

        self._session = outcome.session
        self._scoring_scale = outcome.scoring_scale
        try:
            if cmd.get("type") == "SET_SCORING_SCALE":
                save_scoring_scale(self._store, outcome.scoring_scale)
            save_session(self._store, outcome.session)
        except Exception as e:
            logger.warning(f"Persisting {cmd.get('type')} failed: {e}")
        return outcome

    def create_session(
        self, session_name: str, names: Sequence[str], *, today: date | None = None
    ) -> CommandOutcome:
        return self._run(
            {"type": "CREATE_SESSION", "sessionName": session_name, "names": list(names)},
            today=today,
        )

    def update_score(self, match_id: str, value: Any) -> CommandOutcome:
        return self._run({"type": "UPDATE_SCORE", "matchId": match_id, "value": value})

    def toggle_court_swap(self, round_number: int) -> CommandOutcome:
        return self._run({"type": "TOGGLE_COURT_SWAP", "round": round_number})

    def set_scoring_scale(self, scoring_scale: int) -> CommandOutcome:
        return self._run({"type": "SET_SCORING_SCALE", "scoringScale": scoring_scale})

    def reset(self) -> CommandOutcome:
        return self._run({"type": "RESET"})

    def standings(self) -> tuple[StandingsRow, ...]:
        if self._session is None:
            return ()
        return compute_standings(
            self._session.participants, self._session.matches, self._scoring_scale
        )

    def rounds(self) -> List[tuple[Match, ...]]:
        if self._session is None:
            return []
        return rounds_in_display_order(self._session)

    def request_summary(self) -> str | None:
        if self._session is None:
            return None
        return build_summary(self._session, self._scoring_scale)

    def share_summary(
        self,
        *,
        share_target: ShareTarget | None = None,
        clipboard: Clipboard | None = None,
    ) -> ShareOutcome | None:
        """Hand the summary to a share target; None when no session is active."""
        if self._session is None:
            return None
        return share_summary(
            self._session.name,
            build_summary(self._session, self._scoring_scale),
            share_target=share_target,
            clipboard=clipboard,
        )
