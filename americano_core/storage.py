"""Session persistence over a plain string key/value store.

Stored values are never trusted: a record that does not parse or does not
match the session schema is treated as absent state, and an unsupported
scoring scale falls back to the default. None of this is reported to the
user; it is only logged.
"""
from __future__ import annotations

import json
import logging
from typing import Dict, Protocol

from pydantic import ValidationError as SchemaError

from .config import TournamentConfig
from .models import Session
from .session import parse_scoring_scale
from .validation import StoredSession

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class InMemoryStore:
    """Dict-backed KeyValueStore, used by tests and as a default."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


def serialize_session(session: Session) -> str:
    return json.dumps(session.to_record(), ensure_ascii=False, separators=(",", ":"))


def load_session(store: KeyValueStore) -> Session | None:
    """Read the stored session, or None when missing or corrupted.

    Unparsable JSON is removed from the store; parsable but schema-invalid
    records are left in place and ignored.
    """
    raw = store.get(TournamentConfig.SESSION_KEY)
    if not raw:
        return None
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Discarding unparsable stored session: {e}")
        store.remove(TournamentConfig.SESSION_KEY)
        return None
    try:
        stored = StoredSession.model_validate(payload)
    except SchemaError as e:
        logger.warning(f"Ignoring stored session with invalid shape: {e.error_count()} errors")
        return None
    return Session.from_record(stored.model_dump())


def save_session(store: KeyValueStore, session: Session | None) -> None:
    """Overwrite the stored session in full; None removes it."""
    if session is None:
        store.remove(TournamentConfig.SESSION_KEY)
        return
    store.set(TournamentConfig.SESSION_KEY, serialize_session(session))


def load_scoring_scale(store: KeyValueStore) -> int:
    raw = store.get(TournamentConfig.SCORING_SCALE_KEY)
    if raw is None:
        return TournamentConfig.DEFAULT_SCORING_SCALE
    scale = parse_scoring_scale(raw)
    if scale is None:
        logger.warning(f"Ignoring stored scoring scale {raw!r}")
        return TournamentConfig.DEFAULT_SCORING_SCALE
    return scale


def save_scoring_scale(store: KeyValueStore, scoring_scale: int) -> None:
    store.set(TournamentConfig.SCORING_SCALE_KEY, str(scoring_scale))
