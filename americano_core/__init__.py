from .config import TournamentConfig
from .display import order_round, rounds_in_display_order, score_b
from .models import Match, Participant, Session, SwapByRound, Team
from .schedule import PAIRINGS_BY_ROUND, generate_matches, iter_teammate_pairs
from .session import (
    CommandOutcome,
    ValidationError,
    apply_command,
    clamp_score,
    default_session_name,
    parse_scoring_scale,
    reclamp_session,
)
from .share import ShareOutcome, share_summary
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
from .service import SessionService
from .types import CommandPayload, SessionRecord
from .validation import InputSanitizer, StoredSession, ValidatedCmd

__all__ = [
    "TournamentConfig",
    "CommandOutcome",
    "CommandPayload",
    "SessionRecord",
    "ValidationError",
    "apply_command",
    "clamp_score",
    "default_session_name",
    "parse_scoring_scale",
    "reclamp_session",
    "Match",
    "Participant",
    "Session",
    "SwapByRound",
    "Team",
    "PAIRINGS_BY_ROUND",
    "generate_matches",
    "iter_teammate_pairs",
    "StandingsRow",
    "compute_standings",
    "order_round",
    "rounds_in_display_order",
    "score_b",
    "build_summary",
    "ShareOutcome",
    "share_summary",
    "InMemoryStore",
    "KeyValueStore",
    "load_scoring_scale",
    "load_session",
    "save_scoring_scale",
    "save_session",
    "SessionService",
    "ValidatedCmd",
    "StoredSession",
    "InputSanitizer",
]
