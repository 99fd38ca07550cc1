"""Type definitions for serialized session records and commands."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, TypedDict


class ParticipantRecord(TypedDict):
    """A participant entry in the participants list."""
    id: int
    name: str


class TeamRecord(TypedDict):
    id: str
    players: List[int]


class MatchRecord(TypedDict):
    """
    A single match as stored.

    scoreA is None while the match is unplayed; scoreB is never stored.
    """
    id: str
    round: int
    area: int
    teamA: TeamRecord
    teamB: TeamRecord
    scoreA: Optional[int]


class SessionRecord(TypedDict, total=False):
    """
    TypedDict representing the persisted session.

    swapByRound is optional (total=False) so records written before court
    swapping existed still load.
    """
    name: str
    participants: List[ParticipantRecord]
    matches: List[MatchRecord]
    # JSON object keys are strings ("1".."7"); absent rounds are not swapped.
    swapByRound: Dict[str, bool]


class CommandPayload(TypedDict, total=False):
    """
    TypedDict for command payloads sent to apply_command().

    Fields vary by command type.
    """
    # Common
    type: str

    # CREATE_SESSION
    sessionName: Optional[str]
    names: Optional[List[str]]

    # UPDATE_SCORE
    matchId: Optional[str]
    value: Any

    # TOGGLE_COURT_SWAP
    round: Optional[int]

    # SET_SCORING_SCALE
    scoringScale: Optional[int]


CmdDict = CommandPayload
