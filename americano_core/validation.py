"""
Input validation schemas using Pydantic v2
Validates command payloads and stored session records
"""

import logging
import re
from typing import Any, Dict, List, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import TournamentConfig

logger = logging.getLogger(__name__)

# ==================== COMMANDS ====================


class ValidatedCmd(BaseModel):
    """Shape check for raw command payloads coming from the UI layer"""

    type: str = Field(..., min_length=1, max_length=50, description="Command type")

    # CREATE_SESSION
    sessionName: Optional[str] = Field(
        None, max_length=TournamentConfig.MAX_NAME_LENGTH, description="Session name"
    )
    names: Optional[List[str]] = Field(
        None,
        max_length=TournamentConfig.PARTICIPANT_COUNT,
        description="Raw participant names in seat order",
    )

    # UPDATE_SCORE
    matchId: Optional[str] = Field(
        None, min_length=1, max_length=16, description="Match id (e.g. 'r1c1')"
    )
    # Left untyped: a non-numeric value is a silent no-op in the core, not a rejection
    value: Any = None

    # TOGGLE_COURT_SWAP (out-of-range rounds are a no-op in the core)
    round: Optional[int] = Field(None, description="Round number")

    # SET_SCORING_SCALE
    scoringScale: Optional[int] = Field(None, description="Points per match (24 or 32)")

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate command type is one of allowed types"""
        allowed_types = {
            "CREATE_SESSION",
            "UPDATE_SCORE",
            "TOGGLE_COURT_SWAP",
            "SET_SCORING_SCALE",
            "RESET",
        }
        if v not in allowed_types:
            raise ValueError(f"type must be one of {allowed_types}, got {v}")
        return v

    @field_validator("sessionName")
    @classmethod
    def validate_session_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return InputSanitizer.sanitize_string(v, TournamentConfig.MAX_NAME_LENGTH)

    @model_validator(mode="after")
    def validate_command_fields(self) -> Self:
        """Validate required fields based on command type"""
        cmd_type = self.type

        if cmd_type == "CREATE_SESSION":
            if self.names is None:
                raise ValueError("CREATE_SESSION requires names")

        elif cmd_type == "UPDATE_SCORE":
            if self.matchId is None:
                raise ValueError("UPDATE_SCORE requires matchId")

        elif cmd_type == "TOGGLE_COURT_SWAP":
            if self.round is None:
                raise ValueError("TOGGLE_COURT_SWAP requires round")

        elif cmd_type == "SET_SCORING_SCALE":
            if self.scoringScale is None:
                raise ValueError("SET_SCORING_SCALE requires scoringScale")

        return self

    model_config = ConfigDict(extra="ignore")


# ==================== STORED RECORDS ====================


class StoredParticipant(BaseModel):
    id: int = Field(..., ge=0, le=TournamentConfig.PARTICIPANT_COUNT - 1)
    name: str = Field(..., min_length=1, max_length=TournamentConfig.MAX_NAME_LENGTH)


class StoredTeam(BaseModel):
    id: str = Field(..., min_length=1)
    players: List[int] = Field(..., min_length=2, max_length=2)


class StoredMatch(BaseModel):
    id: str = Field(..., min_length=1)
    round: int = Field(..., ge=1, le=TournamentConfig.ROUND_COUNT)
    area: int = Field(..., ge=1, le=TournamentConfig.AREA_COUNT)
    teamA: StoredTeam
    teamB: StoredTeam
    scoreA: Optional[int] = Field(
        None, ge=0, le=max(TournamentConfig.ALLOWED_SCORING_SCALES)
    )


class StoredSession(BaseModel):
    """Schema for the record kept under the "session" key"""

    name: str
    participants: List[StoredParticipant] = Field(
        ...,
        min_length=TournamentConfig.PARTICIPANT_COUNT,
        max_length=TournamentConfig.PARTICIPANT_COUNT,
    )
    matches: List[StoredMatch] = Field(
        ...,
        min_length=TournamentConfig.MATCH_COUNT,
        max_length=TournamentConfig.MATCH_COUNT,
    )
    # JSON keys arrive as strings; pydantic coerces them to round numbers
    swapByRound: Dict[int, bool] = Field(default_factory=dict)

    @field_validator("swapByRound", mode="before")
    @classmethod
    def default_swap_by_round(cls, v: Any) -> Any:
        # Records written before court swapping existed carry no mapping
        if v is None:
            return {}
        return v

    @model_validator(mode="after")
    def validate_participants(self) -> Self:
        """Participant ids must be exactly 0..7 and names unique ignoring case"""
        ids = {p.id for p in self.participants}
        if ids != set(range(TournamentConfig.PARTICIPANT_COUNT)):
            raise ValueError("participant ids must be 0..7 without repeats")
        names = {p.name.strip().casefold() for p in self.participants}
        if len(names) != len(self.participants):
            raise ValueError("participant names must be unique")
        return self


# ==================== SANITIZING ====================


class InputSanitizer:
    """Utility class for input sanitization"""

    @staticmethod
    def sanitize_string(value: str, max_length: int = 255) -> str:
        """Sanitize string input"""
        if not isinstance(value, str):
            return str(value)[:max_length]

        # Strip whitespace
        value = value.strip()

        # Limit length
        value = value[:max_length]

        # Remove null bytes
        value = value.replace("\0", "")

        return value

    @staticmethod
    def sanitize_participant_name(name: Any) -> str:
        """Trim a raw participant name; non-strings count as blank"""
        if not isinstance(name, str):
            return ""
        name = InputSanitizer.sanitize_string(name, TournamentConfig.MAX_NAME_LENGTH)

        # Control characters never belong in a displayed name
        name = re.sub(r"[\x00-\x1f\x7f]", "", name)

        return name.strip()

    @staticmethod
    def validate_and_sanitize_cmd(cmd_dict: dict) -> ValidatedCmd:
        """
        Validate and sanitize command dictionary

        Returns:
            ValidatedCmd: Validated command object

        Raises:
            ValueError: If validation fails
        """
        try:
            return ValidatedCmd(**cmd_dict)
        except Exception as e:
            logger.warning(f"Command validation failed: {e}")
            raise ValueError(f"Invalid command: {str(e)}")


# ==================== EXPORT ====================

__all__ = [
    "ValidatedCmd",
    "StoredParticipant",
    "StoredTeam",
    "StoredMatch",
    "StoredSession",
    "InputSanitizer",
]
