"""Fixed tournament format and storage configuration."""


class TournamentConfig:
    """Constants for the 8-player, 2-court, 7-round Americano format"""

    PARTICIPANT_COUNT = 8
    ROUND_COUNT = 7
    AREA_COUNT = 2
    MATCH_COUNT = ROUND_COUNT * AREA_COUNT

    # Points split between the two teams of one match
    ALLOWED_SCORING_SCALES = (24, 32)
    DEFAULT_SCORING_SCALE = 32

    # Key/value store keys
    SESSION_KEY = "session"
    SCORING_SCALE_KEY = "scoring-scale"

    DEFAULT_SESSION_PREFIX = "Americano"
    MAX_NAME_LENGTH = 255


__all__ = ["TournamentConfig"]
