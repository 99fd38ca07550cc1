"""Immutable session records.

Every command produces a complete replacement record; nothing here is ever
mutated in place. `to_record()` / `from_record()` convert to and from the
camelCase wire shape stored by the persistence layer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from dataclasses import replace
from typing import Iterable

from .types import MatchRecord, ParticipantRecord, SessionRecord, TeamRecord


@dataclass(frozen=True)
class Participant:
    id: int
    name: str


@dataclass(frozen=True)
class Team:
    id: str
    players: tuple[int, int]

    def has(self, participant_id: int) -> bool:
        return participant_id in self.players


@dataclass(frozen=True)
class Match:
    id: str
    round: int
    area: int
    team_a: Team
    team_b: Team
    # None while unplayed.
    score_a: int | None = None

    @property
    def played(self) -> bool:
        return self.score_a is not None

    def with_score(self, score_a: int | None) -> "Match":
        return replace(self, score_a=score_a)


@dataclass(frozen=True)
class SwapByRound:
    """Per-round court swap flags. Rounds without an entry are not swapped."""

    entries: tuple[tuple[int, bool], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: dict[int, bool] | None) -> "SwapByRound":
        if not mapping:
            return cls()
        return cls(tuple(sorted((int(k), bool(v)) for k, v in mapping.items())))

    def is_swapped(self, round_number: int) -> bool:
        for key, value in self.entries:
            if key == round_number:
                return value
        return False

    def toggled(self, round_number: int) -> "SwapByRound":
        mapping = dict(self.entries)
        mapping[round_number] = not self.is_swapped(round_number)
        return SwapByRound.from_mapping(mapping)

    def as_dict(self) -> dict[int, bool]:
        return dict(self.entries)


@dataclass(frozen=True)
class Session:
    name: str
    participants: tuple[Participant, ...]
    matches: tuple[Match, ...]
    swap_by_round: SwapByRound = field(default_factory=SwapByRound)

    def participant_name(self, participant_id: int) -> str:
        for participant in self.participants:
            if participant.id == participant_id:
                return participant.name
        return ""

    def find_match(self, match_id: str) -> Match | None:
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def with_matches(self, matches: Iterable[Match]) -> "Session":
        return replace(self, matches=tuple(matches))

    def to_record(self) -> SessionRecord:
        return {
            "name": self.name,
            "participants": [_participant_record(p) for p in self.participants],
            "matches": [_match_record(m) for m in self.matches],
            "swapByRound": {
                str(round_number): flag
                for round_number, flag in self.swap_by_round.entries
            },
        }

    @classmethod
    def from_record(cls, record: SessionRecord) -> "Session":
        """Build a Session from an already validated record."""
        return cls(
            name=record["name"],
            participants=tuple(
                Participant(id=int(p["id"]), name=p["name"])
                for p in record["participants"]
            ),
            matches=tuple(_match_from_record(m) for m in record["matches"]),
            swap_by_round=SwapByRound.from_mapping(
                {int(k): v for k, v in (record.get("swapByRound") or {}).items()}
            ),
        )


def _participant_record(participant: Participant) -> ParticipantRecord:
    return {"id": participant.id, "name": participant.name}


def _team_record(team: Team) -> TeamRecord:
    return {"id": team.id, "players": list(team.players)}


def _match_record(match: Match) -> MatchRecord:
    return {
        "id": match.id,
        "round": match.round,
        "area": match.area,
        "teamA": _team_record(match.team_a),
        "teamB": _team_record(match.team_b),
        "scoreA": match.score_a,
    }


def _team_from_record(record: TeamRecord) -> Team:
    first, second = record["players"]
    return Team(id=record["id"], players=(int(first), int(second)))


def _match_from_record(record: MatchRecord) -> Match:
    score = record.get("scoreA")
    return Match(
        id=record["id"],
        round=int(record["round"]),
        area=int(record["area"]),
        team_a=_team_from_record(record["teamA"]),
        team_b=_team_from_record(record["teamB"]),
        score_a=None if score is None else int(score),
    )
