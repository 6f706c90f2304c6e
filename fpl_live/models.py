"""Data models for the FPL live leagues client."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class LeagueRef:
    """A classic league membership as listed on a user's entry."""
    id: int
    name: str


@dataclass(frozen=True)
class StandingRow:
    """One entry's position in a league's standings."""
    rank: int
    entry_id: int
    entry_name: str
    manager_name: str


@dataclass(frozen=True)
class LeagueStandingsPage:
    """A single page of league standings."""
    results: List[StandingRow] = field(default_factory=list)
    has_next: bool = False
    total_entries: Optional[int] = None


@dataclass(frozen=True)
class LeagueSummary:
    """A mini league with its (single page of) standings attached."""
    id: int
    name: str
    entry_count: int
    standings: List[StandingRow] = field(default_factory=list)


@dataclass(frozen=True)
class PickRow:
    """One roster slot for one team in one gameweek."""
    element: int
    position: int  # 1-11 starting XI, 12-15 bench
    multiplier: int
    is_captain: bool = False
    is_vice_captain: bool = False


@dataclass(frozen=True)
class PlayerRef:
    """Static player metadata from the bootstrap payload."""
    name: str
    team_short_name: str


@dataclass(frozen=True)
class PlayerLiveRow:
    """A computed roster line: live points scaled by the pick multiplier."""
    element: int
    name: str
    team: str
    position: int
    multiplier: int
    raw_points: int
    contribution: int
    captain: bool = False
    vice_captain: bool = False


@dataclass(frozen=True)
class TeamLiveSummary:
    """A team's live gameweek score with its per-player breakdown."""
    standing: StandingRow
    live_points: int
    players: List[PlayerLiveRow] = field(default_factory=list)
