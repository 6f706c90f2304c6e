"""Pydantic schemas for FPL API payloads and client configuration."""

from typing import Annotated, Callable

from pydantic import BaseModel, Field, OnErrorOmit, ValidationError, WrapValidator, field_validator

from .constants import (
    ESCAPE_TIMEOUT,
    FPL_BASE_URL,
    MINI_LEAGUE_MAX_ENTRIES,
    REQUEST_TIMEOUT,
    USER_AGENT,
)


# Payload fields are lenient: a wrongly typed value falls back to its default
# and a malformed list item is dropped, instead of failing the whole payload.

def _fallback(default: Callable[[], object]) -> WrapValidator:
    def validate(value, handler):
        try:
            return handler(value)
        except ValidationError:
            return default()
    return WrapValidator(validate)


LenientInt = Annotated[int | None, _fallback(lambda: None)]
LenientBool = Annotated[bool | None, _fallback(lambda: None)]
LenientStr = Annotated[str | None, _fallback(lambda: None)]


# =============================================================================
# bootstrap-static
# =============================================================================

class BootstrapEvent(BaseModel):
    """A gameweek as listed in the bootstrap payload."""

    id: LenientInt = None
    is_current: LenientBool = None
    is_next: LenientBool = None

    class Config:
        extra = 'ignore'


class BootstrapTeam(BaseModel):
    """A Premier League club."""

    id: LenientInt = None
    short_name: LenientStr = None

    class Config:
        extra = 'ignore'


class BootstrapElement(BaseModel):
    """A player (element) with the fields needed for display."""

    id: LenientInt = None
    first_name: LenientStr = None
    second_name: LenientStr = None
    web_name: LenientStr = None
    team: LenientInt = None

    class Config:
        extra = 'ignore'


class BootstrapPayload(BaseModel):
    """Static game data: gameweeks, clubs and players."""

    events: Annotated[list[OnErrorOmit[BootstrapEvent]], _fallback(list)] = Field(default_factory=list)
    teams: Annotated[list[OnErrorOmit[BootstrapTeam]], _fallback(list)] = Field(default_factory=list)
    elements: Annotated[list[OnErrorOmit[BootstrapElement]], _fallback(list)] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


# =============================================================================
# entry/{id}
# =============================================================================

class ClassicLeague(BaseModel):
    """A classic league membership on an entry."""

    id: LenientInt = None
    name: LenientStr = None

    class Config:
        extra = 'ignore'


class EntryLeagues(BaseModel):
    classic: Annotated[list[OnErrorOmit[ClassicLeague]], _fallback(list)] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


class EntryPayload(BaseModel):
    """Entry summary; only league memberships are read."""

    leagues: Annotated[EntryLeagues, _fallback(EntryLeagues)] = Field(default_factory=EntryLeagues)

    class Config:
        extra = 'ignore'


# =============================================================================
# leagues-classic/{id}/standings
# =============================================================================

class StandingsResult(BaseModel):
    """One row of a standings page."""

    rank: LenientInt = None
    entry: LenientInt = None
    entry_name: LenientStr = None
    player_name: LenientStr = None

    class Config:
        extra = 'ignore'


class Standings(BaseModel):
    has_next: LenientBool = None
    results: Annotated[list[OnErrorOmit[StandingsResult]], _fallback(list)] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


class StandingsLeague(BaseModel):
    entries: LenientInt = None

    class Config:
        extra = 'ignore'


class StandingsPayload(BaseModel):
    """A page of classic league standings."""

    league: Annotated[StandingsLeague, _fallback(StandingsLeague)] = Field(default_factory=StandingsLeague)
    standings: Annotated[Standings, _fallback(Standings)] = Field(default_factory=Standings)

    class Config:
        extra = 'ignore'


# =============================================================================
# event/{id}/live
# =============================================================================

class LiveStats(BaseModel):
    total_points: LenientInt = None

    class Config:
        extra = 'ignore'


class LiveElement(BaseModel):
    """Live stats for one player in a gameweek."""

    id: LenientInt = None
    stats: Annotated[LiveStats, _fallback(LiveStats)] = Field(default_factory=LiveStats)

    class Config:
        extra = 'ignore'


class LivePayload(BaseModel):
    elements: Annotated[list[OnErrorOmit[LiveElement]], _fallback(list)] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


# =============================================================================
# entry/{id}/event/{id}/picks
# =============================================================================

class Pick(BaseModel):
    """One roster slot as returned by the picks endpoint."""

    element: LenientInt = None
    position: LenientInt = None
    multiplier: LenientInt = None
    is_captain: LenientBool = None
    is_vice_captain: LenientBool = None

    class Config:
        extra = 'ignore'


class PicksPayload(BaseModel):
    picks: Annotated[list[OnErrorOmit[Pick]], _fallback(list)] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


# =============================================================================
# Client configuration
# =============================================================================

class ClientConfig(BaseModel):
    """Client configuration settings."""

    base_url: str = Field(default=FPL_BASE_URL, min_length=1)
    user_agent: str = Field(default=USER_AGENT, min_length=1)
    request_timeout: float = Field(default=REQUEST_TIMEOUT, gt=0)
    mini_league_max_entries: int = Field(default=MINI_LEAGUE_MAX_ENTRIES, ge=1)
    escape_timeout: float = Field(default=ESCAPE_TIMEOUT, gt=0, le=5)

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Ensure the base URL is http(s) and has no trailing slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError(f'base_url must be an http(s) URL, got {v}')
        return v.rstrip('/')

    class Config:
        extra = 'forbid'
