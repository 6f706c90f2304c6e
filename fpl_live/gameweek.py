"""Gameweek resolution and player metadata from the bootstrap payload."""

from typing import Dict, Optional

from .models import PlayerRef
from .schemas import BootstrapPayload


class GameweekUnresolvedError(RuntimeError):
    """No current gameweek could be determined from bootstrap data."""


def current_gameweek_id(bootstrap: BootstrapPayload) -> Optional[int]:
    """
    Resolve the gameweek whose live points should be shown.

    Priority:
        1. The event flagged is_current
        2. The event flagged is_next (flags can both be missing between gameweeks)
        3. The highest event id, if positive

    Returns:
        Event id, or None if no gameweek can be resolved
    """
    events = bootstrap.events

    for event in events:
        if event.is_current and event.id is not None:
            return event.id

    for event in events:
        if event.is_next and event.id is not None:
            return event.id

    highest = max((event.id or 0 for event in events), default=0)
    return highest if highest > 0 else None


def require_gameweek_id(bootstrap: BootstrapPayload) -> int:
    """Like current_gameweek_id, but raises GameweekUnresolvedError instead of returning None."""
    event_id = current_gameweek_id(bootstrap)
    if event_id is None:
        raise GameweekUnresolvedError('Could not determine current gameweek from FPL bootstrap data.')
    return event_id


def build_player_lookup(bootstrap: BootstrapPayload) -> Dict[int, PlayerRef]:
    """
    Build player id -> PlayerRef from bootstrap elements and teams.

    Name falls back from "first second" to web_name to "Player <id>".
    The club short name is empty when the element's team can't be joined.
    """
    team_names = {
        team.id: team.short_name
        for team in bootstrap.teams
        if team.id is not None and team.short_name is not None
    }

    lookup = {}
    for element in bootstrap.elements:
        if element.id is None:
            continue
        full_name = f'{element.first_name or ""} {element.second_name or ""}'.strip()
        name = full_name or (element.web_name or '').strip() or f'Player {element.id}'
        team_short_name = team_names.get(element.team, '') if element.team is not None else ''
        lookup[element.id] = PlayerRef(name=name, team_short_name=team_short_name)

    return lookup
