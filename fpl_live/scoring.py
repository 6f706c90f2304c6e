"""Live gameweek scoring from picks and live player points."""

from typing import Iterable, List, Mapping

from .models import PickRow, PlayerLiveRow, PlayerRef, StandingRow, TeamLiveSummary


def build_player_rows(
    picks: Iterable[PickRow],
    live_points: Mapping[int, int],
    player_lookup: Mapping[int, PlayerRef],
) -> List[PlayerLiveRow]:
    """
    Score each pick for the gameweek.

    Scoring:
        - raw points: live total_points for the player (0 if not in the live data)
        - contribution: raw points * pick multiplier
          (0 benched, 1 starter, 2 captain, 3 triple captain; taken as given)

    Returns:
        PlayerLiveRow per pick, sorted by squad position
    """
    rows = []
    for pick in picks:
        details = player_lookup.get(pick.element)
        raw_points = live_points.get(pick.element, 0)
        rows.append(PlayerLiveRow(
            element=pick.element,
            name=details.name if details else f'Unknown ({pick.element})',
            team=details.team_short_name if details else '',
            position=pick.position,
            multiplier=pick.multiplier,
            raw_points=raw_points,
            contribution=raw_points * pick.multiplier,
            captain=pick.is_captain,
            vice_captain=pick.is_vice_captain,
        ))
    return sorted(rows, key=lambda row: row.position)


def team_live_points(rows: Iterable[PlayerLiveRow]) -> int:
    """Team total; captaincy is already in each row's multiplier."""
    return sum(row.contribution for row in rows)


def summarize_team(
    standing: StandingRow,
    picks: Iterable[PickRow],
    live_points: Mapping[int, int],
    player_lookup: Mapping[int, PlayerRef],
) -> TeamLiveSummary:
    """Build a team's live summary from its picks."""
    rows = build_player_rows(picks, live_points, player_lookup)
    return TeamLiveSummary(
        standing=standing,
        live_points=team_live_points(rows),
        players=rows,
    )
