"""Text rendering for menus and the team detail view."""

from typing import List

from .models import LeagueSummary, PlayerLiveRow, TeamLiveSummary

POST_DETAILS_HINT = 'Press Enter to go back to teams, Left Arrow for leagues, or q to quit.'


def league_label(league: LeagueSummary) -> str:
    return f'{league.name} ({league.entry_count} teams)'


def team_label(team: TeamLiveSummary) -> str:
    standing = team.standing
    return f'#{standing.rank} {standing.manager_name} | {standing.entry_name} | live {team.live_points}'


def player_line(player: PlayerLiveRow) -> str:
    """e.g. ' 3. Mohamed Salah LIV (C) | raw 8 x2 = 16'"""
    if player.captain:
        captain_tag = ' (C)'
    elif player.vice_captain:
        captain_tag = ' (VC)'
    else:
        captain_tag = ''
    team_tag = f' {player.team}' if player.team.strip() else ''
    return (
        f'{player.position:>2}. {player.name}{team_tag}{captain_tag} | '
        f'raw {player.raw_points} x{player.multiplier} = {player.contribution}'
    )


def team_details(team: TeamLiveSummary) -> List[str]:
    """Lines of a team's live breakdown."""
    lines = [
        '',
        f'{team.standing.manager_name} - {team.standing.entry_name}',
        f'Live points: {team.live_points}',
        'Players:',
    ]
    lines.extend(player_line(player) for player in team.players)
    return lines
