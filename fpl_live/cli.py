"""
FPL Live Leagues

Lists the mini leagues (one standings page, fewer than 50 teams) a team
belongs to and shows every rival's live points for the current gameweek.

Usage:
    fpl-live-leagues 123456
    fpl-live-leagues 123456 --log-level DEBUG --log-dir logs
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .config import get_config
from .data_fetcher import FPLDataFetcher, FPLFetchError
from .display import POST_DETAILS_HINT, league_label, team_details, team_label
from .gameweek import GameweekUnresolvedError
from .logging_config import get_logger, setup_logging
from .models import LeagueSummary, TeamLiveSummary
from .navigation import (
    Back,
    PostDetailsAction,
    Selected,
    read_post_details_action,
    select_with_navigation,
)
from .scorer import LiveLeagueScorer

logger = get_logger('fpl_live.cli')


def _echo(stdout: TextIO, text: str = '') -> None:
    stdout.write(text + '\n')
    stdout.flush()


def browse_teams(
    league: LeagueSummary,
    teams: List[TeamLiveSummary],
    escape_timeout: float,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> bool:
    """
    Team menu for one league, with detail views.

    Returns:
        True to go back to the league menu, False to quit
    """
    stdout = stdout or sys.stdout
    while True:
        choice = select_with_navigation(
            f'Select a team in {league.name}',
            teams,
            allow_back=True,
            allow_quit=True,
            label=team_label,
            stdin=stdin,
            stdout=stdout,
            escape_timeout=escape_timeout,
        )
        if choice is Back:
            return True
        if not isinstance(choice, Selected):
            return False

        for line in team_details(choice.value):
            _echo(stdout, line)
        _echo(stdout)
        _echo(stdout, POST_DETAILS_HINT)

        action = read_post_details_action(stdin, escape_timeout)
        if action is PostDetailsAction.BACK_TO_LEAGUES:
            return True
        if action is PostDetailsAction.QUIT:
            return False


def run_session(
    scorer: LiveLeagueScorer,
    mini_leagues: List[LeagueSummary],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """League menu -> team menu -> team details, until the user quits."""
    stdout = stdout or sys.stdout
    escape_timeout = scorer.fetcher.config.escape_timeout

    while True:
        choice = select_with_navigation(
            'Select a mini league',
            mini_leagues,
            allow_quit=True,
            label=league_label,
            stdin=stdin,
            stdout=stdout,
            escape_timeout=escape_timeout,
        )
        if not isinstance(choice, Selected):
            return

        league = choice.value
        _echo(stdout)
        _echo(stdout, f'Loading live points for {league.name} (GW{scorer.gameweek})...')
        teams = scorer.score_league(league)

        if not browse_teams(league, teams, escape_timeout, stdin, stdout):
            return


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fpl-live-leagues',
        description='Show your mini leagues (<50 teams) and live points for the current gameweek.',
    )
    parser.add_argument(
        'team_id',
        type=int,
        help='Your FPL entry/team id',
    )
    parser.add_argument(
        '--config', '-c',
        help='Path to a JSON client config file (default: $FPL_LIVE_CONFIG)',
    )
    parser.add_argument(
        '--log-level', '-l',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)',
    )
    parser.add_argument(
        '--log-dir',
        type=Path,
        help='Also write a detailed log file to this directory',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        log_dir=args.log_dir,
        level=getattr(logging, args.log_level),
        log_to_file=args.log_dir is not None,
    )

    try:
        config = get_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    fetcher = FPLDataFetcher(config)
    try:
        scorer = LiveLeagueScorer(fetcher)

        leagues = fetcher.user_classic_leagues(args.team_id)
        if not leagues:
            print(f'No classic leagues found for team id {args.team_id}.')
            return 0

        mini_leagues = scorer.mini_leagues(leagues)
        if not mini_leagues:
            print(f'No mini leagues (<{config.mini_league_max_entries} teams) found for team id {args.team_id}.')
            return 0

        run_session(scorer, mini_leagues)
    except (FPLFetchError, GameweekUnresolvedError) as e:
        logger.debug('Session aborted', exc_info=True)
        print(f'Error: {e}', file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        return 130

    return 0


if __name__ == '__main__':
    sys.exit(main())
