"""Mini league classification."""

import logging
from typing import Callable, Iterable, List

from .constants import MINI_LEAGUE_MAX_ENTRIES
from .models import LeagueRef, LeagueStandingsPage, LeagueSummary

logger = logging.getLogger('fpl_live.leagues')


def entry_count(page: LeagueStandingsPage) -> int:
    """League size as reported by the API, else the number of rows on the page."""
    if page.total_entries is not None:
        return page.total_entries
    return len(page.results)


def is_mini_league(page: LeagueStandingsPage, max_entries: int = MINI_LEAGUE_MAX_ENTRIES) -> bool:
    """A mini league fits on one standings page and has fewer than max_entries teams."""
    return not page.has_next and entry_count(page) < max_entries


def classify_leagues(
    leagues: Iterable[LeagueRef],
    fetch_page: Callable[[int], LeagueStandingsPage],
    max_entries: int = MINI_LEAGUE_MAX_ENTRIES,
) -> List[LeagueSummary]:
    """
    Keep only the mini leagues, with their standings attached.

    Args:
        leagues: Leagues the user belongs to
        fetch_page: Returns the first standings page for a league id
        max_entries: Exclusive upper bound on league size

    Returns:
        LeagueSummary per qualifying league, in input order
    """
    summaries = []
    for league in leagues:
        page = fetch_page(league.id)
        if not is_mini_league(page, max_entries):
            logger.debug(
                f'Skipping league {league.id} ({league.name}): '
                f'{entry_count(page)} entries, has_next={page.has_next}'
            )
            continue
        summaries.append(LeagueSummary(
            id=league.id,
            name=league.name,
            entry_count=entry_count(page),
            standings=list(page.results),
        ))
    return summaries
