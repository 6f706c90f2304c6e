"""Session scoring engine that ties the API client to live scoring."""

import logging
from typing import Iterable, List

from .data_fetcher import FPLDataFetcher
from .gameweek import build_player_lookup, require_gameweek_id
from .leagues import classify_leagues
from .models import LeagueRef, LeagueSummary, TeamLiveSummary
from .scoring import summarize_team

logger = logging.getLogger('fpl_live.scorer')


class LiveLeagueScorer:
    """Live gameweek scores for a user's mini leagues."""

    def __init__(self, fetcher: FPLDataFetcher):
        """
        Initialize scorer.

        Resolves the current gameweek and builds the player lookup from
        bootstrap data once for the session.

        Raises:
            GameweekUnresolvedError: If bootstrap data has no usable gameweek
        """
        self.fetcher = fetcher
        self.gameweek = require_gameweek_id(fetcher.bootstrap)
        self.player_lookup = build_player_lookup(fetcher.bootstrap)
        logger.info(f'Scoring gameweek {self.gameweek} ({len(self.player_lookup)} players)')

    def mini_leagues(self, leagues: Iterable[LeagueRef]) -> List[LeagueSummary]:
        """Keep the mini leagues among the user's leagues, with standings attached."""
        config = self.fetcher.config
        return classify_leagues(
            leagues,
            lambda league_id: self.fetcher.league_standings_page(league_id, 1),
            config.mini_league_max_entries,
        )

    def score_league(self, league: LeagueSummary) -> List[TeamLiveSummary]:
        """
        Score every team in a league for the current gameweek.

        Live points are fetched fresh on each call.

        Returns:
            TeamLiveSummary per standing, in standings order
        """
        live_points = self.fetcher.event_live_element_points(self.gameweek)
        teams = []
        for standing in league.standings:
            picks = self.fetcher.entry_picks(standing.entry_id, self.gameweek)
            teams.append(summarize_team(standing, picks, live_points, self.player_lookup))
        logger.debug(f'Scored {len(teams)} teams in league {league.id}')
        return teams
