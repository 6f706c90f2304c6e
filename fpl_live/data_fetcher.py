"""FPL API data fetching using requests."""

import logging
from typing import Dict, List, Optional, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .constants import (
    BOOTSTRAP_PATH,
    ENTRY_PATH,
    LIVE_PATH,
    PICKS_PATH,
    STANDINGS_PATH,
)
from .models import LeagueRef, LeagueStandingsPage, PickRow, StandingRow
from .schemas import (
    BootstrapPayload,
    ClientConfig,
    EntryPayload,
    LivePayload,
    PicksPayload,
    StandingsPayload,
)

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('fpl_live.data_fetcher')


class FPLFetchError(RuntimeError):
    """A request to the FPL API failed or returned an unusable payload."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class FPLDataFetcher:
    """Fetches data from the public FPL API. All endpoints are read-only."""

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ClientConfig()
        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
            'User-Agent': self.config.user_agent,
        })
        self._bootstrap: Optional[BootstrapPayload] = None

    @property
    def bootstrap(self) -> BootstrapPayload:
        """Lazy load bootstrap-static (gameweeks, clubs, players)."""
        if self._bootstrap is None:
            logger.info('Loading bootstrap data...')
            self._bootstrap = self._get(BOOTSTRAP_PATH, BootstrapPayload)
        return self._bootstrap

    def user_classic_leagues(self, entry_id: int) -> List[LeagueRef]:
        """
        Get the classic leagues an entry belongs to.

        Args:
            entry_id: FPL entry (team) id

        Returns:
            LeagueRef per league, in API order. Leagues without an id are skipped.
        """
        payload = self._get(ENTRY_PATH.format(entry_id=entry_id), EntryPayload)
        return [
            LeagueRef(id=league.id, name=league.name or f'League {league.id}')
            for league in payload.leagues.classic
            if league.id is not None
        ]

    def league_standings_page(self, league_id: int, page: int = 1) -> LeagueStandingsPage:
        """
        Get one page of a classic league's standings.

        Args:
            league_id: Classic league id
            page: 1-based standings page

        Returns:
            LeagueStandingsPage with rows, has_next flag and the league's entry count
        """
        payload = self._get(
            STANDINGS_PATH.format(league_id=league_id),
            StandingsPayload,
            params={'page_standings': page},
        )
        results = [
            StandingRow(
                rank=row.rank or 0,
                entry_id=row.entry,
                entry_name=row.entry_name or f'Team {row.entry}',
                manager_name=row.player_name or f'Manager {row.entry}',
            )
            for row in payload.standings.results
            if row.entry is not None
        ]
        return LeagueStandingsPage(
            results=results,
            has_next=payload.standings.has_next is True,
            total_entries=payload.league.entries,
        )

    def event_live_element_points(self, event_id: int) -> Dict[int, int]:
        """Get live total points per player id for a gameweek."""
        payload = self._get(LIVE_PATH.format(event_id=event_id), LivePayload)
        return {
            element.id: element.stats.total_points or 0
            for element in payload.elements
            if element.id is not None
        }

    def entry_picks(self, entry_id: int, event_id: int) -> List[PickRow]:
        """Get an entry's 15 picks for a gameweek."""
        payload = self._get(
            PICKS_PATH.format(entry_id=entry_id, event_id=event_id), PicksPayload
        )
        return [
            PickRow(
                element=pick.element,
                position=pick.position if pick.position is not None else 0,
                multiplier=pick.multiplier if pick.multiplier is not None else 1,
                is_captain=pick.is_captain is True,
                is_vice_captain=pick.is_vice_captain is True,
            )
            for pick in payload.picks
            if pick.element is not None
        ]

    def _get(self, path: str, schema: type[T], params: Optional[dict] = None) -> T:
        """GET a path under the base URL and validate the JSON body against schema."""
        url = f'{self.config.base_url}{path}'
        logger.debug(f'GET {url} params={params}')

        try:
            response = self.session.get(url, params=params, timeout=self.config.request_timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.debug(f'FPL API request failed ({status}): {url}')
            raise FPLFetchError(f'FPL API request failed ({status}): {url}', url, status) from e
        except requests.RequestException as e:
            logger.debug(f'FPL API request error for {url}: {e}')
            raise FPLFetchError(f'FPL API request error: {url}: {e}', url) from e

        try:
            return schema.model_validate(response.json())
        except ValueError as e:
            # ValidationError and JSON decode errors are both ValueErrors
            kind = 'schema' if isinstance(e, ValidationError) else 'JSON'
            logger.debug(f'Invalid {kind} in response from {url}: {e}')
            raise FPLFetchError(f'Unexpected response from FPL API: {url}', url, response.status_code) from e
