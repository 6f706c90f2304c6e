from .models import (
    LeagueRef,
    LeagueStandingsPage,
    LeagueSummary,
    PickRow,
    PlayerLiveRow,
    PlayerRef,
    StandingRow,
    TeamLiveSummary,
)
from .scoring import build_player_rows, summarize_team, team_live_points
from .leagues import classify_leagues, entry_count, is_mini_league
from .gameweek import (
    GameweekUnresolvedError,
    build_player_lookup,
    current_gameweek_id,
)
from .data_fetcher import FPLDataFetcher, FPLFetchError
from .navigation import (
    Back,
    Key,
    PostDetailsAction,
    Quit,
    Selected,
    read_post_details_action,
    select_with_navigation,
)
from .scorer import LiveLeagueScorer

__all__ = [
    # Models
    'LeagueRef',
    'LeagueStandingsPage',
    'LeagueSummary',
    'PickRow',
    'PlayerLiveRow',
    'PlayerRef',
    'StandingRow',
    'TeamLiveSummary',
    # Live scoring
    'build_player_rows',
    'summarize_team',
    'team_live_points',
    # Mini leagues
    'classify_leagues',
    'entry_count',
    'is_mini_league',
    # Gameweek / bootstrap
    'GameweekUnresolvedError',
    'build_player_lookup',
    'current_gameweek_id',
    # Data fetching
    'FPLDataFetcher',
    'FPLFetchError',
    # Navigation
    'Back',
    'Key',
    'PostDetailsAction',
    'Quit',
    'Selected',
    'read_post_details_action',
    'select_with_navigation',
    # Session
    'LiveLeagueScorer',
]
