"""Integration tests for the interactive session."""

import io
import logging
from unittest.mock import MagicMock, patch

import pytest

from fpl_live.cli import main
from fpl_live.config import clear_config_cache
from fpl_live.data_fetcher import FPLFetchError
from fpl_live.models import LeagueRef, LeagueStandingsPage, PickRow, StandingRow
from fpl_live.schemas import BootstrapPayload, ClientConfig


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Default config, and no log handlers left pointing at captured streams."""
    monkeypatch.delenv('FPL_LIVE_CONFIG', raising=False)
    clear_config_cache()
    yield
    clear_config_cache()
    logging.getLogger('fpl_live').handlers = []


@pytest.fixture
def mock_fetcher():
    """Fetcher stub for a user in one mini league and the overall league."""
    fetcher = MagicMock()
    fetcher.config = ClientConfig()
    fetcher.bootstrap = BootstrapPayload.model_validate({
        'events': [
            {'id': 11, 'is_current': False, 'is_next': False},
            {'id': 12, 'is_current': True, 'is_next': False},
            {'id': 13, 'is_current': False, 'is_next': True},
        ],
        'teams': [{'id': 1, 'short_name': 'ARS'}, {'id': 14, 'short_name': 'LIV'}],
        'elements': [
            {'id': 1, 'first_name': 'Bukayo', 'second_name': 'Saka', 'team': 1},
            {'id': 2, 'first_name': 'Mohamed', 'second_name': 'Salah', 'team': 14},
        ],
    })
    fetcher.user_classic_leagues.return_value = [LeagueRef(77, 'Office'), LeagueRef(314, 'Overall')]

    pages = {
        77: LeagueStandingsPage(
            results=[
                StandingRow(rank=1, entry_id=101, entry_name='Top Dogs', manager_name='Alex Doe'),
                StandingRow(rank=2, entry_id=102, entry_name='Pub Quizzers', manager_name='Sam Roe'),
            ],
            has_next=False,
            total_entries=2,
        ),
        314: LeagueStandingsPage(results=[], has_next=True, total_entries=11000000),
    }
    fetcher.league_standings_page.side_effect = lambda league_id, page: pages[league_id]
    fetcher.event_live_element_points.return_value = {1: 3, 2: 7}

    picks = {
        101: [PickRow(element=1, position=1, multiplier=1), PickRow(element=2, position=2, multiplier=2, is_captain=True)],
        102: [PickRow(element=1, position=12, multiplier=0), PickRow(element=2, position=1, multiplier=2, is_captain=True)],
    }
    fetcher.entry_picks.side_effect = lambda entry_id, event_id: picks[entry_id]
    return fetcher


def run_cli(monkeypatch, fetcher, user_input, argv=('123',)):
    monkeypatch.setattr('sys.stdin', io.StringIO(user_input))
    with patch('fpl_live.cli.FPLDataFetcher', return_value=fetcher):
        return main(list(argv))


class TestSessionFlow:
    """End-to-end league -> team -> details navigation with piped input."""

    def test_browse_league_and_team(self, monkeypatch, capsys, mock_fetcher):
        """Test picking a league and a team shows the live breakdown."""
        code = run_cli(monkeypatch, mock_fetcher, '1\n2\n\nb\nq\n')
        out = capsys.readouterr().out

        assert code == 0
        assert '1. Office (2 teams)' in out
        assert 'Overall' not in out
        assert 'Loading live points for Office (GW12)...' in out
        assert '1. #1 Alex Doe | Top Dogs | live 17' in out
        assert '2. #2 Sam Roe | Pub Quizzers | live 14' in out
        assert 'Sam Roe - Pub Quizzers' in out
        assert 'Live points: 14' in out
        assert ' 1. Mohamed Salah LIV (C) | raw 7 x2 = 14' in out
        assert '12. Bukayo Saka ARS | raw 3 x0 = 0' in out
        assert 'Press Enter to go back to teams, Left Arrow for leagues, or q to quit.' in out

        mock_fetcher.league_standings_page.assert_any_call(77, 1)
        mock_fetcher.entry_picks.assert_any_call(101, 12)
        mock_fetcher.entry_picks.assert_any_call(102, 12)

    def test_live_points_refetched_per_league_visit(self, monkeypatch, capsys, mock_fetcher):
        """Test reopening a league fetches fresh live points."""
        code = run_cli(monkeypatch, mock_fetcher, '1\nb\n1\nq\n')

        assert code == 0
        assert mock_fetcher.event_live_element_points.call_count == 2
        mock_fetcher.event_live_element_points.assert_called_with(12)

    def test_back_to_leagues_from_details(self, monkeypatch, capsys, mock_fetcher):
        """Test 'b' after details returns to the league menu."""
        code = run_cli(monkeypatch, mock_fetcher, '1\n1\nb\nq\n')
        out = capsys.readouterr().out

        assert code == 0
        assert out.count('1. Office (2 teams)') == 2

    def test_quit_from_details(self, monkeypatch, capsys, mock_fetcher):
        """Test 'q' after details ends the session."""
        assert run_cli(monkeypatch, mock_fetcher, '1\n1\nq\n') == 0
        assert mock_fetcher.event_live_element_points.call_count == 1

    def test_closed_input_quits(self, monkeypatch, capsys, mock_fetcher):
        """Test end of input at the league menu exits cleanly."""
        code = run_cli(monkeypatch, mock_fetcher, '')
        out = capsys.readouterr().out

        assert code == 0
        assert 'Input stream is closed; exiting selection.' in out
        mock_fetcher.event_live_element_points.assert_not_called()


class TestEmptyResults:
    """Tests for users with nothing to browse."""

    def test_no_leagues(self, monkeypatch, capsys, mock_fetcher):
        """Test a user with no classic leagues gets a message and exit 0."""
        mock_fetcher.user_classic_leagues.return_value = []
        code = run_cli(monkeypatch, mock_fetcher, '')

        assert code == 0
        assert 'No classic leagues found for team id 123.' in capsys.readouterr().out

    def test_no_mini_leagues(self, monkeypatch, capsys, mock_fetcher):
        """Test a user only in large leagues gets a message and exit 0."""
        mock_fetcher.user_classic_leagues.return_value = [LeagueRef(314, 'Overall')]
        code = run_cli(monkeypatch, mock_fetcher, '')

        assert code == 0
        assert 'No mini leagues (<50 teams) found for team id 123.' in capsys.readouterr().out


class TestFatalErrors:
    """Tests for errors that end the session."""

    def test_unresolvable_gameweek(self, monkeypatch, capsys, mock_fetcher):
        """Test missing gameweek data aborts with exit code 1."""
        mock_fetcher.bootstrap = BootstrapPayload.model_validate({'events': []})
        code = run_cli(monkeypatch, mock_fetcher, '')

        assert code == 1
        assert 'Could not determine current gameweek' in capsys.readouterr().err
        mock_fetcher.user_classic_leagues.assert_not_called()

    def test_fetch_error(self, monkeypatch, capsys, mock_fetcher):
        """Test an API failure aborts with exit code 1."""
        url = 'https://fantasy.premierleague.com/api/entry/123/'
        mock_fetcher.user_classic_leagues.side_effect = FPLFetchError(
            f'FPL API request failed (404): {url}', url, 404
        )
        code = run_cli(monkeypatch, mock_fetcher, '')

        assert code == 1
        assert 'FPL API request failed (404)' in capsys.readouterr().err

    def test_bad_config_file(self, monkeypatch, capsys, mock_fetcher, tmp_path):
        """Test an unreadable config file aborts with exit code 1."""
        code = run_cli(monkeypatch, mock_fetcher, '', argv=('123', '--config', str(tmp_path / 'nope.json')))

        assert code == 1
        assert 'File not found' in capsys.readouterr().err

    def test_team_id_must_be_numeric(self, monkeypatch, mock_fetcher):
        """Test argparse rejects a non-numeric team id."""
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, mock_fetcher, '', argv=('abc',))
        assert exc_info.value.code == 2
