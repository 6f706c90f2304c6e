"""Constants for the FPL live leagues client."""

FPL_BASE_URL = 'https://fantasy.premierleague.com/api'
USER_AGENT = 'fpl-live-leagues-cli'

# API endpoint paths (relative to the base URL)
BOOTSTRAP_PATH = '/bootstrap-static/'
ENTRY_PATH = '/entry/{entry_id}/'
STANDINGS_PATH = '/leagues-classic/{league_id}/standings/'
LIVE_PATH = '/event/{event_id}/live/'
PICKS_PATH = '/entry/{entry_id}/event/{event_id}/picks/'

# A league qualifies as a mini league below this many entries
MINI_LEAGUE_MAX_ENTRIES = 50

# Seconds to wait for the rest of an escape sequence before treating it as Esc
ESCAPE_TIMEOUT = 0.25

# Seconds before an API request is abandoned
REQUEST_TIMEOUT = 10.0

# ANSI: clear screen + move cursor home
CLEAR_SCREEN = '\x1b[2J\x1b[H'

# Raw mode control bytes
ESC = '\x1b'
CTRL_C = '\x03'
CTRL_D = '\x04'

# Final byte of a CSI/SS3 arrow sequence -> logical key name
ARROW_KEYS = {
    'A': 'UP',
    'B': 'DOWN',
    'C': 'RIGHT',
    'D': 'LEFT',
}
