"""Terminal menu navigation.

Menus are driven by arrow keys (or k/j) when stdin is a terminal that can be
put into raw mode. Otherwise they fall back to a numbered list read one line
at a time, which also covers piped input.
"""

import enum
import logging
import os
import select
import sys
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TextIO, TypeVar, Union

try:
    import termios
    import tty
except ImportError:  # not available on Windows; raw mode is then never offered
    termios = None
    tty = None

from .constants import ARROW_KEYS, CLEAR_SCREEN, CTRL_C, CTRL_D, ESC, ESCAPE_TIMEOUT

T = TypeVar('T')
R = TypeVar('R')
logger = logging.getLogger('fpl_live.navigation')


class Key(enum.Enum):
    """Logical key events read from the terminal."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    ENTER = 'enter'
    ESC = 'esc'
    QUIT = 'quit'
    EOF = 'eof'
    OTHER = 'other'


@dataclass(frozen=True)
class Selected(Generic[T]):
    """The user picked an option."""
    value: T


class MenuSignal(enum.Enum):
    """The user left the menu without picking an option."""
    BACK = 'back'
    QUIT = 'quit'


Back = MenuSignal.BACK
Quit = MenuSignal.QUIT

MenuResult = Union[Selected[T], MenuSignal]


class PostDetailsAction(enum.Enum):
    """What to do after a team's detail view."""
    BACK_TO_TEAMS = 'teams'
    BACK_TO_LEAGUES = 'leagues'
    QUIT = 'quit'


class TerminalUnavailable(OSError):
    """Raw terminal mode can't be used (not a tty, no termios, ...)."""


# =============================================================================
# Raw terminal access
# =============================================================================

class RawTerminal:
    """
    Exclusive raw-mode access to a terminal input stream.

    acquire() saves the current attributes and switches to raw mode;
    release() restores them. Callers must pair them with try/finally.
    """

    def __init__(self, stream: TextIO, escape_timeout: float = ESCAPE_TIMEOUT):
        self.stream = stream
        self.escape_timeout = escape_timeout
        self.fd: Optional[int] = None
        self._saved_attributes = None

    def acquire(self) -> None:
        """Enter raw mode. Raises TerminalUnavailable if the stream isn't a usable tty."""
        if termios is None:
            raise TerminalUnavailable('termios is not available on this platform')
        try:
            fd = self.stream.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalUnavailable(f'input has no file descriptor: {e}') from e
        if not os.isatty(fd):
            raise TerminalUnavailable('input is not a terminal')
        try:
            self._saved_attributes = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            raise TerminalUnavailable(f'cannot enter raw mode: {e}') from e
        self.fd = fd

    def release(self) -> None:
        """Restore the attributes saved by acquire()."""
        if self.fd is None:
            return
        termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attributes)
        self.fd = None

    def read_char(self, timeout: Optional[float] = None) -> Optional[str]:
        """
        Read one byte as a character.

        Returns:
            The character, '' at end of stream, or None if timeout elapsed first
        """
        if timeout is not None:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            if not ready:
                return None
        data = os.read(self.fd, 1)
        return data.decode('latin-1') if data else ''

    def read_key(self) -> Key:
        return decode_key(self.read_char, self.escape_timeout)


def decode_key(
    read_char: Callable[[Optional[float]], Optional[str]],
    escape_timeout: float = ESCAPE_TIMEOUT,
) -> Key:
    """
    Read one logical key.

    Arrow keys arrive as ESC [ A..D or ESC O A..D, optionally with modifier
    parameters (ESC [ 1 ; 2 A). An ESC not followed by a recognised sequence
    within escape_timeout is a plain Esc.

    Args:
        read_char: Returns the next character, '' at end of stream, or None
            when the given timeout (None = block) elapses
        escape_timeout: Seconds to wait for each byte after ESC
    """
    first = read_char(None)
    if not first or first == CTRL_D:
        return Key.EOF
    if first == CTRL_C:
        raise KeyboardInterrupt
    if first in ('\r', '\n'):
        return Key.ENTER
    if first == ESC:
        return _decode_escape(read_char, escape_timeout)
    if first in ('k', 'K'):
        return Key.UP
    if first in ('j', 'J'):
        return Key.DOWN
    if first in ('q', 'Q'):
        return Key.QUIT
    return Key.OTHER


def _decode_escape(read_char, escape_timeout: float) -> Key:
    introducer = read_char(escape_timeout)
    if introducer not in ('[', 'O'):
        return Key.ESC

    final = read_char(escape_timeout)
    if introducer == '[':
        # Skip modifier parameters, e.g. "1;5" in ESC [ 1 ; 5 A
        while final and (final.isdigit() or final == ';'):
            final = read_char(escape_timeout)

    if final in ARROW_KEYS:
        return Key[ARROW_KEYS[final]]
    return Key.ESC


def _run_with_best_input(
    stdin: TextIO,
    escape_timeout: float,
    raw_strategy: Callable[[RawTerminal], R],
    fallback_strategy: Callable[[], R],
) -> R:
    """Run raw_strategy with the terminal in raw mode, or fallback_strategy if that's impossible."""
    terminal = RawTerminal(stdin, escape_timeout)
    try:
        terminal.acquire()
    except TerminalUnavailable as e:
        logger.debug(f'Raw terminal unavailable ({e}); using numbered input')
        return fallback_strategy()
    try:
        return raw_strategy(terminal)
    finally:
        terminal.release()


# =============================================================================
# Menus
# =============================================================================

def menu_hint(allow_back: bool, allow_quit: bool) -> str:
    """Describe the available keys."""
    controls = ['Use ↑/↓ and Enter']
    if allow_back:
        controls.append('← or Esc to go back')
    if allow_quit:
        controls.append('q to quit')
    return '. '.join(controls) + '.'


def menu_frame(
    prompt: str,
    options: Sequence[T],
    index: int,
    allow_back: bool,
    allow_quit: bool,
    label: Callable[[T], str],
) -> List[str]:
    """Lines for one redraw of the menu, with the cursor row marked."""
    lines = [prompt, menu_hint(allow_back, allow_quit), '']
    for i, item in enumerate(options):
        marker = '> ' if i == index else '  '
        lines.append(marker + label(item))
    return lines


def run_menu(
    prompt: str,
    options: Sequence[T],
    read_key: Callable[[], Key],
    render: Callable[[List[str]], None],
    allow_back: bool = False,
    allow_quit: bool = False,
    label: Callable[[T], str] = str,
) -> MenuResult:
    """
    Drive the cursor over options until the user selects, backs out or quits.

    Up/Down wrap around. Left/Esc go back when allowed; Esc quits instead if
    only quitting is allowed. End of input always quits.
    """
    index = 0
    last = len(options) - 1
    while True:
        render(menu_frame(prompt, options, index, allow_back, allow_quit, label))
        key = read_key()

        if key is Key.UP:
            index = last if index == 0 else index - 1
        elif key is Key.DOWN:
            index = 0 if index == last else index + 1
        elif key is Key.ENTER:
            return Selected(options[index])
        elif key is Key.LEFT:
            if allow_back:
                return Back
        elif key is Key.ESC:
            if allow_back:
                return Back
            if allow_quit:
                return Quit
        elif key is Key.QUIT:
            if allow_quit:
                return Quit
        elif key is Key.EOF:
            return Quit


def select_by_number(
    prompt: str,
    options: Sequence[T],
    allow_back: bool = False,
    allow_quit: bool = False,
    label: Callable[[T], str] = str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> MenuResult:
    """
    Line-based menu: print a numbered list once, then read choices.

    Accepts a 1-based number, b/back (if allowed) or q/quit (if allowed),
    case-insensitively. Anything else reprompts. End of input quits.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(f'{prompt}\n')
    for number, item in enumerate(options, 1):
        stdout.write(f'{number}. {label(item)}\n')

    while True:
        stdout.write(f'{prompt}: ')
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write('Input stream is closed; exiting selection.\n')
            return Quit

        choice = line.strip().lower()
        if allow_back and choice in ('b', 'back'):
            return Back
        if allow_quit and choice in ('q', 'quit'):
            return Quit
        try:
            number = int(choice)
        except ValueError:
            number = None
        if number is not None and 1 <= number <= len(options):
            return Selected(options[number - 1])

        hints = []
        if allow_back:
            hints.append("'b'")
        if allow_quit:
            hints.append("'q'")
        suffix = f" or {' or '.join(hints)}" if hints else ''
        stdout.write(f'Please enter a number between 1 and {len(options)}{suffix}.\n')


def select_with_navigation(
    prompt: str,
    options: Sequence[T],
    allow_back: bool = False,
    allow_quit: bool = False,
    label: Callable[[T], str] = str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    escape_timeout: float = ESCAPE_TIMEOUT,
) -> MenuResult:
    """
    Let the user pick one of options.

    Uses the arrow-key menu when stdin is a terminal, else the numbered
    fallback. The terminal is always restored before returning.

    Args:
        prompt: Title line shown above the options
        options: Items to choose from; an empty sequence returns Back at once
        allow_back: Whether Left/Esc/'b' go back
        allow_quit: Whether 'q' quits
        label: Renders an item as its menu line

    Returns:
        Selected(item), Back or Quit
    """
    options = list(options)
    if not options:
        return Back

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def render(lines: List[str]) -> None:
        # Raw mode disables output post-processing, so lines need explicit \r
        stdout.write(CLEAR_SCREEN + '\r\n'.join(lines) + '\r\n')
        stdout.flush()

    return _run_with_best_input(
        stdin,
        escape_timeout,
        lambda terminal: run_menu(
            prompt, options, terminal.read_key, render, allow_back, allow_quit, label
        ),
        lambda: select_by_number(prompt, options, allow_back, allow_quit, label, stdin, stdout),
    )


# =============================================================================
# Post-detail action
# =============================================================================

def _post_details_from_keys(read_key: Callable[[], Key]) -> PostDetailsAction:
    while True:
        key = read_key()
        if key is Key.ENTER:
            return PostDetailsAction.BACK_TO_TEAMS
        if key in (Key.LEFT, Key.ESC):
            return PostDetailsAction.BACK_TO_LEAGUES
        if key in (Key.QUIT, Key.EOF):
            return PostDetailsAction.QUIT


def _post_details_from_line(stdin: TextIO) -> PostDetailsAction:
    line = stdin.readline()
    if not line:
        return PostDetailsAction.QUIT
    choice = line.strip().lower()
    if choice in ('q', 'quit'):
        return PostDetailsAction.QUIT
    if choice in ('b', 'back'):
        return PostDetailsAction.BACK_TO_LEAGUES
    return PostDetailsAction.BACK_TO_TEAMS


def read_post_details_action(
    stdin: Optional[TextIO] = None,
    escape_timeout: float = ESCAPE_TIMEOUT,
) -> PostDetailsAction:
    """
    Wait for the user to leave a detail view.

    Enter goes back to the team list, Left/Esc (or 'b') to the league list,
    'q' or end of input quits.
    """
    stdin = stdin or sys.stdin
    return _run_with_best_input(
        stdin,
        escape_timeout,
        lambda terminal: _post_details_from_keys(terminal.read_key),
        lambda: _post_details_from_line(stdin),
    )
