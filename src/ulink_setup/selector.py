"""
selector:
    Interactive checkbox list for the terminal.

Arrow keys (or j/k) move, space toggles, 'a' toggles all, enter confirms,
Ctrl-C aborts. Keys are read one at a time with readchar while the terminal
is held in cbreak mode (no echo, no line buffering); every exit path restores
the previous terminal mode.

The state machine (SelectorState) is kept separate from terminal I/O
(Checkbox) so transitions can be tested without a terminal.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, TextIO

import readchar
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from ulink_setup import ui

try:
    import termios
    import tty
except ImportError:  # Windows: readchar reads keys without termios
    termios = None
    tty = None


HINT = "(arrow keys to move, space to toggle, enter to confirm)"


@dataclass(frozen=True)
class SelectableItem:
    """One row of the checklist. Label may contain rich markup."""

    label: str
    checked: bool = False


class Action(Enum):
    UP = "up"
    DOWN = "down"
    TOGGLE = "toggle"
    TOGGLE_ALL = "toggle_all"
    CONFIRM = "confirm"
    INTERRUPT = "interrupt"


_KEYMAP: dict[str, Action] = {
    readchar.key.UP: Action.UP,
    readchar.key.CTRL_P: Action.UP,
    "k": Action.UP,
    readchar.key.DOWN: Action.DOWN,
    readchar.key.CTRL_N: Action.DOWN,
    "j": Action.DOWN,
    " ": Action.TOGGLE,
    "a": Action.TOGGLE_ALL,
    "\r": Action.CONFIRM,
    "\n": Action.CONFIRM,
    readchar.key.ENTER: Action.CONFIRM,
    readchar.key.CTRL_C: Action.INTERRUPT,
}


def decode_key(key: str) -> Optional[Action]:
    """Map a raw key sequence to an action, or None if the key is unbound."""
    return _KEYMAP.get(key)


# =============================================================================
# State machine
# =============================================================================


@dataclass
class SelectorState:
    """Cursor position and checked flags, parallel to the item list."""

    checked: list[bool]
    cursor: int = 0

    def __post_init__(self) -> None:
        if not self.checked:
            raise ValueError("SelectorState needs at least one item")
        if not 0 <= self.cursor < len(self.checked):
            raise ValueError(f"cursor {self.cursor} out of range")

    @classmethod
    def from_items(cls, items: list[SelectableItem]) -> SelectorState:
        return cls(checked=[item.checked for item in items])

    def move_up(self) -> None:
        self.cursor = (self.cursor - 1) % len(self.checked)

    def move_down(self) -> None:
        self.cursor = (self.cursor + 1) % len(self.checked)

    def toggle(self) -> None:
        self.checked[self.cursor] = not self.checked[self.cursor]

    def toggle_all(self) -> None:
        """Uncheck everything if all are checked, otherwise check everything."""
        value = not all(self.checked)
        self.checked = [value] * len(self.checked)

    def selected(self) -> list[int]:
        return [i for i, c in enumerate(self.checked) if c]

    def apply(self, action: Action) -> None:
        """Apply a navigation/toggle action. CONFIRM and INTERRUPT are handled by the session."""
        if action is Action.UP:
            self.move_up()
        elif action is Action.DOWN:
            self.move_down()
        elif action is Action.TOGGLE:
            self.toggle()
        elif action is Action.TOGGLE_ALL:
            self.toggle_all()


# =============================================================================
# Terminal mode
# =============================================================================


@contextmanager
def raw_mode(stream: TextIO) -> Iterator[None]:
    """Hold the terminal in cbreak mode, restoring the previous attributes on exit."""
    if termios is None or not stream.isatty():
        yield
        return

    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


# =============================================================================
# Checkbox session
# =============================================================================


class Checkbox:
    """One interactive selection session over a fixed list of items."""

    def __init__(
        self,
        title: str,
        items: list[SelectableItem],
        console: Optional[Console] = None,
        read_key: Callable[[], str] = readchar.readkey,
        stream: Optional[TextIO] = None,
    ):
        self.title = title
        self.items = items
        self.console = console or ui.console
        self.read_key = read_key
        self.stream = stream or sys.stdin
        self.state = SelectorState.from_items(items)

    @property
    def height(self) -> int:
        """Lines per render: title, one per item, hint."""
        return len(self.items) + 2

    def _line(self, text: Text) -> None:
        if self.console.is_terminal:
            self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))
        self.console.print(text, highlight=False)

    def render(self, clear: bool = False) -> None:
        if clear:
            # Move up over the previous render so it is overwritten in place
            self.console.control(Control((ControlType.CURSOR_UP, self.height)))

        self._line(Text.assemble(ui.Icons.INDENT, self.title))
        for i, item in enumerate(self.items):
            pointer = (
                Text(ui.Icons.POINTER, style="cyan")
                if i == self.state.cursor
                else Text(" ")
            )
            check = (
                Text(ui.Icons.CHECKED, style="green")
                if self.state.checked[i]
                else Text(ui.Icons.UNCHECKED)
            )
            self._line(
                Text.assemble(
                    ui.Icons.INDENT, pointer, " ", check, " ", Text.from_markup(item.label)
                )
            )
        self._line(Text.assemble(ui.Icons.INDENT, Text(HINT, style="dim")))

    def run(self) -> list[int]:
        """Run the session and return the checked indices in item order.

        Raises:
            SystemExit: With code 130 on Ctrl-C, after restoring the terminal.
        """
        self.render()
        interrupted = False
        with raw_mode(self.stream):
            try:
                while True:
                    action = decode_key(self.read_key())
                    if action is None:
                        continue
                    if action is Action.INTERRUPT:
                        interrupted = True
                        break
                    if action is Action.CONFIRM:
                        break
                    self.state.apply(action)
                    # Piped output cannot move the cursor; keep the first render only
                    if self.console.is_terminal:
                        self.render(clear=True)
            except KeyboardInterrupt:
                interrupted = True

        if interrupted:
            raise SystemExit(130)
        return self.state.selected()


def checkbox(title: str, items: list[SelectableItem], **kwargs) -> list[int]:
    """Show an interactive checkbox list and return the selected indices."""
    if not items:
        return []
    return Checkbox(title, items, **kwargs).run()
