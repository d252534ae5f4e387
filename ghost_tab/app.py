"""Textual driver for the main menu.

All decisions live in :func:`ghost_tab.menu.transition` and all drawing in
:func:`ghost_tab.view.render`; the app only turns Textual events into menu
events and puts the rendered frame on screen.
"""

import logging
import signal
from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from ghost_tab import keymap
from ghost_tab.errors import ScreenFailedError
from ghost_tab.keymap import Key, key_from_textual
from ghost_tab.menu import (
    GHOST_ANIMATED, QUIT, TICK_SECONDS, Click, Event, MenuResult, MenuState, MouseMove, Resize,
    Tick, transition,
)
from ghost_tab.terminal import controlling_terminal
from ghost_tab.theme import THEMES, textual_theme, textual_theme_name
from ghost_tab.view import menu_top, render

logger = logging.getLogger(__name__)

# ── Base app ──────────────────────────────────────────────────────────


class ThemedApp(App):
    """App with every tool palette registered and the given tool's active."""

    def __init__(self, tool: str):
        super().__init__()
        # Register themes early so CSS variables are available
        for name in THEMES:
            self.register_theme(textual_theme(name))
        self.theme = textual_theme_name(tool)


# ── Main menu ─────────────────────────────────────────────────────────


MAIN_MENU_CSS = """
Screen {
    align: center middle;
    overflow: hidden;
}
#menu {
    width: auto;
    height: auto;
}
"""


class MainMenuApp(ThemedApp):
    """Full-screen main menu; exits with the chosen :class:`MenuResult`."""

    CSS = MAIN_MENU_CSS

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", show=False, priority=True),
    ]

    def __init__(self, state: MenuState, home: Optional[str] = None):
        super().__init__(state.current_tool)
        self.menu_state = state
        self.home = home

    def compose(self) -> ComposeResult:
        yield Static(id="menu")

    def on_mount(self):
        self.apply_event(Resize(self.size.width, self.size.height))
        if self.menu_state.ghost_display == GHOST_ANIMATED:
            self.set_interval(TICK_SECONDS, self._tick)

    def on_resize(self, event):
        self.apply_event(Resize(event.size.width, event.size.height))

    def on_key(self, event):
        event.stop()
        event.prevent_default()
        key = key_from_textual(event)
        if key is not None:
            self.apply_event(key)

    def on_click(self, event):
        if event.button != 1:
            return
        menu = self.query_one("#menu", Static)
        row = event.screen_y - menu.region.y - menu_top(self.menu_state)
        self.apply_event(Click(row))

    def on_mouse_move(self, event):
        self.apply_event(MouseMove())

    def action_interrupt(self):
        self.apply_event(Key(keymap.INTERRUPT))

    def _tick(self):
        self.apply_event(Tick())

    def apply_event(self, event: Event):
        """Feed one event to the menu and redraw, or exit once it has a result."""
        if self.menu_state.exited:
            return
        previous = self.menu_state
        self.menu_state = transition(previous, event)
        if self.menu_state is previous:
            return
        if self.menu_state.result is not None:
            logger.debug("menu finished: %s", self.menu_state.result.to_json())
            self.exit(self.menu_state.result)
            return
        if self.menu_state.current_tool != previous.current_tool:
            self.theme = textual_theme_name(self.menu_state.current_tool)
        self.query_one("#menu", Static).update(
            Text.from_ansi(render(self.menu_state, self.home), no_wrap=True)
        )


def run_main_menu(state: MenuState) -> MenuResult:
    """Run the menu on the controlling terminal and return what was chosen.

    A run that ends without a result (the framework's own quit key) counts
    as ``quit`` with the tool that was selected at the time. A run that
    stopped on an error raises :class:`ScreenFailedError` instead.
    """
    # A closed terminal window reaches the app as EOF, not as SIGHUP
    if hasattr(signal, "SIGHUP"):
        signal.signal(signal.SIGHUP, signal.SIG_IGN)

    app = MainMenuApp(state)
    with controlling_terminal():
        result = app.run()
    if app.return_code:
        raise ScreenFailedError(f"main menu stopped with an error (exit status {app.return_code})")
    if result is None:
        result = MenuResult(action=QUIT, ai_tool=app.menu_state.current_tool)
    return result
