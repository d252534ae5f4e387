"""Peer screens the shell wrapper opens next to the main menu.

Each screen is a small app that exits with the dict to print as its JSON
line. ``CANCELLED`` is what a screen prints when it ends without an answer
(escape, ctrl+c, or the framework's own quit key).
"""

import logging
import os
from typing import List, Optional, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.suggester import Suggester
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option

from ghost_tab import keymap
from ghost_tab.app import ThemedApp
from ghost_tab.errors import ScreenFailedError
from ghost_tab.figures import render_figure
from ghost_tab.keymap import key_from_textual
from ghost_tab.projects import (
    Project, is_duplicate_project, path_suggestions, shorten_home_path, validate_directory,
)
from ghost_tab.terminal import controlling_terminal
from ghost_tab.theme import HELP_GRAY, UPDATE_YELLOW, style_for, theme_for_tool
from ghost_tab.tools import AITool, installer_display_name

logger = logging.getLogger(__name__)

QUESTION_COLOR = 170
ERROR_RED = 196
LOGO_SECONDS = 2.0

# Action, title, description
SETTINGS_ITEMS = (
    ("add-project", "Add Project", "Add a new project to the list"),
    ("delete-project", "Delete Project", "Remove a project from the list"),
    ("select-ai-tool", "Select AI Tool", "Choose default AI tool"),
    ("manage-features", "Manage Features", "Configure AI tool features"),
    ("quit", "Quit", "Exit settings menu"),
)

NO_TOOL_SELECTED = "Select at least one AI tool"

SCREEN_CSS = """
Screen {
    align: center middle;
}
#box {
    width: 64;
    height: auto;
    max-height: 100%;
    border: heavy $primary;
    background: $surface;
    padding: 1 2;
}
#items {
    height: auto;
    max-height: 20;
    border: none;
    background: $surface;
}
PickList > .option-list--option-highlighted {
    background: $primary 30%;
    text-style: bold;
}
#error {
    height: auto;
}
#hints {
    margin-top: 1;
}
#path {
    margin-top: 1;
}
"""


# ── Base ──────────────────────────────────────────────────────────────


class PeerApp(ThemedApp):
    """Common bindings and cancel behavior for the peer screens."""

    CSS = SCREEN_CSS
    CANCELLED: Optional[dict] = None

    BINDINGS = [
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
    ]

    def __init__(self, tool: str):
        super().__init__(tool)
        self.palette = theme_for_tool(tool)

    def action_cancel(self):
        self.exit(self.CANCELLED)

    def show_error(self, message: str):
        text = Text(f"Error: {message}" if message else "", style=style_for(ERROR_RED))
        self.query_one("#error", Static).update(text)

    def title_text(self, title: str) -> Text:
        return Text(title, style=style_for(self.palette.primary, bold=True))


class PickList(OptionList, inherit_bindings=False):
    """Option list driven entirely from the app's key handler."""

    can_focus = False
    BINDINGS = []


class ListApp(PeerApp):
    """A titled list navigated with ↑↓/jk, Enter to choose, Esc to cancel.

    Subclasses must override :meth:`rows` and :meth:`choose`;
    :meth:`initial_index` and :meth:`on_other_key` are optional hooks.
    """

    TITLE_TEXT = ""
    HINTS = "↑↓ navigate  ⏎ select  Esc cancel"

    def compose(self) -> ComposeResult:
        with Vertical(id="box"):
            yield Static(self.title_text(self.TITLE_TEXT), id="title")
            yield PickList(id="items")
            yield Static(id="error")
            yield Static(Text(self.HINTS, style=style_for(HELP_GRAY)), id="hints")

    def on_mount(self):
        self.refresh_items()
        self.items.highlighted = self.initial_index()

    @property
    def items(self) -> OptionList:
        return self.query_one("#items", OptionList)

    def rows(self) -> List[Text]:
        raise NotImplementedError

    def initial_index(self) -> int:
        return 0

    def refresh_items(self):
        items = self.items
        keep = items.highlighted
        items.clear_options()
        for row in self.rows():
            items.add_option(Option(row))
        if keep is not None:
            items.highlighted = keep

    def choose(self, index: int):
        raise NotImplementedError

    def on_other_key(self, key: str, index: int):
        pass

    def on_key(self, event):
        event.stop()
        event.prevent_default()
        key = key_from_textual(event)
        if key is None:
            return
        k = keymap.translate(key).value
        self.show_error("")
        items = self.items
        if k == keymap.ESCAPE:
            self.action_cancel()
            return
        if items.option_count == 0:
            return
        current = items.highlighted or 0
        if k in (keymap.UP, "k"):
            items.highlighted = (current - 1) % items.option_count
        elif k in (keymap.DOWN, "j"):
            items.highlighted = (current + 1) % items.option_count
        elif k == keymap.ENTER:
            self.choose(current)
        else:
            self.on_other_key(k, current)


# ── Confirm ───────────────────────────────────────────────────────────


class ConfirmApp(PeerApp):
    """Yes/no question; y/n also work on non-Latin layouts."""

    CANCELLED = {"confirmed": False}

    def __init__(self, tool: str, message: str):
        super().__init__(tool)
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="box"):
            yield Static(Text(self.message, style=style_for(QUESTION_COLOR, bold=True)),
                         id="message")
            yield Static(Text("[y/n]", style=style_for(HELP_GRAY)), id="hints")

    def on_key(self, event):
        event.stop()
        event.prevent_default()
        key = key_from_textual(event)
        if key is None:
            return
        k = keymap.translate(key).value
        if k in ("y", "Y"):
            self.exit({"confirmed": True})
        elif k in ("n", "N", keymap.ESCAPE):
            self.exit({"confirmed": False})


# ── Logo ──────────────────────────────────────────────────────────────


class LogoApp(PeerApp):
    """The tool's ghost for a moment; any key closes it early."""

    CSS = """
    Screen {
        align: center middle;
    }
    #logo {
        width: auto;
        height: auto;
    }
    """

    def __init__(self, tool: str, seconds: float = LOGO_SECONDS):
        super().__init__(tool)
        self.tool = tool
        self.seconds = seconds

    def compose(self) -> ComposeResult:
        figure = "\n".join(render_figure(self.tool))
        yield Static(Text.from_ansi(figure, no_wrap=True), id="logo")

    def on_mount(self):
        self.set_timer(self.seconds, self.action_cancel)

    def on_key(self, event):
        event.stop()
        self.action_cancel()


# ── Project selector ──────────────────────────────────────────────────


class ProjectSelectApp(ListApp):
    TITLE_TEXT = "Select Project"
    CANCELLED = {"selected": False}

    def __init__(self, tool: str, projects: Sequence[Project], home: Optional[str] = None):
        super().__init__(tool)
        self.projects = list(projects)
        self.home = home

    def rows(self) -> List[Text]:
        rows = []
        for project in self.projects:
            row = Text(project.name, style=style_for(self.palette.bright, bold=True))
            row.append("\n")
            row.append(shorten_home_path(project.path, self.home),
                       style=style_for(self.palette.dim))
            rows.append(row)
        return rows

    def choose(self, index: int):
        project = self.projects[index]
        self.exit({"name": project.name, "path": project.path, "selected": True})


# ── AI tool selector ──────────────────────────────────────────────────


class AIToolSelectApp(ListApp):
    """Pick the default AI tool; choosing one that is not installed selects nothing."""

    TITLE_TEXT = "Select AI Tool"
    CANCELLED = {"selected": False}

    def __init__(self, tool: str, tools: Sequence[AITool]):
        super().__init__(tool)
        self.tool = tool
        self.tools = list(tools)

    def initial_index(self) -> int:
        for i, t in enumerate(self.tools):
            if t.name == self.tool:
                return i
        return 0

    def rows(self) -> List[Text]:
        rows = []
        for t in self.tools:
            row = Text(t.label, style=style_for(self.palette.bright if t.installed
                                                else HELP_GRAY, bold=t.installed))
            row.append("\n")
            row.append(t.command, style=style_for(self.palette.dim))
            rows.append(row)
        return rows

    def choose(self, index: int):
        t = self.tools[index]
        if not t.installed:
            self.exit(self.CANCELLED)
            return
        self.exit({"tool": t.name, "command": t.command, "selected": True})


# ── Settings ──────────────────────────────────────────────────────────


class SettingsMenuApp(ListApp):
    TITLE_TEXT = "Settings"
    CANCELLED = {"action": "quit"}

    def rows(self) -> List[Text]:
        rows = []
        for _, title, description in SETTINGS_ITEMS:
            row = Text(title, style=style_for(self.palette.bright, bold=True))
            row.append("\n")
            row.append(description, style=style_for(self.palette.dim))
            rows.append(row)
        return rows

    def choose(self, index: int):
        self.exit({"action": SETTINGS_ITEMS[index][0]})


# ── Multi-select ──────────────────────────────────────────────────────


class MultiSelectApp(ListApp):
    """Checkbox list of AI tools to install.

    Claude and every tool already on PATH start checked.
    """

    TITLE_TEXT = "Select AI Tools"
    HINTS = "↑↓ navigate  Space toggle  ⏎ confirm  Esc cancel"
    CANCELLED = {"confirmed": False}

    def __init__(self, tool: str, tools: Sequence[AITool]):
        super().__init__(tool)
        self.tools = list(tools)
        self.checked = [t.name == "claude" or t.installed for t in self.tools]

    def rows(self) -> List[Text]:
        rows = []
        for t, checked in zip(self.tools, self.checked):
            row = Text("[x] " if checked else "[ ] ")
            row.append(installer_display_name(t.name))
            if t.installed:
                row.append("  ")
                row.append("(installed)", style=style_for(UPDATE_YELLOW))
            rows.append(row)
        return rows

    def selected_tools(self) -> List[str]:
        return [t.name for t, checked in zip(self.tools, self.checked) if checked]

    def on_other_key(self, key: str, index: int):
        if key == " ":
            self.checked[index] = not self.checked[index]
            self.refresh_items()

    def choose(self, index: int):
        selected = self.selected_tools()
        if not selected:
            self.query_one("#error", Static).update(
                Text(f"  {NO_TOOL_SELECTED}", style=style_for(ERROR_RED)))
            return
        self.exit({"tools": selected, "confirmed": True})


# ── Add project ───────────────────────────────────────────────────────


class DirectorySuggester(Suggester):
    """Completes the typed path with the first matching subdirectory."""

    def __init__(self, home: Optional[str] = None):
        super().__init__(use_cache=False, case_sensitive=True)
        self.home = home

    async def get_suggestion(self, value: str) -> Optional[str]:
        for suggestion in path_suggestions(value, self.home):
            if suggestion.startswith(value) and suggestion != value:
                return suggestion
        return None


class AddProjectApp(PeerApp):
    """Ask for a project directory; the project is named after its basename."""

    CANCELLED = {"confirmed": False}

    def __init__(self, tool: str, projects: Sequence[Project] = (),
                 home: Optional[str] = None):
        super().__init__(tool)
        self.projects = list(projects)
        self.home = home

    def compose(self) -> ComposeResult:
        with Vertical(id="box"):
            yield Static(self.title_text("Add Project"), id="title")
            yield Input(placeholder="~/code/my-project", id="path",
                        suggester=DirectorySuggester(self.home))
            yield Static(id="error")
            yield Static(Text("→ complete  ⏎ confirm  Esc cancel", style=style_for(HELP_GRAY)),
                         id="hints")

    def on_mount(self):
        self.query_one("#path", Input).focus()

    def on_input_changed(self, event: Input.Changed):
        self.show_error("")

    def on_input_submitted(self, event: Input.Submitted):
        try:
            path = validate_directory(event.value, self.home)
        except ValueError as e:
            self.show_error(str(e))
            return
        if is_duplicate_project(path, self.projects):
            self.show_error("Project already exists")
            return
        self.exit({"name": os.path.basename(path) or path, "path": path, "confirmed": True})

    def on_key(self, event):
        if event.key == "escape":
            event.stop()
            event.prevent_default()
            self.action_cancel()


def run_screen(app: PeerApp) -> Optional[dict]:
    """Run *app* on the controlling terminal; its answer, or ``CANCELLED``."""
    with controlling_terminal():
        result = app.run()
    if app.return_code:
        raise ScreenFailedError(
            f"{type(app).__name__} stopped with an error (exit status {app.return_code})")
    if result is None:
        result = app.CANCELLED
    logger.debug("%s finished: %r", type(app).__name__, result)
    return result
