"""Main menu state and its transition function.

The menu is an immutable :class:`MenuState` plus :func:`transition`, which
consumes one event (a key, a mouse event, a resize or an animation tick)
and returns the next state. Once a :class:`MenuResult` is stored the menu
has exited and every further event is ignored.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple, Union

from ghost_tab import keymap
from ghost_tab.keymap import Key
from ghost_tab.projects import Project
from ghost_tab.theme import Theme, theme_for_tool

# ── Constants ─────────────────────────────────────────────────────────

ACTIONS: Tuple[str, ...] = ("add-project", "delete-project", "open-once", "plain-terminal")

# Shortcut letter, label for each entry of ACTIONS
ACTION_LABELS: Tuple[Tuple[str, str], ...] = (
    ("A", "Add new project"),
    ("D", "Delete a project"),
    ("O", "Open once"),
    ("P", "Plain terminal"),
)

SELECT_PROJECT = "select-project"
SETTINGS = "settings"
QUIT = "quit"

SHORTCUTS = {
    "a": "add-project",
    "d": "delete-project",
    "o": "open-once",
    "p": "plain-terminal",
    "s": SETTINGS,
}

GHOST_ANIMATED = "animated"
GHOST_STATIC = "static"
GHOST_NONE = "none"
GHOST_DISPLAY_MODES = (GHOST_ANIMATED, GHOST_STATIC, GHOST_NONE)

TICK_SECONDS = 0.2
BOB_PERIOD_TICKS = 12           # ~2.4s per bob cycle
SLEEP_AFTER_TICKS = 600         # 120s without a key press

# Box rows above the first item: top border, title, separator, blank row
ITEMS_START_ROW = 4

# ── Events ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Click:
    """Left click on row *row* of the menu box (0 is the top border)."""

    row: int


@dataclass(frozen=True)
class MouseMove:
    pass


Event = Union[Key, Resize, Tick, Click, MouseMove]

# ── Result ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MenuResult:
    """What the user chose; printed for the shell wrapper as one JSON line."""

    action: str
    ai_tool: str
    name: Optional[str] = None
    path: Optional[str] = None

    def to_dict(self) -> dict:
        d = {"action": self.action}
        if self.name is not None:
            d["name"] = self.name
        if self.path is not None:
            d["path"] = self.path
        d["ai_tool"] = self.ai_tool
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))


# ── State ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MenuState:
    projects: Tuple[Project, ...] = ()
    tools: Tuple[str, ...] = ("claude",)
    selected_tool_index: int = 0
    selected_item: int = 0
    ghost_display: str = GHOST_ANIMATED
    tab_title: str = "full"
    update_version: str = ""
    terminal_width: int = 0
    terminal_height: int = 0
    tick_count: int = 0
    idle_ticks: int = 0
    sleeping: bool = False
    result: Optional[MenuResult] = field(default=None)

    @property
    def total_items(self) -> int:
        return len(self.projects) + len(ACTIONS)

    @property
    def current_tool(self) -> str:
        if not self.tools:
            return ""
        return self.tools[self.selected_tool_index]

    @property
    def theme(self) -> Theme:
        return theme_for_tool(self.current_tool)

    @property
    def exited(self) -> bool:
        return self.result is not None

    @property
    def bob_offset(self) -> int:
        """1 during the lower half of the bob cycle, else 0."""
        if self.ghost_display != GHOST_ANIMATED:
            return 0
        return 1 if self.tick_count % BOB_PERIOD_TICKS >= BOB_PERIOD_TICKS // 2 else 0


def new_menu(projects: Sequence[Project], tools: Sequence[str], current_tool: str = "claude",
             ghost_display: str = GHOST_ANIMATED, tab_title: str = "full",
             update_version: str = "") -> MenuState:
    """Initial state; the current tool is preselected when it is offered."""
    tools = tuple(tools)
    try:
        tool_index = tools.index(current_tool)
    except ValueError:
        tool_index = 0
    return MenuState(
        projects=tuple(projects),
        tools=tools,
        selected_tool_index=tool_index,
        ghost_display=ghost_display,
        tab_title=tab_title,
        update_version=update_version,
    )


# ── Transitions ───────────────────────────────────────────────────────


def move(state: MenuState, delta: int) -> MenuState:
    return replace(state, selected_item=(state.selected_item + delta) % state.total_items)


def cycle_tool(state: MenuState, delta: int) -> MenuState:
    n = len(state.tools)
    if n <= 1:
        return state
    return replace(state, selected_tool_index=(state.selected_tool_index + delta) % n)


def jump_to(state: MenuState, number: int) -> MenuState:
    """Select project *number* (1-based); out-of-range numbers are ignored."""
    if 1 <= number <= len(state.projects):
        return replace(state, selected_item=number - 1)
    return state


def finish(state: MenuState, action: str) -> MenuState:
    return replace(state, result=MenuResult(action=action, ai_tool=state.current_tool))


def select_current(state: MenuState) -> MenuState:
    idx = state.selected_item
    if idx < len(state.projects):
        project = state.projects[idx]
        return replace(state, result=MenuResult(
            action=SELECT_PROJECT, ai_tool=state.current_tool,
            name=project.name, path=project.path,
        ))
    return finish(state, ACTIONS[idx - len(state.projects)])


def row_to_item(state: MenuState, row: int) -> Optional[int]:
    """Item drawn on box row *row*, or None for borders, title and help.

    Projects take two rows each (name and path), actions one. The update
    banner and the separator between projects and actions shift the rows
    below them.
    """
    start = ITEMS_START_ROW + (1 if state.update_version else 0)
    offset = row - start
    if offset < 0:
        return None
    n = len(state.projects)
    if offset < 2 * n:
        return offset // 2
    offset -= 2 * n
    if n:
        offset -= 1
    if 0 <= offset < len(ACTIONS):
        return n + offset
    return None


def _on_key(state: MenuState, key: Key) -> MenuState:
    key = keymap.translate(key)
    state = replace(state, idle_ticks=0, sleeping=False)
    k = key.value

    if k in (keymap.UP, "k"):
        return move(state, -1)
    if k in (keymap.DOWN, "j"):
        return move(state, 1)
    if k == keymap.LEFT:
        return cycle_tool(state, -1)
    if k == keymap.RIGHT:
        return cycle_tool(state, 1)
    if k == keymap.ENTER:
        return select_current(state)
    if k in (keymap.ESCAPE, keymap.INTERRUPT):
        return finish(state, QUIT)
    if key.is_rune:
        if "1" <= k <= "9":
            return jump_to(state, int(k))
        action = SHORTCUTS.get(k.lower())
        if action:
            return finish(state, action)
    return state


def _on_click(state: MenuState, click: Click) -> MenuState:
    state = replace(state, idle_ticks=0, sleeping=False)
    item = row_to_item(state, click.row)
    if item is None:
        return state
    # a click on the selected item activates it
    if item == state.selected_item:
        return select_current(state)
    return replace(state, selected_item=item)


def _on_tick(state: MenuState) -> MenuState:
    if state.ghost_display != GHOST_ANIMATED:
        return state
    idle = state.idle_ticks + 1
    return replace(
        state,
        tick_count=state.tick_count + 1,
        idle_ticks=idle,
        sleeping=state.sleeping or idle >= SLEEP_AFTER_TICKS,
    )


def transition(state: MenuState, event: Event) -> MenuState:
    """Apply one event. Total: unknown events and keys leave the state as is."""
    if state.exited:
        return state
    if isinstance(event, Key):
        return _on_key(state, event)
    if isinstance(event, Resize):
        return replace(state, terminal_width=event.width, terminal_height=event.height)
    if isinstance(event, Tick):
        return _on_tick(state)
    if isinstance(event, Click):
        return _on_click(state, event)
    if isinstance(event, MouseMove):
        if state.idle_ticks or state.sleeping:
            return replace(state, idle_ticks=0, sleeping=False)
        return state
    return state
