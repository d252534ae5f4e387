"""Render a :class:`~ghost_tab.menu.MenuState` as styled terminal text."""

from typing import List, Optional

from ghost_tab.figures import render_figure, render_zzz
from ghost_tab.layout import (
    ABOVE, FIGURE_WIDTH, GUTTER, HIDDEN, MENU_INNER_WIDTH, MENU_WIDTH, SIDE, calculate_layout,
)
from ghost_tab.menu import ACTION_LABELS, ACTIONS, GHOST_ANIMATED, GHOST_NONE, MenuState
from ghost_tab.projects import shorten_home_path
from ghost_tab.text import pad_to, truncate_end, truncate_middle, visible_width
from ghost_tab.theme import HELP_GRAY, UPDATE_YELLOW, paint
from ghost_tab.tools import display_name

EMBLEM = "⬡  Ghost Tab"
MARKER = "▎"
HELP_MULTI_TOOL = "↑↓ navigate ←→ AI tool S settings ⏎ select"
HELP_SINGLE_TOOL = "↑↓ navigate S settings ⏎ select"
UPDATE_MESSAGE = "Update available: {version} (brew upgrade ghost-tab)"
UPDATE_MESSAGE_SHORT = "Update available: {version}"

NAME_INDENT = "    "
PATH_INDENT = "       "
SELECTED_INDENT = "  "


class _Box:
    """Border pieces and row builder for one render pass."""

    def __init__(self, border_color: int):
        rule = "─" * MENU_INNER_WIDTH
        self.top = paint("┌" + rule + "┐", border_color)
        self.separator = paint("├" + rule + "┤", border_color)
        self.bottom = paint("└" + rule + "┘", border_color)
        self.side = paint("│", border_color)

    def row(self, content: str = "") -> str:
        return self.side + pad_to(content, MENU_INNER_WIDTH) + self.side


def _title_row(state: MenuState, box: _Box) -> str:
    theme = state.theme
    title = paint(EMBLEM, theme.primary, bold=True)
    multi = len(state.tools) > 1
    # one column of margin each side, at least one column between title and tool
    room = MENU_INNER_WIDTH - 3 - visible_width(EMBLEM) - (5 if multi else 0)
    name = truncate_end(display_name(state.current_tool), max(room, 0))
    if multi:
        tool = paint(" ◂ ", theme.dim) + paint(name, theme.primary) + paint(" ▸", theme.dim)
    else:
        tool = paint(name, theme.primary)
    gap = MENU_INNER_WIDTH - 1 - visible_width(title) - visible_width(tool) - 1
    return box.row(" " + title + " " * max(gap, 0) + tool + " ")


def _update_row(state: MenuState, box: _Box) -> str:
    room = MENU_INNER_WIDTH - 2
    message = UPDATE_MESSAGE.format(version=state.update_version)
    if visible_width(message) > room:
        message = UPDATE_MESSAGE_SHORT.format(version=state.update_version)
    message = truncate_end(message, room)
    return box.row("  " + paint(message, UPDATE_YELLOW))


def _project_rows(state: MenuState, box: _Box, home: Optional[str]) -> List[str]:
    theme = state.theme
    rows = []
    for i, project in enumerate(state.projects):
        num = str(i + 1)
        path = truncate_middle(shorten_home_path(project.path, home),
                               MENU_INNER_WIDTH - len(PATH_INDENT))
        name = truncate_middle(project.name, MENU_INNER_WIDTH - len(NAME_INDENT) - len(num) - 3)
        if state.selected_item == i:
            marker = paint(MARKER, theme.bright, bold=True)
            rows.append(box.row(SELECTED_INDENT + marker + " "
                                + paint(num + "  " + name, theme.bright, bold=True)))
            rows.append(box.row(PATH_INDENT + paint(path, theme.primary)))
        else:
            rows.append(box.row(NAME_INDENT + paint(num, theme.dim) + "  " + name))
            rows.append(box.row(PATH_INDENT + paint(path, theme.dim)))
    return rows


def _action_rows(state: MenuState, box: _Box) -> List[str]:
    theme = state.theme
    offset = len(state.projects)
    rows = []
    for i, (shortcut, label) in enumerate(ACTION_LABELS):
        if state.selected_item == offset + i:
            marker = paint(MARKER, theme.bright, bold=True)
            rows.append(box.row(SELECTED_INDENT + marker + " "
                                + paint(shortcut + "  " + label, theme.bright, bold=True)))
        else:
            rows.append(box.row(NAME_INDENT + paint(shortcut, theme.dim, bold=True) + "  " + label))
    return rows


def render_menu_box(state: MenuState, home: Optional[str] = None) -> List[str]:
    """Rows of the bordered menu, each exactly ``MENU_WIDTH`` columns wide."""
    box = _Box(state.theme.dim)
    lines = [box.top, _title_row(state, box), box.separator]
    if state.update_version:
        lines.append(_update_row(state, box))
    lines.append(box.row())
    lines.extend(_project_rows(state, box, home))
    if state.projects:
        lines.append(box.separator)
    lines.extend(_action_rows(state, box))
    lines.append(box.separator)
    help_text = HELP_MULTI_TOOL if len(state.tools) > 1 else HELP_SINGLE_TOOL
    lines.append(box.row(" " + paint(help_text, HELP_GRAY)))
    lines.append(box.bottom)
    return lines


def render_figure_column(state: MenuState) -> List[str]:
    """Ghost lines including the sleep letters and the bob offset."""
    tool = state.current_tool
    lines = []
    if state.sleeping:
        lines.extend(render_zzz(tool, state.tick_count))
    lines.extend(render_figure(tool, state.sleeping))
    blank = " " * FIGURE_WIDTH
    if state.ghost_display == GHOST_ANIMATED:
        if state.bob_offset:
            lines.insert(0, blank)
        else:
            lines.append(blank)
    return lines


def figure_position(state: MenuState) -> str:
    if state.ghost_display == GHOST_NONE:
        return HIDDEN
    layout = calculate_layout(state.terminal_width, state.terminal_height,
                              len(state.projects), len(ACTIONS))
    return layout.figure_position


def menu_top(state: MenuState) -> int:
    """Frame row on which the menu box starts."""
    if figure_position(state) == ABOVE:
        return len(render_figure_column(state)) + 1
    return 0


def render(state: MenuState, home: Optional[str] = None) -> str:
    """The full frame: menu box joined with the ghost where it fits."""
    menu = render_menu_box(state, home)
    position = figure_position(state)

    if position == SIDE:
        figure = render_figure_column(state)
        gutter = " " * GUTTER
        height = max(len(menu), len(figure))
        lines = []
        for i in range(height):
            left = menu[i] if i < len(menu) else " " * MENU_WIDTH
            right = figure[i] if i < len(figure) else " " * FIGURE_WIDTH
            lines.append(left + gutter + right)
        return "\n".join(lines)

    if position == ABOVE:
        indent = (MENU_WIDTH - FIGURE_WIDTH) // 2
        trail = MENU_WIDTH - FIGURE_WIDTH - indent
        figure = [" " * indent + line + " " * trail for line in render_figure_column(state)]
        return "\n".join(figure + [" " * MENU_WIDTH] + menu)

    return "\n".join(menu)
