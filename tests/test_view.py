import pytest

from ghost_tab import keymap
from ghost_tab.figures import render_figure
from ghost_tab.keymap import Key
from ghost_tab.layout import MENU_WIDTH
from ghost_tab.menu import GHOST_ANIMATED, GHOST_STATIC, Resize, Tick, new_menu, transition
from ghost_tab.projects import Project
from ghost_tab.text import strip_ansi, visible_width
from ghost_tab.view import (
    HELP_SINGLE_TOOL, figure_position, menu_top, render, render_figure_column, render_menu_box,
)

ESC = "\x1b["
RESET = "\x1b[0m"
DIM = ESC + "38;5;166m"        # claude dim, also the border
B = DIM + "│" + RESET

MENU_GOLDEN = [
    DIM + "┌" + "─" * 46 + "┐" + RESET,
    B + " " + ESC + "1;38;5;209m⬡  Ghost Tab" + RESET + " " * 16
    + DIM + " ◂ " + RESET + ESC + "38;5;209mClaude Code" + RESET + DIM + " ▸" + RESET + " " + B,
    DIM + "├" + "─" * 46 + "┤" + RESET,
    B + " " * 46 + B,
    B + "  " + ESC + "1;38;5;208m▎" + RESET + " " + ESC + "1;38;5;208m1  alpha" + RESET
    + " " * 34 + B,
    B + "       " + ESC + "38;5;209m/p/a" + RESET + " " * 35 + B,
    B + "    " + DIM + "2" + RESET + "  beta" + " " * 35 + B,
    B + "       " + DIM + "/p/b" + RESET + " " * 35 + B,
    DIM + "├" + "─" * 46 + "┤" + RESET,
    B + "    " + ESC + "1;38;5;166mA" + RESET + "  Add new project" + " " * 24 + B,
    B + "    " + ESC + "1;38;5;166mD" + RESET + "  Delete a project" + " " * 23 + B,
    B + "    " + ESC + "1;38;5;166mO" + RESET + "  Open once" + " " * 30 + B,
    B + "    " + ESC + "1;38;5;166mP" + RESET + "  Plain terminal" + " " * 25 + B,
    DIM + "├" + "─" * 46 + "┤" + RESET,
    B + " " + ESC + "38;5;241m↑↓ navigate ←→ AI tool S settings ⏎ select" + RESET + "   " + B,
    DIM + "└" + "─" * 46 + "┘" + RESET,
]

FIGURE_TOP_ROW = "       " + ESC + "38;5;223m" + "▄" * 14 + RESET + "       "


def sized(state, width, height):
    return transition(state, Resize(width, height))


class TestGoldens:
    """Complete frames for each figure placement"""

    def test_hidden(self, menu):
        state = sized(menu, 60, 24)
        assert figure_position(state) == "hidden"
        assert render(state, home="/home/u") == "\n".join(MENU_GOLDEN)

    def test_side(self, two_projects):
        state = new_menu(two_projects, ["claude", "codex"], ghost_display=GHOST_STATIC)
        state = sized(state, 100, 30)
        assert figure_position(state) == "side"
        figure = render_figure("claude")
        assert figure[0] == FIGURE_TOP_ROW
        expected = [MENU_GOLDEN[i] + "   " + figure[i] for i in range(15)]
        expected.append(MENU_GOLDEN[15] + "   " + " " * 28)
        assert render(state, home="/home/u") == "\n".join(expected)

    def test_above(self, two_projects):
        state = new_menu(two_projects, ["claude", "codex"], ghost_display=GHOST_STATIC)
        state = sized(state, 60, 40)
        assert figure_position(state) == "above"
        expected = [" " * 10 + line + " " * 10 for line in render_figure("claude")]
        expected.append(" " * 48)
        expected.extend(MENU_GOLDEN)
        assert render(state, home="/home/u") == "\n".join(expected)

    def test_no_ghost_is_always_hidden(self, menu):
        assert figure_position(sized(menu, 200, 80)) == "hidden"


def assert_rows_fit(state, home=None):
    for row in render_menu_box(state, home):
        assert visible_width(row) == MENU_WIDTH, strip_ansi(row)


class TestMenuBox:
    def test_every_row_fits_for_every_selection(self, menu):
        state = menu
        for _ in range(state.total_items):
            assert_rows_fit(state)
            state = transition(state, Key(keymap.DOWN))

    def test_long_names_and_paths_truncated(self):
        projects = [
            Project("a-really-long-project-name-that-goes-on-and-on", "/very/" + "deep/" * 20),
            Project("名前の長いプロジェクト名前の長いプロジェクト", "/p/日本語/" * 6),
            Project("x" * 100, "/"),
        ]
        state = new_menu(projects, ["claude", "codex"])
        for _ in range(state.total_items):
            assert_rows_fit(state)
            state = transition(state, Key(keymap.DOWN))
        text = strip_ansi("\n".join(render_menu_box(state)))
        assert "…" in text

    def test_many_projects_numbered(self):
        projects = [Project(f"p{i}", f"/p/{i}") for i in range(12)]
        state = new_menu(projects, ["claude"])
        assert_rows_fit(state)
        assert "12  p11" in strip_ansi("\n".join(render_menu_box(state)))

    def test_no_projects_has_no_project_separator(self):
        rows = render_menu_box(new_menu([], ["claude"]))
        assert len(rows) == 7 + 4
        assert_rows_fit(new_menu([], ["claude"]))

    def test_single_tool_help_and_title(self, two_projects):
        rows = [strip_ansi(r) for r in render_menu_box(new_menu(two_projects, ["codex"],
                                                                current_tool="codex"))]
        assert HELP_SINGLE_TOOL in rows[-2]
        assert "Codex CLI" in rows[1]
        assert "◂" not in rows[1]

    def test_unknown_tool_shows_token(self, two_projects):
        rows = render_menu_box(new_menu(two_projects, ["aider", "claude"], current_tool="aider"))
        assert "aider" in strip_ansi(rows[1])

    def test_update_banner(self, two_projects):
        state = new_menu(two_projects, ["claude"], update_version="2")
        rows = render_menu_box(state)
        assert strip_ansi(rows[3]).strip("│ ") == "Update available: 2 (brew upgrade ghost-tab)"
        assert ESC + "38;5;220m" in rows[3]
        assert len(rows) == 17
        assert_rows_fit(state)

    def test_update_banner_drops_hint_when_narrow(self, two_projects):
        rows = render_menu_box(new_menu(two_projects, ["claude"], update_version="1.2.3"))
        assert strip_ansi(rows[3]).strip("│ ") == "Update available: 1.2.3"

    def test_long_update_version_truncated(self, two_projects):
        state = new_menu(two_projects, ["claude"], update_version="9" * 80)
        assert_rows_fit(state)

    def test_home_shortened(self):
        state = new_menu([Project("proj", "/home/u/code/proj"), Project("other", "/home/user2")],
                         ["claude"])
        text = strip_ansi("\n".join(render_menu_box(state, home="/home/u")))
        assert "~/code/proj" in text
        assert "/home/user2" in text

    def test_theme_follows_tool(self, menu):
        codex = transition(menu, Key(keymap.RIGHT))
        assert render_menu_box(codex)[0].startswith(ESC + "38;5;71m")


class TestFigureColumn:
    def test_static(self, menu):
        state = new_menu(menu.projects, menu.tools, ghost_display=GHOST_STATIC)
        assert render_figure_column(state) == render_figure("claude")

    def test_animated_bob(self, menu):
        state = new_menu(menu.projects, menu.tools, ghost_display=GHOST_ANIMATED)
        up = render_figure_column(state)
        assert up[:-1] == render_figure("claude") and up[-1] == " " * 28
        for _ in range(6):
            state = transition(state, Tick())
        down = render_figure_column(state)
        assert down[0] == " " * 28 and down[1:] == render_figure("claude")

    def test_sleeping_adds_zzz(self, menu):
        state = new_menu(menu.projects, menu.tools, ghost_display=GHOST_ANIMATED)
        for _ in range(600):
            state = transition(state, Tick())
        lines = render_figure_column(state)
        assert len(lines) == 3 + 15 + 1
        assert render_figure("claude", sleeping=True)[0] in lines

    @pytest.mark.parametrize("width, height", [(0, 0), (10, 5), (82, 24), (200, 100)])
    def test_render_rows_uniform(self, menu, width, height):
        state = new_menu(menu.projects, menu.tools, ghost_display=GHOST_ANIMATED)
        frame = render(sized(state, width, height))
        widths = {visible_width(line) for line in frame.split("\n")}
        assert len(widths) == 1


class TestMenuTop:
    def test_box_first_beside_or_alone(self, menu):
        static = new_menu(menu.projects, menu.tools, ghost_display=GHOST_STATIC)
        assert menu_top(sized(static, 100, 30)) == 0
        assert menu_top(sized(menu, 60, 40)) == 0

    def test_box_below_figure(self, menu):
        static = sized(new_menu(menu.projects, menu.tools, ghost_display=GHOST_STATIC), 60, 40)
        top = menu_top(static)
        assert top == 15 + 1
        rows = render(static).split("\n")
        assert rows[top] == render_menu_box(static)[0]
