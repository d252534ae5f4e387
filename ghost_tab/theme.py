"""Per-tool color palettes and the helpers that turn them into styles."""

from dataclasses import dataclass
from functools import lru_cache

from rich.color import Color, ColorSystem
from rich.style import Style
from textual.theme import Theme as TextualTheme

DEFAULT_TOOL = "claude"

# Fixed colors that do not follow the tool palette
HELP_GRAY = 241
UPDATE_YELLOW = 220
STATE_GREEN = 114


# ── Palettes ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Theme:
    """8-bit palette indices for every color role of one AI tool."""

    name: str
    primary: int
    dim: int
    bright: int
    accent: int
    cap: int
    dark_feet: int
    eye_white: int
    eye_pupil: int
    sleep_primary: int
    sleep_accent: int
    sleep_dim: int
    sleep_dark_feet: int
    sleep_cap: int


THEMES = {
    "claude": Theme(
        name="claude",
        primary=209, dim=166, bright=208, accent=220, cap=223,
        dark_feet=166, eye_white=255, eye_pupil=232,
        sleep_primary=166, sleep_accent=178, sleep_dim=166,
        sleep_dark_feet=94, sleep_cap=180,
    ),
    "codex": Theme(
        name="codex",
        primary=114, dim=71, bright=113, accent=78, cap=157,
        dark_feet=71, eye_white=255, eye_pupil=232,
        sleep_primary=71, sleep_accent=65, sleep_dim=71,
        sleep_dark_feet=58, sleep_cap=114,
    ),
    "copilot": Theme(
        name="copilot",
        primary=141, dim=98, bright=140, accent=134, cap=183,
        dark_feet=98, eye_white=255, eye_pupil=232,
        sleep_primary=98, sleep_accent=96, sleep_dim=98,
        sleep_dark_feet=60, sleep_cap=140,
    ),
    "opencode": Theme(
        name="opencode",
        primary=250, dim=244, bright=255, accent=240, cap=252,
        dark_feet=240, eye_white=255, eye_pupil=238,
        sleep_primary=244, sleep_accent=234, sleep_dim=236,
        sleep_dark_feet=232, sleep_cap=242,
    ),
}


def theme_for_tool(tool: str) -> Theme:
    """Return the palette for *tool*; unknown tools get the claude palette."""
    return THEMES.get(tool, THEMES[DEFAULT_TOOL])


# ── Styling ───────────────────────────────────────────────────────────


@lru_cache(maxsize=None)
def style_for(color: int, bold: bool = False, dim: bool = False) -> Style:
    return Style(color=Color.from_ansi(color), bold=bold or None, dim=dim or None)


def paint(text: str, color: int, bold: bool = False, dim: bool = False) -> str:
    """Wrap *text* in the 256-color SGR escape for *color*.

    Empty text stays empty so padding math never sees a stray escape.
    """
    return style_for(color, bold, dim).render(text, color_system=ColorSystem.EIGHT_BIT)


def hex_color(color: int) -> str:
    """Approximate an 8-bit palette index as a ``#rrggbb`` string."""
    return Color.from_ansi(color).get_truecolor().hex


def textual_theme_name(tool: str) -> str:
    return f"ghost-{theme_for_tool(tool).name}"


def textual_theme(tool: str) -> TextualTheme:
    """Textual theme for the screens, derived from the tool palette."""
    t = theme_for_tool(tool)
    return TextualTheme(
        name=textual_theme_name(tool),
        primary=hex_color(t.primary),
        secondary=hex_color(t.dim),
        accent=hex_color(t.accent),
        warning=hex_color(UPDATE_YELLOW),
        success=hex_color(STATE_GREEN),
        dark=True,
        variables={
            "bright-color": hex_color(t.bright),
            "dim-color": hex_color(HELP_GRAY),
        },
    )
