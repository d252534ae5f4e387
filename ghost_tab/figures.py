"""Ghost mascots, one per AI tool, awake and asleep.

Every figure is a table of 15 rows; each row is a sequence of
``(role, text)`` segments where *role* names a :class:`~ghost_tab.theme.Theme`
field (or is empty for uncolored padding). Each row is exactly 28 columns.
"""

from typing import Dict, List, Sequence, Tuple

from ghost_tab.theme import DEFAULT_TOOL, Theme, paint, theme_for_tool

Segment = Tuple[str, str]
Row = Tuple[Segment, ...]

FULL = "█"
UPPER = "▀"
LOWER = "▄"
LID = "▬"


def _pad(n: int) -> Segment:
    return ("", " " * n)


def _band(role: str) -> Row:
    return (_pad(2), (role, FULL * 24), _pad(2))


def _crown(cap: str, body: str) -> List[Row]:
    return [
        (_pad(7), (cap, LOWER * 14), _pad(7)),
        (_pad(5), (cap, LOWER), (body, FULL * 16), (cap, LOWER), _pad(5)),
        (_pad(4), (cap, LOWER), (body, FULL * 18), (cap, LOWER), _pad(4)),
        (_pad(3), (body, FULL * 22), _pad(3)),
        (_pad(2), (body, FULL * 24), _pad(2)),
    ]


def _feet(role: str) -> List[Row]:
    return [
        (_pad(2), (role, "██"), _pad(1), (role, FULL * 5), _pad(1),
         (role, FULL * 6), _pad(1), (role, FULL * 5), _pad(1), (role, "██"), _pad(2)),
        (_pad(2), (role, FULL), _pad(2), (role, "▀████▀"), _pad(1),
         (role, "████"), _pad(1), (role, "▀████▀"), _pad(2), (role, FULL), _pad(2)),
    ]


def _eyes(body: str, white: str, pupil: str) -> Row:
    return (_pad(2), (body, FULL * 4), (white, FULL * 3), (pupil, FULL * 2),
            (body, FULL * 6), (white, FULL * 3), (pupil, FULL * 2),
            (body, FULL * 4), _pad(2))


def _closed_eyes(body: str) -> Row:
    return (_pad(2), (body, FULL * 4), ("eye_pupil", LID * 5), (body, FULL * 6),
            ("eye_pupil", LID * 5), (body, FULL * 4), _pad(2))


def _sleeping_body() -> List[Row]:
    return (_crown("sleep_cap", "sleep_primary") + [_closed_eyes("sleep_dim")]
            + [_band("sleep_dim")] * 6
            + [_band("sleep_dark_feet")] + _feet("sleep_dark_feet"))


# ── Claude ────────────────────────────────────────────────────────────

CLAUDE_AWAKE: List[Row] = _crown("cap", "primary") + [
    _eyes("primary", "eye_white", "eye_pupil"),
    _eyes("primary", "eye_white", "eye_pupil"),
    _band("bright"),
    (_pad(2), ("bright", FULL * 9), ("accent", FULL * 2), ("bright", FULL * 13), _pad(2)),
    (_pad(2), ("bright", FULL * 8), ("accent", "█▀▀█"), ("bright", FULL * 12), _pad(2)),
    (_pad(2), ("bright", FULL * 8), ("accent", "█▄▄█"), ("bright", FULL * 12), _pad(2)),
    (_pad(2), ("bright", FULL * 9), ("accent", FULL * 2), ("bright", FULL * 13), _pad(2)),
    _band("dark_feet"),
] + _feet("dark_feet")

CLAUDE_ASLEEP: List[Row] = _sleeping_body()

# ── Codex ─────────────────────────────────────────────────────────────

CODEX_AWAKE: List[Row] = _crown("cap", "primary") + [
    _eyes("primary", "eye_white", "eye_pupil"),
    _eyes("primary", "eye_white", "eye_pupil"),
    _band("bright"),
    (_pad(2), ("bright", FULL * 4), ("accent", "▄▀▀▀▄"), ("bright", FULL * 6),
     ("accent", "▄▀▀▀▄"), ("bright", FULL * 4), _pad(2)),
    (_pad(2), ("bright", FULL * 4), ("accent", FULL), ("bright", FULL * 3), ("accent", FULL),
     ("bright", FULL * 6), ("accent", FULL), ("bright", FULL * 3), ("accent", FULL),
     ("bright", FULL * 4), _pad(2)),
    (_pad(2), ("bright", FULL * 4), ("accent", "▀▄▄▄▀"), ("bright", FULL * 6),
     ("accent", "▀▄▄▄▀"), ("bright", FULL * 4), _pad(2)),
    _band("bright"),
    _band("dark_feet"),
] + _feet("dark_feet")

CODEX_ASLEEP: List[Row] = _sleeping_body()

# ── Copilot ───────────────────────────────────────────────────────────


def _goggles(body: str, rim: str, lens: Sequence[Segment]) -> List[Row]:
    return [
        (_pad(2), (body, FULL * 2), (rim, LOWER * 6), (body, FULL * 8),
         (rim, LOWER * 6), (body, FULL * 2), _pad(2)),
        (_pad(2), (body, FULL * 2), (rim, "▌"), *lens, (rim, "▐"), (body, FULL * 6),
         (rim, "▌"), *lens, (rim, "▐"), (body, FULL * 2), _pad(2)),
        (_pad(2), (body, FULL * 2), (rim, UPPER * 6), (body, FULL * 8),
         (rim, UPPER * 6), (body, FULL * 2), _pad(2)),
    ]


COPILOT_AWAKE: List[Row] = (
    _crown("cap", "primary")
    + _goggles("primary", "accent",
               (("eye_white", "██"), ("eye_pupil", FULL), ("eye_white", "██")))
    + [_band("bright")] * 4
    + [_band("dark_feet")]
    + _feet("dark_feet")
)

COPILOT_ASLEEP: List[Row] = (
    _crown("sleep_cap", "sleep_primary")
    + _goggles("sleep_primary", "sleep_accent", (("eye_pupil", LID * 5),))
    + [_band("sleep_dim")] * 4
    + [_band("sleep_dark_feet")]
    + _feet("sleep_dark_feet")
)

# ── OpenCode ──────────────────────────────────────────────────────────

OPENCODE_AWAKE: List[Row] = _crown("cap", "bright") + [
    _eyes("primary", "bright", "eye_pupil"),
    _eyes("primary", "bright", "eye_pupil"),
    _band("dim"),
    _band("dim"),
    (_pad(2), ("dim", FULL * 8), ("dark_feet", "█▀▀█"), ("dim", FULL * 12), _pad(2)),
    _band("dim"),
    _band("accent"),
    _band("accent"),
] + _feet("dark_feet")

OPENCODE_ASLEEP: List[Row] = (
    _crown("sleep_cap", "sleep_primary")
    + [_closed_eyes("sleep_dim")]
    + [_band("sleep_dim")] * 5
    + [_band("sleep_accent")] * 2
    + _feet("sleep_dark_feet")
)

FIGURES: Dict[str, Tuple[List[Row], List[Row]]] = {
    "claude": (CLAUDE_AWAKE, CLAUDE_ASLEEP),
    "codex": (CODEX_AWAKE, CODEX_ASLEEP),
    "copilot": (COPILOT_AWAKE, COPILOT_ASLEEP),
    "opencode": (OPENCODE_AWAKE, OPENCODE_ASLEEP),
}

# ── Rendering ─────────────────────────────────────────────────────────


def _render_row(row: Row, theme: Theme) -> str:
    return "".join(text if not role else paint(text, getattr(theme, role))
                   for role, text in row)


def render_figure(tool: str, sleeping: bool = False) -> List[str]:
    """Styled lines of the ghost for *tool*; unknown tools get claude's."""
    awake, asleep = FIGURES.get(tool, FIGURES[DEFAULT_TOOL])
    theme = theme_for_tool(tool)
    return [_render_row(row, theme) for row in (asleep if sleeping else awake)]


# Zzz frames: column of each of the three letters, top to bottom
ZZZ_FRAMES = (
    (8, 6, 4),
    (7, 5, 3),
    (6, 4, 2),
    (7, 5, 3),
)
ZZZ_GLYPHS = ("z", "Z", "Z")
ZZZ_OFFSET = 18


def render_zzz(tool: str, frame: int) -> List[str]:
    """Three floating sleep letters, right-leaning, padded to figure width."""
    color = theme_for_tool(tool).sleep_accent
    columns = ZZZ_FRAMES[frame % len(ZZZ_FRAMES)]
    lines = []
    for i, (col, glyph) in enumerate(zip(columns, ZZZ_GLYPHS)):
        left = ZZZ_OFFSET + col
        styled = paint(glyph, color, dim=i < 2)
        lines.append(" " * left + styled + " " * (28 - left - 1))
    return lines
