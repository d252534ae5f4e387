"""Width-aware string helpers for pre-styled terminal text."""

import re

from rich.cells import cell_len

_ANSI_RE = re.compile(r'\x1b\[[0-9;]*[a-zA-Z]|\x1b\][^\x07]*\x07|\x1b[()][0-9A-Z]')

ELLIPSIS = "…"


def strip_ansi(text: str) -> str:
    """Strip ANSI escape sequences from text."""
    return _ANSI_RE.sub('', text)


def visible_width(text: str) -> int:
    """Terminal columns *text* occupies; escapes count zero, wide glyphs two."""
    return cell_len(strip_ansi(text))


def pad_to(text: str, width: int) -> str:
    """Right-pad styled *text* with spaces up to *width* visible columns."""
    return text + " " * max(0, width - visible_width(text))


def truncate_end(text: str, max_width: int) -> str:
    """Cut plain *text* to *max_width* columns, ending in an ellipsis."""
    if cell_len(text) <= max_width:
        return text
    if max_width <= 1:
        return ELLIPSIS if max_width == 1 else ""
    out = ""
    for ch in text:
        if cell_len(out + ch) > max_width - 1:
            break
        out += ch
    return out + ELLIPSIS


def truncate_middle(text: str, max_width: int) -> str:
    """Replace the middle of plain *text* with an ellipsis to fit *max_width*."""
    if cell_len(text) <= max_width:
        return text
    if max_width <= 1:
        return ELLIPSIS if max_width == 1 else ""
    budget = max_width - 1
    left_budget = (budget + 1) // 2
    right_budget = budget - left_budget
    left = ""
    for ch in text:
        if cell_len(left + ch) > left_budget:
            break
        left += ch
    right = ""
    for ch in reversed(text):
        if cell_len(ch + right) > right_budget:
            break
        right = ch + right
    return left + ELLIPSIS + right
