import pytest

from ghost_tab import tools
from ghost_tab.theme import THEMES, textual_theme, theme_for_tool
from ghost_tab.tools import AITool, detect_ai_tools, display_name, installer_display_name, parse_tool_list


@pytest.mark.parametrize("raw, expected", [
    ("claude", ["claude"]),
    ("claude,codex", ["claude", "codex"]),
    (" claude , codex ,, ", ["claude", "codex"]),
    ("", []),
    (" , ", []),
])
def test_parse_tool_list(raw, expected):
    assert parse_tool_list(raw) == expected


def test_display_names():
    assert display_name("claude") == "Claude Code"
    assert display_name("opencode") == "OpenCode"
    assert display_name("aider") == "aider"
    assert installer_display_name("codex") == "Codex CLI (OpenAI)"
    assert installer_display_name("claude") == "Claude Code"


def test_detect_ai_tools(monkeypatch):
    monkeypatch.setattr(tools.shutil, "which",
                        lambda cmd: "/usr/bin/codex" if cmd == "codex" else None)
    found = detect_ai_tools()
    assert [t.name for t in found] == ["claude", "codex", "copilot", "opencode"]
    assert [t.installed for t in found] == [False, True, False, False]
    assert found[1].label == "Codex CLI (installed)"


def test_label_not_installed():
    assert AITool("claude", "claude", False).label == "Claude Code (not installed)"


def test_unknown_tool_uses_claude_palette():
    assert theme_for_tool("aider") is THEMES["claude"]


@pytest.mark.parametrize("tool", sorted(THEMES))
def test_textual_theme(tool):
    theme = textual_theme(tool)
    assert theme.name == f"ghost-{tool}"
    assert theme.primary.startswith("#")
