"""Known AI coding assistants and their install status."""

import shutil
from dataclasses import dataclass
from typing import Dict, List, Sequence

AI_TOOL_DISPLAY_NAMES: Dict[str, str] = {
    "claude": "Claude Code",
    "codex": "Codex CLI",
    "copilot": "Copilot CLI",
    "opencode": "OpenCode",
}

AI_TOOL_VENDORS: Dict[str, str] = {
    "codex": "OpenAI",
    "copilot": "GitHub",
    "opencode": "anomalyco",
}

# Executable launched for each tool, in installer display order
AI_TOOL_COMMANDS: Dict[str, str] = {
    "claude": "claude",
    "codex": "codex",
    "copilot": "copilot",
    "opencode": "opencode",
}


@dataclass(frozen=True)
class AITool:
    name: str
    command: str
    installed: bool

    @property
    def label(self) -> str:
        status = "installed" if self.installed else "not installed"
        return f"{display_name(self.name)} ({status})"


def display_name(tool: str) -> str:
    """Human-readable name of *tool*; unknown tools show their raw token."""
    return AI_TOOL_DISPLAY_NAMES.get(tool, tool)


def installer_display_name(tool: str) -> str:
    """Display name with the vendor, as shown when choosing tools to install."""
    vendor = AI_TOOL_VENDORS.get(tool)
    return f"{display_name(tool)} ({vendor})" if vendor else display_name(tool)


def parse_tool_list(raw: str) -> List[str]:
    """Split a comma-separated ``--ai-tools`` value, dropping blanks."""
    return [t.strip() for t in raw.split(",") if t.strip()]


def detect_ai_tools(names: Sequence[str] = tuple(AI_TOOL_COMMANDS)) -> List[AITool]:
    """Look every tool's command up on PATH."""
    tools: List[AITool] = []
    for name in names:
        command = AI_TOOL_COMMANDS.get(name, name)
        tools.append(AITool(name=name, command=command,
                            installed=shutil.which(command) is not None))
    return tools
