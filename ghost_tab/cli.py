"""
ghost-tab-tui — interactive screens for the Ghost Tab shell launcher.

Usage:
    ghost-tab-tui main-menu --projects-file F [--ai-tool T] [--ai-tools a,b]
                  [--ghost-display animated|static|none] [--tab-title MODE]
                  [--update-version V]
    ghost-tab-tui confirm MESSAGE
    ghost-tab-tui show-logo
    ghost-tab-tui select-project --projects-file F
    ghost-tab-tui select-ai-tool
    ghost-tab-tui add-project [--projects-file F]
    ghost-tab-tui settings-menu
    ghost-tab-tui multi-select-ai-tool

Every screen draws on the controlling terminal and prints its answer as one
JSON line on stdout. ``--ai-tool`` before the subcommand picks the palette.
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from ghost_tab import __version__, screens
from ghost_tab.app import run_main_menu
from ghost_tab.errors import GhostTabError, UsageError
from ghost_tab.menu import GHOST_ANIMATED, GHOST_DISPLAY_MODES, new_menu
from ghost_tab.projects import load_projects
from ghost_tab.theme import DEFAULT_TOOL
from ghost_tab.tools import detect_ai_tools, parse_tool_list

logger = logging.getLogger(__name__)

LOG_FILE_ENV = "GHOST_TAB_LOG_FILE"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging():
    """Send debug logs to ``$GHOST_TAB_LOG_FILE`` when it is set.

    stdout carries the result and stderr the screen, so nothing is logged
    to either.
    """
    path = os.environ.get(LOG_FILE_ENV)
    if not path:
        return
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("ghost_tab")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghost-tab-tui",
        description="Interactive TUI components for Ghost Tab",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--ai-tool", dest="theme_tool", default=DEFAULT_TOOL,
                        help="AI tool whose palette themes the screen (default: claude)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    menu = subparsers.add_parser(
        "main-menu", help="Home screen with ghost, projects and AI tool cycling")
    menu.add_argument("--projects-file", required=True, help="Path to projects file")
    menu.add_argument("--ai-tool", dest="ai_tool", default=None,
                      help="Current AI tool name (default: the top-level --ai-tool)")
    menu.add_argument("--ai-tools", default=DEFAULT_TOOL,
                      help="Comma-separated available tool names, in display order")
    menu.add_argument("--ghost-display", default=GHOST_ANIMATED, choices=GHOST_DISPLAY_MODES,
                      help="Ghost display mode")
    menu.add_argument("--tab-title", default="full",
                      help="Tab title mode for the wrapper (full or project), kept as given")
    menu.add_argument("--update-version", default="",
                      help="Show an update banner for this version")

    confirm = subparsers.add_parser("confirm", help="Yes/no confirmation dialog")
    confirm.add_argument("message", help="Question to ask")

    subparsers.add_parser("show-logo", help="Show the ghost for the current AI tool")

    select_project = subparsers.add_parser("select-project", help="Pick a project")
    select_project.add_argument("--projects-file", required=True, help="Path to projects file")

    subparsers.add_parser("select-ai-tool", help="Pick the default AI tool")

    add_project = subparsers.add_parser("add-project", help="Prompt for a project directory")
    add_project.add_argument("--projects-file", default=None,
                             help="Existing projects, used to reject duplicates")

    subparsers.add_parser("settings-menu", help="Settings actions")
    subparsers.add_parser("multi-select-ai-tool", help="Choose AI tools to install")

    return parser


# ── Commands ──────────────────────────────────────────────────────────


def emit(result: Optional[dict]):
    """Print *result* as the single JSON line the shell wrapper reads."""
    if result is None:
        return
    print(json.dumps(result, ensure_ascii=False, separators=(",", ":")), flush=True)


def cmd_main_menu(args: argparse.Namespace):
    projects = load_projects(args.projects_file)
    tools = parse_tool_list(args.ai_tools)
    if not tools:
        raise UsageError("--ai-tools must name at least one AI tool")
    current = args.ai_tool if args.ai_tool is not None else args.theme_tool
    logger.info("main-menu: %d projects, tools=%s, current=%s, ghost=%s",
                len(projects), ",".join(tools), current, args.ghost_display)

    state = new_menu(projects, tools, current_tool=current,
                     ghost_display=args.ghost_display, tab_title=args.tab_title,
                     update_version=args.update_version)
    result = run_main_menu(state)
    logger.info("main-menu result: %s", result.to_json())
    print(result.to_json(), flush=True)


def cmd_screen(args: argparse.Namespace):
    tool = args.theme_tool
    if args.command == "confirm":
        app = screens.ConfirmApp(tool, args.message)
    elif args.command == "show-logo":
        app = screens.LogoApp(tool)
    elif args.command == "select-project":
        projects = load_projects(args.projects_file)
        if not projects:
            emit(screens.ProjectSelectApp.CANCELLED)
            return
        app = screens.ProjectSelectApp(tool, projects)
    elif args.command == "select-ai-tool":
        app = screens.AIToolSelectApp(tool, detect_ai_tools())
    elif args.command == "add-project":
        projects = load_projects(args.projects_file) if args.projects_file else []
        app = screens.AddProjectApp(tool, projects)
    elif args.command == "settings-menu":
        app = screens.SettingsMenuApp(tool)
    elif args.command == "multi-select-ai-tool":
        app = screens.MultiSelectApp(tool, detect_ai_tools())
    else:
        raise UsageError(f"Unknown command: {args.command}")
    emit(screens.run_screen(app))


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "main-menu":
            cmd_main_menu(args)
        else:
            cmd_screen(args)
    except GhostTabError as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"\033[31m{e}\033[0m", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
