"""Projects file parsing and path helpers."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ghost_tab.errors import ProjectsFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Project:
    name: str
    path: str

    @property
    def path_key(self) -> str:
        """Path used for duplicate detection (one trailing separator trimmed)."""
        return _trim_separator(self.path)


def _trim_separator(path: str) -> str:
    if path.endswith("/"):
        return path[:-1]
    return path


def parse_projects(lines: Iterable[str]) -> List[Project]:
    """Parse ``name:path`` lines, skipping blanks, comments and malformed lines."""
    projects: List[Project] = []
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        name, sep, path = line.partition(":")
        if not sep:
            continue
        projects.append(Project(name=name.strip(), path=path.strip()))
    return projects


def load_projects(path: str) -> List[Project]:
    try:
        with open(path, encoding="utf-8") as f:
            projects = parse_projects(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ProjectsFileError(f"failed to load projects: {e}") from e
    logger.debug("loaded %d projects from %s", len(projects), path)
    return projects


# ── Paths ─────────────────────────────────────────────────────────────


def _home(home: Optional[str] = None) -> str:
    if home is not None:
        return home
    return os.environ.get("HOME", "")


def expand_path(path: str, home: Optional[str] = None) -> str:
    """Expand a leading ``~`` to ``$HOME``."""
    h = _home(home)
    if path == "~":
        return h
    if path.startswith("~/"):
        return os.path.join(h, path[2:])
    return path


def shorten_home_path(path: str, home: Optional[str] = None) -> str:
    """Replace a leading ``$HOME`` with ``~`` on a path-component boundary."""
    h = _trim_separator(_home(home))
    if not h:
        return path
    if path == h:
        return "~"
    if path.startswith(h + "/"):
        return "~" + path[len(h):]
    return path


def validate_directory(path: str, home: Optional[str] = None) -> str:
    """Return the expanded, normalized *path* or raise ValueError."""
    if not path.strip():
        raise ValueError("Path cannot be empty")
    expanded = os.path.normpath(expand_path(path.strip(), home))
    if not Path(expanded).is_dir():
        raise ValueError("Directory not found")
    return expanded


def is_duplicate_project(path: str, projects: Sequence[Project]) -> bool:
    key = _trim_separator(path)
    return any(p.path_key == key for p in projects)


def path_suggestions(value: str, home: Optional[str] = None, limit: int = 8) -> List[str]:
    """Directories completing the partially typed *value*, as typed.

    A trailing ``/`` lists the directory's children; otherwise the last
    component is matched case-insensitively as a prefix. Hidden directories
    are skipped and every suggestion ends in ``/``.
    """
    if not value:
        return []
    if value == "~":
        value = "~/"
    expanded = expand_path(value, home)
    if value.endswith("/"):
        directory, prefix, typed_parent = expanded, "", value
    else:
        directory, prefix = os.path.split(expanded)
        typed_parent = value[:len(value) - len(os.path.basename(value))]
    try:
        names = sorted(entry.name for entry in os.scandir(directory or ".")
                       if entry.is_dir() and not entry.name.startswith("."))
    except OSError:
        return []
    lowered = prefix.lower()
    matches = [typed_parent + name + "/" for name in names if name.lower().startswith(lowered)]
    return matches[:limit]
