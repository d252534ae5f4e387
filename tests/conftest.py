import pytest

from ghost_tab.menu import GHOST_NONE, new_menu
from ghost_tab.projects import Project


@pytest.fixture()
def two_projects():
    return [Project("alpha", "/p/a"), Project("beta", "/p/b")]


@pytest.fixture()
def menu(two_projects):
    """Two projects, two tools, claude current, no ghost."""
    return new_menu(two_projects, ["claude", "codex"], ghost_display=GHOST_NONE)


@pytest.fixture()
def projects_file(tmp_path):
    path = tmp_path / "projects"
    path.write_text("alpha:/p/a\nbeta:/p/b\n", encoding="utf-8")
    return path
