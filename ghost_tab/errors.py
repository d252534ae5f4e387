"""Exceptions raised by ghost-tab-tui and reported once by the CLI."""


class GhostTabError(Exception):
    """Base class for errors that end the program with exit code 1."""


class UsageError(GhostTabError):
    """A required option is missing or has an unusable value."""


class ProjectsFileError(GhostTabError):
    """The projects file could not be read."""


class TerminalUnavailableError(GhostTabError):
    """The controlling terminal could not be opened."""


class ScreenFailedError(GhostTabError):
    """The interactive screen stopped because of an error inside it."""
