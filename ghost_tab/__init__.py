"""
ghost-tab-tui — terminal screens for the Ghost Tab launcher.

The main menu lets the user pick a project and an AI coding assistant; the
chosen action is printed as one JSON line on stdout for the shell wrapper.
"""

import logging

__version__ = "0.4.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
