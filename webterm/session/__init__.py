"""
Terminal Session

Modules:
    terminal: TerminalSession (history, directory mirror, suggestions, details panel)
    storage: Persistence of history and preferences
"""

from webterm.session.storage import (
    PREFERENCES_KEY,
    STATE_KEY,
    JsonStateStore,
    load_snapshot,
    save_snapshot,
)
from webterm.session.terminal import TerminalSession

__all__ = [
    "TerminalSession",
    "JsonStateStore",
    "load_snapshot",
    "save_snapshot",
    "STATE_KEY",
    "PREFERENCES_KEY",
]
