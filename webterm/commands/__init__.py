"""
Terminal Commands

Modules:
    registry: Command table, handlers and the dispatch boundary
"""

from webterm.commands.registry import (
    COMMANDS,
    CommandContext,
    execute,
    parse_command,
)

__all__ = ["COMMANDS", "CommandContext", "execute", "parse_command"]
