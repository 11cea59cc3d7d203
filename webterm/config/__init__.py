"""
Configuration System

Manages configuration for webterm with a layered approach.

Configuration Priority (highest to lowest):
    1. Programmatic (passed to TerminalConfig()) or config file values
       (TerminalConfig.from_file passes them through the same path)
    2. Environment variables (WEBTERM_* prefix)
    3. Built-in defaults

Modules:
    settings: TerminalConfig class
"""

from webterm.config.settings import TerminalConfig

__all__ = ["TerminalConfig"]
