"""
TerminalConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use defaults (reads from environment)
    >>> config = TerminalConfig()

    >>> # Explicit configuration
    >>> config = TerminalConfig(user="guest", tree_root="./my_repo")

    >>> # From config file
    >>> config = TerminalConfig.from_file("./webterm.toml")

Environment Variables:
    WEBTERM_USER - Prompt user name
    WEBTERM_HOSTNAME - Prompt host name
    WEBTERM_THEME - Theme name reported by neofetch
    WEBTERM_TREE_SNAPSHOT - JSON tree snapshot to mirror
    WEBTERM_TREE_ROOT - Local directory to mirror
    WEBTERM_EXCLUDE - Comma-separated names skipped when scanning a directory
    WEBTERM_STATE_FILE - Where history and preferences are persisted
    WEBTERM_VOLUME - Default volume (0.0 - 1.0)
    WEBTERM_LOG_LEVEL - Logging level for the CLI
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, cast

# TOML support: tomllib is built-in for Python 3.11+, use tomli for 3.10
try:
    import tomllib

    def _load_toml(path: Path) -> dict[str, Any]:
        with open(path, "rb") as f:
            return cast(dict[str, Any], tomllib.load(f))

except ImportError:
    import tomli

    def _load_toml(path: Path) -> dict[str, Any]:
        with open(path, "rb") as f:
            return cast(dict[str, Any], tomli.load(f))


_LIST_OPTIONS = ("include_dirs", "include_files", "exclude_names")


class TerminalConfig:
    """Configuration for a webterm session."""

    # === Identity ===

    user: str = "visitor"
    """User name shown in the prompt"""

    hostname: str = "webterm"
    """Host name shown in the prompt"""

    version: str = "1.0.0"
    """Terminal version reported by neofetch"""

    theme: str = "Dark"
    """Theme name reported by neofetch"""

    # === Filesystem ===

    projects_dir: str = "projects"
    """Root-level directory holding the synthesized project files"""

    tree_snapshot: str | None = None
    """JSON tree snapshot to mirror at startup"""

    tree_root: str | None = None
    """Local directory to mirror at startup (used when no snapshot is set)"""

    include_dirs: list[str] = []
    """Top-level directories to include when scanning (empty = all)"""

    include_files: list[str] = []
    """Top-level files to include when scanning (empty = all)"""

    exclude_names: list[str] = ["node_modules", "build", "dist", "__pycache__", ".git"]
    """Entry names skipped at any depth when scanning"""

    # === Session ===

    state_file: str | None = None
    """Where history and preferences are persisted (None = not persisted)"""

    default_volume: float = 0.5
    """Volume used when no preference has been saved"""

    log_level: str = "WARNING"
    """Logging level configured by the CLI"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize configuration.

        Args:
            **kwargs: Override any configuration option
        """
        # Instance copies so list options are never shared between configs
        for key in _LIST_OPTIONS:
            setattr(self, key, list(getattr(type(self), key)))

        # Load from environment first
        self._load_from_env()

        # Apply explicit overrides
        for key, value in kwargs.items():
            if hasattr(self, key) and not key.startswith("_"):
                setattr(self, key, value)
            else:
                raise ValueError(f"Unknown configuration option: {key}")

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        import os

        if user := os.getenv("WEBTERM_USER"):
            self.user = user
        if hostname := os.getenv("WEBTERM_HOSTNAME"):
            self.hostname = hostname
        if theme := os.getenv("WEBTERM_THEME"):
            self.theme = theme
        if snapshot := os.getenv("WEBTERM_TREE_SNAPSHOT"):
            self.tree_snapshot = snapshot
        if root := os.getenv("WEBTERM_TREE_ROOT"):
            self.tree_root = root
        if exclude := os.getenv("WEBTERM_EXCLUDE"):
            self.exclude_names = [name.strip() for name in exclude.split(",") if name.strip()]
        if state_file := os.getenv("WEBTERM_STATE_FILE"):
            self.state_file = state_file
        if volume := os.getenv("WEBTERM_VOLUME"):
            try:
                self.default_volume = float(volume)
            except ValueError:
                raise ValueError(f"WEBTERM_VOLUME must be a number, got {volume!r}") from None
            if not 0.0 <= self.default_volume <= 1.0:
                raise ValueError(f"WEBTERM_VOLUME must be between 0.0 and 1.0, got {volume}")
        if level := os.getenv("WEBTERM_LOG_LEVEL"):
            self.log_level = level.upper()

    @classmethod
    def from_file(cls, path: str | Path) -> "TerminalConfig":
        """
        Load configuration from TOML file.

        Nested sections are flattened: keys under [prompt] map to option
        names directly, keys under [tree] are prefixed with "tree_" unless
        they already name an option.

        Example TOML:
            [prompt]
            user = "guest"
            hostname = "portfolio"

            [tree]
            root = "./site"
            exclude_names = ["node_modules", ".git"]

            [session]
            state_file = "~/.webterm/state.json"

        Args:
            path: Path to TOML configuration file

        Returns:
            TerminalConfig instance with values from file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = _load_toml(path)

        flat_config: dict[str, Any] = {}

        for section in ("prompt", "session", "logging"):
            for key, value in data.get(section, {}).items():
                flat_config[key] = value

        for key, value in data.get("tree", {}).items():
            if hasattr(cls, key):
                flat_config[key] = value
            else:
                flat_config[f"tree_{key}"] = value

        # Also support flat top-level keys
        for key, value in data.items():
            if not isinstance(value, dict):
                flat_config[key] = value

        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> "TerminalConfig":
        """Load configuration from environment variables only."""
        return cls()

    def to_file(self, path: str | Path) -> None:
        """
        Save configuration to TOML file.

        Options left at None are omitted.

        Args:
            path: Path to write TOML configuration file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        sections: dict[str, dict[str, Any]] = {
            "prompt": {
                "user": self.user,
                "hostname": self.hostname,
                "version": self.version,
                "theme": self.theme,
            },
            "tree": {
                "projects_dir": self.projects_dir,
                "snapshot": self.tree_snapshot,
                "root": self.tree_root,
                "include_dirs": self.include_dirs,
                "include_files": self.include_files,
                "exclude_names": self.exclude_names,
            },
            "session": {
                "state_file": self.state_file,
                "default_volume": self.default_volume,
            },
            "logging": {
                "log_level": self.log_level,
            },
        }

        # Build TOML string manually (avoids extra dependency)
        # JSON string literals are valid TOML basic strings
        lines = ["# webterm configuration", ""]

        for section_name, section_values in sections.items():
            lines.append(f"[{section_name}]")
            for key, value in section_values.items():
                if isinstance(value, str):
                    lines.append(f"{key} = {json.dumps(value)}")
                elif isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, (int, float)):
                    lines.append(f"{key} = {value}")
                elif isinstance(value, list):
                    items = ", ".join(json.dumps(str(item)) for item in value)
                    lines.append(f"{key} = [{items}]")
            lines.append("")

        path.write_text("\n".join(lines))

    def with_overrides(self, **kwargs: Any) -> "TerminalConfig":
        """Return new config with specified overrides."""
        new_config = TerminalConfig.__new__(TerminalConfig)
        for key in dir(self):
            if not key.startswith("_") and not callable(getattr(self, key)):
                value = getattr(self, key)
                setattr(new_config, key, list(value) if isinstance(value, list) else value)
        for key, value in kwargs.items():
            setattr(new_config, key, value)
        return new_config
