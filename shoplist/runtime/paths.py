"""Centralized path management for shoplist.

All user configuration lives in one directory, by default
``~/.config/shoplist``; set SHOPLIST_HOME to move it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_config_root() -> Path:
    """Determine the configuration directory."""
    override = os.environ.get("SHOPLIST_HOME")
    if override:
        return Path(override).expanduser()
    return Path("~/.config/shoplist").expanduser()


@dataclass
class ProjectPaths:
    """Container for all shoplist configuration paths."""

    root: Path = field(default_factory=_get_config_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    @property
    def settings_file(self) -> Path:
        """Parsing and service settings TOML file."""
        return self.root / "settings.toml"

    @property
    def category_keywords(self) -> Path:
        """User keyword additions TOML file."""
        return self.root / "category_keywords.toml"


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the shared ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Forget the shared instance so the next get_paths() re-reads SHOPLIST_HOME."""
    global _paths
    _paths = None
