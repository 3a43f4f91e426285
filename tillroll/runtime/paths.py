"""Centralized path management for tillroll.

Single source of truth for configuration file locations.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Determine the project root directory (TILLROLL_ROOT, else the working directory)."""
    env_root = os.environ.get("TILLROLL_ROOT", "").strip()
    if env_root:
        return Path(env_root).expanduser()
    return Path.cwd()


@dataclass
class ProjectPaths:
    """Container for project-related paths.

    Project paths are computed relative to the project root; packaged
    defaults are resolved relative to the installed tillroll package.
    """

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    # --- Source code paths ---
    @property
    def src(self) -> Path:
        """Installed tillroll package directory."""
        return Path(__file__).resolve().parent.parent

    @property
    def default_merchant_category_rules(self) -> Path:
        """Packaged default category rules TOML file."""
        return self.src / "receipt" / "rules" / "default_merchant_categories.toml"

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def merchant_category_rules(self) -> Path:
        """Project-level category rules TOML file."""
        return self.config / "merchant_categories.toml"


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Drop the cached ProjectPaths so the next get_paths() re-reads TILLROLL_ROOT."""
    global _paths
    _paths = None
