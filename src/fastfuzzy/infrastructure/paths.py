"""Path resolution for fastfuzzy storage."""

from __future__ import annotations

import os
from pathlib import Path

# Environment variable overriding the storage base directory
HOME_ENV_VAR = "FASTFUZZY_HOME"


class PathResolver:
    """Resolves paths for fastfuzzy storage.

    Storage layout:
        ~/.fastfuzzy/
        └── config.json
    """

    def __init__(self, base: Path | None = None) -> None:
        """Initialize path resolver.

        Args:
            base: Base directory for storage. Defaults to $FASTFUZZY_HOME,
                then ~/.fastfuzzy.
        """
        if base is None:
            env_home = os.environ.get(HOME_ENV_VAR)
            base = Path(env_home) if env_home else Path.home() / ".fastfuzzy"
        self.base = base

    def ensure_base(self) -> Path:
        """Ensure base directory exists and return it."""
        self.base.mkdir(parents=True, exist_ok=True)
        return self.base

    def global_config(self) -> Path:
        """Path to global configuration file."""
        return self.base / "config.json"
