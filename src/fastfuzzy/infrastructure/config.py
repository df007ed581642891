"""Global configuration persistence.

Stores default search options in config.json with schema versioning
and atomic write operations.
"""

from __future__ import annotations

import json
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import structlog

from fastfuzzy.infrastructure.paths import PathResolver
from fastfuzzy.modules.matching.search import InvalidOptionsError, SearchOptions

__all__ = [
    "ConfigError",
    "GlobalConfig",
    "load_global_config",
    "reset_global_config",
    "save_global_config",
]

logger = structlog.get_logger()

# Current schema version - increment when making breaking changes
# v1: Initial schema with limit, threshold, normalize, ignore_case
SCHEMA_VERSION = "1"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE = 1 * 1024 * 1024


class ConfigError(Exception):
    """Raised when configuration operations fail."""


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable persisted defaults for searches.

    Unset fields fall through to the built-in search defaults.

    Attributes:
        limit: Default maximum number of results.
        threshold: Default minimum score.
        normalize: Default for diacritic and whitespace normalization.
        ignore_case: Default for case-insensitive comparison.
    """

    limit: int | None = None
    threshold: float | None = None
    normalize: bool | None = None
    ignore_case: bool | None = None

    def __post_init__(self) -> None:
        # Reuse search option validation
        self.to_search_options()

    def to_search_options(self) -> SearchOptions:
        """Convert to SearchOptions.

        Raises:
            InvalidOptionsError: If a stored value is invalid.
        """
        return SearchOptions(
            limit=self.limit,
            threshold=self.threshold,
            normalize=self.normalize,
            ignore_case=self.ignore_case,
        )


def save_global_config(
    config: GlobalConfig, resolver: PathResolver | None = None
) -> None:
    """Save global configuration to a JSON file.

    Uses atomic write (temp file + rename) to prevent corruption.

    Args:
        config: Configuration to save.
        resolver: Path resolver (defaults to PathResolver()).

    Raises:
        ConfigError: If saving fails.
    """
    if resolver is None:
        resolver = PathResolver()

    path = resolver.global_config()
    data = _config_to_dict(config)

    try:
        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        # Atomic write: write to temp file, then rename
        # This prevents corruption if process is interrupted
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            json.dump(data, tmp, indent=2)
            tmp_path = Path(tmp.name)

        # Atomic rename
        tmp_path.replace(path)

        logger.debug("config_saved", path=str(path))

    except OSError as e:
        # Clean up temp file if rename failed
        if "tmp_path" in locals():
            tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Failed to save config: {e}") from e


def load_global_config(resolver: PathResolver | None = None) -> GlobalConfig:
    """Load global configuration from a JSON file.

    Gracefully handles missing files, invalid JSON, invalid values and
    oversized files by returning the default config.

    Args:
        resolver: Path resolver (defaults to PathResolver()).

    Returns:
        GlobalConfig instance (uses defaults if file missing or invalid).
    """
    if resolver is None:
        resolver = PathResolver()

    path = resolver.global_config()

    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return GlobalConfig()

    try:
        # Check file size before reading to prevent DoS
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return GlobalConfig()

        content = path.read_text(encoding="utf-8")
        data = json.loads(content)

        # Check schema version
        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )
            # Still try to load - be forward-compatible

        return _dict_to_config(data)

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return GlobalConfig()
    except (AttributeError, KeyError, TypeError, InvalidOptionsError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return GlobalConfig()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return GlobalConfig()


def reset_global_config(resolver: PathResolver | None = None) -> bool:
    """Delete the global configuration file.

    Args:
        resolver: Path resolver (defaults to PathResolver()).

    Returns:
        True if a file was removed, False if none existed.

    Raises:
        ConfigError: If the file exists but cannot be removed.
    """
    if resolver is None:
        resolver = PathResolver()

    path = resolver.global_config()
    if not path.exists():
        return False

    try:
        path.unlink()
    except OSError as e:
        raise ConfigError(f"Failed to remove config: {e}") from e

    logger.debug("config_removed", path=str(path))
    return True


def _config_to_dict(config: GlobalConfig) -> dict[str, Any]:
    """Convert config to JSON-serializable dict with a version field.

    Unset fields are omitted.
    """
    data = {key: value for key, value in asdict(config).items() if value is not None}
    data["version"] = SCHEMA_VERSION
    return data


def _dict_to_config(data: dict[str, Any]) -> GlobalConfig:
    """Convert dict to GlobalConfig.

    Args:
        data: Dict from JSON.

    Returns:
        GlobalConfig instance.

    Raises:
        AttributeError: If data is not a JSON object.
        InvalidOptionsError: If a field has an invalid value.
    """
    return GlobalConfig(
        limit=data.get("limit"),
        threshold=data.get("threshold"),
        normalize=data.get("normalize"),
        ignore_case=data.get("ignore_case"),
    )
