"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import typer

if TYPE_CHECKING:
    from fastfuzzy.infrastructure.config import GlobalConfig

__all__ = ["CLIContext", "switch_value"]


@dataclass
class CLIContext:
    """Global CLI context for verbosity and other state.

    Uses singleton pattern to share state across all CLI commands.

    Note: Mutable dataclass to allow setting verbose/quiet flags at runtime.
    Assumes single-threaded CLI environment.
    """

    verbose: bool = False
    quiet: bool = False
    config: GlobalConfig | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Get the singleton CLI context instance.

        Returns:
            The shared CLIContext instance.
        """
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_config(self) -> GlobalConfig:
        """Get global config, loading and caching on first access.

        Returns:
            Loaded or default GlobalConfig instance.
        """
        if self.config is None:
            from fastfuzzy.infrastructure.config import load_global_config

            self.config = load_global_config()

        return self.config

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Useful for testing to ensure clean state.
        """
        cls._instance = None


def switch_value(
    enable: bool, disable: bool, enable_flag: str, disable_flag: str
) -> bool | None:
    """Combine an --x / --no-x pair of plain flags into an optional bool.

    Args:
        enable: Whether the enabling flag was given.
        disable: Whether the disabling flag was given.
        enable_flag: Name of the enabling flag, for error messages.
        disable_flag: Name of the disabling flag, for error messages.

    Returns:
        True or False for the flag given, None when neither was given.

    Raises:
        typer.BadParameter: If both flags were given.
    """
    if enable and disable:
        raise typer.BadParameter(
            f"{enable_flag} and {disable_flag} cannot be combined"
        )
    if enable:
        return True
    if disable:
        return False
    return None
