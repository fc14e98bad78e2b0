"""
Rules component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class FileSystemPort(Protocol):
    """Port for reading the settings file."""

    def read_yaml(self, path: Path) -> Any:
        """Read and parse a YAML file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if a file exists."""
        ...


class EnvironmentPort(Protocol):
    """Port for environment variable access."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        ...
