"""
File system and environment adapters for the rules component.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml


class LocalFileSystemAdapter:
    """Reads settings files from the local disk."""

    def read_yaml(self, path: Path) -> Any:
        with open(path) as f:
            return yaml.safe_load(f)

    def exists(self, path: Path) -> bool:
        return path.is_file()


class OsEnvironmentAdapter:
    """Reads process environment variables."""

    def get(self, key: str, default: str | None = None) -> str | None:
        return os.environ.get(key, default)


default_filesystem = LocalFileSystemAdapter()
default_environment = OsEnvironmentAdapter()
