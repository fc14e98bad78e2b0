"""
YAML user dataset adapter.

Loads a user collection from a YAML file of the form:

    users:
      - id: 1
        first_name: Justin
        ...

Camel-cased keys (firstName, birthDay, ...) are accepted as well.

Implements UserSourcePort.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.domain.entities import User

logger = logging.getLogger(__name__)


class UserDataError(Exception):
    """Raised when a user dataset cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load users from {path}: {reason}")


def parse_users(data: Any, path: Path) -> list[User]:
    """Validate parsed YAML into User records, keeping file order."""
    if not isinstance(data, dict) or "users" not in data:
        raise UserDataError(path, "missing top-level 'users' key")

    records = data["users"] or []
    if not isinstance(records, list):
        raise UserDataError(path, "'users' must be a list")

    users: list[User] = []
    for index, record in enumerate(records):
        try:
            users.append(User.model_validate(record))
        except ValidationError as e:
            raise UserDataError(path, f"invalid user at index {index}:\n{e}") from e
    return users


class YamlUserSource:
    """Reads users from a YAML file on every load."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load_users(self) -> list[User]:
        if not self.path.exists():
            raise UserDataError(self.path, "file not found")

        logger.debug("Reading user dataset %s", self.path)
        with open(self.path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise UserDataError(self.path, f"invalid YAML: {e}") from e

        users = parse_users(data, self.path)
        logger.info("Loaded %d users from %s", len(users), self.path)
        return users
