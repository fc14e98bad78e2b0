"""
Users component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import User


class UserSourcePort(Protocol):
    """Supplies the user collection the queries run over."""

    def load_users(self) -> list[User]:
        """Load all users."""
        ...
