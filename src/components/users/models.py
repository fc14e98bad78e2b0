"""
Users component - Data models.

Input/output models for the user query entry points, plus error types.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from src.domain.entities import User

DuplicateIdPolicy = Literal["last_wins", "error"]

DUPLICATE_ID_POLICIES: tuple[DuplicateIdPolicy, ...] = ("last_wins", "error")

# --- Validation Errors ---


@dataclass(frozen=True)
class UserQueryValidationError:
    """User query validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class BirthdayMonthInput:
    """Input for filtering users by birthday month."""

    month: int


@dataclass(frozen=True)
class EmailDomainInput:
    """Input for the email suffix existence check."""

    email_domain: str


@dataclass(frozen=True)
class BalanceByEmailInput:
    """Input for looking up a balance by exact email."""

    email: str


# --- Output Models ---


@dataclass(frozen=True)
class RichestUserOutput:
    """Output from richest user lookup."""

    user: User | None
    found: bool


@dataclass(frozen=True)
class UserListOutput:
    """Ordered users returned by a filter or sort."""

    users: tuple[User, ...]
    total: int
    errors: tuple[UserQueryValidationError, ...] = ()
    success: bool = True


@dataclass(frozen=True)
class UsersByDomainOutput:
    """Users grouped by email domain, in first-occurrence order."""

    groups: dict[str, tuple[User, ...]]


@dataclass(frozen=True)
class TotalBalanceOutput:
    """Exact total of all balances."""

    total: Decimal
    user_count: int


@dataclass(frozen=True)
class ContainsDomainOutput:
    """Output from the email suffix existence check."""

    email_domain: str
    contains: bool


@dataclass(frozen=True)
class BalanceOutput:
    """Output from balance lookup."""

    email: str
    balance: Decimal | None
    errors: tuple[UserQueryValidationError, ...]
    success: bool


@dataclass(frozen=True)
class UsersByIdOutput:
    """Users keyed by id."""

    users: dict[int, User]
    total: int


@dataclass(frozen=True)
class FirstNamesByLastNameOutput:
    """First names grouped under each last name."""

    groups: dict[str, frozenset[str]]


# --- Error Types ---


class UserQueryError(Exception):
    """Base user query error."""

    pass


class EntityNotFoundError(UserQueryError):
    """Lookup found no matching entity."""

    def __init__(self, entity: str, field: str, value: object) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"Cannot find {entity} by {field}={value}")


class DuplicateUserIdError(UserQueryError):
    """Two users share an id."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"Duplicate user id: {user_id}")
