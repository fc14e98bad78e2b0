"""
UserQueryService - Read-only queries over a user collection.

Functional Core - pure business logic. No operation logs, caches or
mutates the collection; every call re-iterates it.
"""

from __future__ import annotations

from collections import defaultdict
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Decimal, localcontext
from operator import attrgetter

from src.domain.entities import User, UserCollection

from .models import (
    DUPLICATE_ID_POLICIES,
    DuplicateIdPolicy,
    DuplicateUserIdError,
    EntityNotFoundError,
)

_BY_BALANCE = attrgetter("balance")
_BY_NAMES = attrgetter("first_name", "last_name")


def validate_month(month: int) -> int:
    """Return month as a plain int, rejecting non-integers and anything outside 1-12."""
    # bool is an int subclass; calendar.Month is an IntEnum and passes
    if isinstance(month, bool) or not isinstance(month, int):
        msg = f"Month must be an integer, got {month!r}"
        raise ValueError(msg)
    month = int(month)
    if not 1 <= month <= 12:
        msg = f"Month must be between 1 and 12, got {month}"
        raise ValueError(msg)
    return month


class UserQueryService:
    """
    User query service.

    Holds a reference to the caller's collection for its whole lifetime.
    """

    def __init__(
        self,
        users: UserCollection,
        duplicate_ids: DuplicateIdPolicy = "last_wins",
    ) -> None:
        """Initialize service."""
        if duplicate_ids not in DUPLICATE_ID_POLICIES:
            msg = f"Unknown duplicate id policy: {duplicate_ids}"
            raise ValueError(msg)
        self._users = users
        self._duplicate_ids = duplicate_ids

    @property
    def users(self) -> UserCollection:
        return self._users

    def find_richest_user(self) -> User | None:
        """User with the highest balance; the first one wins a tie."""
        return max(self._users, key=_BY_BALANCE, default=None)

    def find_users_by_birthday_month(self, month: int) -> list[User]:
        """Users born in the given month (1-12), in collection order."""
        month = validate_month(month)
        return [user for user in self._users if user.birth_day.month == month]

    def group_users_by_email_domain(self) -> dict[str, list[User]]:
        groups: dict[str, list[User]] = {}
        for user in self._users:
            groups.setdefault(user.email_domain, []).append(user)
        return groups

    def calculate_total_balance(self) -> Decimal:
        """Exact sum of all balances; no rounding to the ambient context."""
        total = Decimal(0)
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            for user in self._users:
                total += user.balance
        return total

    def sort_by_first_and_last_names(self) -> list[User]:
        # str comparison is by code point
        return sorted(self._users, key=_BY_NAMES)

    def contains_user_with_email_domain(self, email_domain: str) -> bool:
        """
        True if any email ends with the given text.

        Literal suffix match: "mail.com" also matches "x@gmail.com".
        """
        return any(user.email.endswith(email_domain) for user in self._users)

    def get_balance_by_email(self, email: str) -> Decimal:
        """
        Balance of the first user whose email equals `email` exactly.

        Raises:
            EntityNotFoundError: no user has this email.
        """
        for user in self._users:
            if user.email == email:
                return user.balance
        raise EntityNotFoundError("User", "email", email)

    def collect_users_by_id(self) -> dict[int, User]:
        """
        Users keyed by id.

        Duplicate ids keep the last user under the "last_wins" policy and
        raise DuplicateUserIdError under "error".
        """
        by_id: dict[int, User] = {}
        for user in self._users:
            if self._duplicate_ids == "error" and user.id in by_id:
                raise DuplicateUserIdError(user.id)
            by_id[user.id] = user
        return by_id

    def group_first_names_by_last_names(self) -> dict[str, set[str]]:
        groups: defaultdict[str, set[str]] = defaultdict(set)
        for user in self._users:
            groups[user.last_name].add(user.first_name)
        return dict(groups)
