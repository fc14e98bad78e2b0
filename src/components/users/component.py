"""
Users component - Read-only queries over a user collection.

Wraps UserQueryService operations in input/output models.

Shell Layer - converts expected failures into validation errors.
"""

from __future__ import annotations

from ._impl import UserQueryService
from .models import (
    BalanceByEmailInput,
    BalanceOutput,
    BirthdayMonthInput,
    ContainsDomainOutput,
    EmailDomainInput,
    EntityNotFoundError,
    FirstNamesByLastNameOutput,
    RichestUserOutput,
    TotalBalanceOutput,
    UserListOutput,
    UserQueryValidationError,
    UsersByDomainOutput,
    UsersByIdOutput,
)

# CLI-facing query names, in presentation order
QUERY_NAMES: tuple[str, ...] = (
    "richest",
    "birthday-month",
    "group-by-domain",
    "total-balance",
    "sort-by-names",
    "contains-domain",
    "balance-by-email",
    "by-id",
    "first-names-by-last-name",
)


def run_find_richest(service: UserQueryService) -> RichestUserOutput:
    """Find the user with the highest balance."""
    user = service.find_richest_user()
    return RichestUserOutput(user=user, found=user is not None)


def run_find_by_birthday_month(
    input_data: BirthdayMonthInput,
    service: UserQueryService,
) -> UserListOutput:
    """Find users born in a month."""
    try:
        users = service.find_users_by_birthday_month(input_data.month)
    except ValueError as e:
        return UserListOutput(
            users=(),
            total=0,
            errors=(
                UserQueryValidationError(
                    code="invalid_month",
                    message=str(e),
                    field="month",
                ),
            ),
            success=False,
        )

    return UserListOutput(users=tuple(users), total=len(users))


def run_group_by_email_domain(service: UserQueryService) -> UsersByDomainOutput:
    """Group users by email domain."""
    groups = service.group_users_by_email_domain()
    return UsersByDomainOutput(
        groups={domain: tuple(users) for domain, users in groups.items()},
    )


def run_total_balance(service: UserQueryService) -> TotalBalanceOutput:
    """Sum every balance."""
    return TotalBalanceOutput(
        total=service.calculate_total_balance(),
        user_count=len(service.users),
    )


def run_sort_by_names(service: UserQueryService) -> UserListOutput:
    """Sort users by first then last name."""
    users = service.sort_by_first_and_last_names()
    return UserListOutput(users=tuple(users), total=len(users))


def run_contains_email_domain(
    input_data: EmailDomainInput,
    service: UserQueryService,
) -> ContainsDomainOutput:
    """Check whether any email ends with the given domain."""
    return ContainsDomainOutput(
        email_domain=input_data.email_domain,
        contains=service.contains_user_with_email_domain(input_data.email_domain),
    )


def run_get_balance_by_email(
    input_data: BalanceByEmailInput,
    service: UserQueryService,
) -> BalanceOutput:
    """Get a user's balance by exact email."""
    try:
        balance = service.get_balance_by_email(input_data.email)
    except EntityNotFoundError as e:
        return BalanceOutput(
            email=input_data.email,
            balance=None,
            errors=(
                UserQueryValidationError(
                    code="user_not_found",
                    message=str(e),
                    field="email",
                ),
            ),
            success=False,
        )

    return BalanceOutput(
        email=input_data.email,
        balance=balance,
        errors=(),
        success=True,
    )


def run_collect_by_id(service: UserQueryService) -> UsersByIdOutput:
    """Index users by id."""
    users = service.collect_users_by_id()
    return UsersByIdOutput(users=users, total=len(users))


def run_group_first_names(service: UserQueryService) -> FirstNamesByLastNameOutput:
    """Group first names under each last name."""
    groups = service.group_first_names_by_last_names()
    return FirstNamesByLastNameOutput(
        groups={last: frozenset(firsts) for last, firsts in groups.items()},
    )
