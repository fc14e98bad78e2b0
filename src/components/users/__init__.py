"""
Users component - Read-only queries over a user collection.
"""

from ._impl import UserQueryService, validate_month
from .component import (
    QUERY_NAMES,
    run_collect_by_id,
    run_contains_email_domain,
    run_find_by_birthday_month,
    run_find_richest,
    run_get_balance_by_email,
    run_group_by_email_domain,
    run_group_first_names,
    run_sort_by_names,
    run_total_balance,
)
from .models import (
    DUPLICATE_ID_POLICIES,
    BalanceByEmailInput,
    BalanceOutput,
    BirthdayMonthInput,
    ContainsDomainOutput,
    DuplicateIdPolicy,
    DuplicateUserIdError,
    EmailDomainInput,
    EntityNotFoundError,
    FirstNamesByLastNameOutput,
    RichestUserOutput,
    TotalBalanceOutput,
    UserListOutput,
    UserQueryError,
    UserQueryValidationError,
    UsersByDomainOutput,
    UsersByIdOutput,
)
from .ports import UserSourcePort

__all__ = [
    # Service
    "UserQueryService",
    "validate_month",
    # Entry points
    "run_find_richest",
    "run_find_by_birthday_month",
    "run_group_by_email_domain",
    "run_total_balance",
    "run_sort_by_names",
    "run_contains_email_domain",
    "run_get_balance_by_email",
    "run_collect_by_id",
    "run_group_first_names",
    "QUERY_NAMES",
    # Input models
    "BirthdayMonthInput",
    "EmailDomainInput",
    "BalanceByEmailInput",
    # Output models
    "RichestUserOutput",
    "UserListOutput",
    "UsersByDomainOutput",
    "TotalBalanceOutput",
    "ContainsDomainOutput",
    "BalanceOutput",
    "UsersByIdOutput",
    "FirstNamesByLastNameOutput",
    "UserQueryValidationError",
    # Errors
    "UserQueryError",
    "EntityNotFoundError",
    "DuplicateUserIdError",
    # Policies
    "DuplicateIdPolicy",
    "DUPLICATE_ID_POLICIES",
    # Ports
    "UserSourcePort",
]
