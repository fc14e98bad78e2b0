import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from src.adapters.yaml_users import UserDataError, YamlUserSource
from src.components.rules import (
    LOG_LEVELS,
    LoadRulesInput,
    QueryRules,
    RulesValidationError,
    load_and_validate_rules,
    resolve_rules_path,
    resolve_users_path,
)
from src.components.rules.adapters import default_environment, default_filesystem
from src.components.users import (
    BalanceByEmailInput,
    BirthdayMonthInput,
    EmailDomainInput,
    UserQueryError,
    UserQueryService,
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
from src.domain.entities import User

logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_FAILURE = 1


def _user_json(user: User) -> dict[str, Any]:
    return user.model_dump(mode="json")


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def handle_richest(service: UserQueryService, args: argparse.Namespace) -> int:
    result = run_find_richest(service)
    _emit(_user_json(result.user) if result.found else None)
    return EXIT_OK


def handle_birthday_month(service: UserQueryService, args: argparse.Namespace) -> int:
    result = run_find_by_birthday_month(BirthdayMonthInput(month=args.month), service)
    if not result.success:
        for error in result.errors:
            logger.error(error.message)
        return EXIT_FAILURE
    _emit([_user_json(u) for u in result.users])
    return EXIT_OK


def handle_group_by_domain(service: UserQueryService, args: argparse.Namespace) -> int:
    result = run_group_by_email_domain(service)
    _emit({domain: [_user_json(u) for u in users] for domain, users in result.groups.items()})
    return EXIT_OK


def handle_total_balance(service: UserQueryService, args: argparse.Namespace) -> int:
    result = run_total_balance(service)
    _emit(format(result.total, "f"))
    return EXIT_OK


def handle_sort_by_names(service: UserQueryService, args: argparse.Namespace) -> int:
    result = run_sort_by_names(service)
    _emit([_user_json(u) for u in result.users])
    return EXIT_OK


def handle_contains_domain(service: UserQueryService, args: argparse.Namespace) -> int:
    result = run_contains_email_domain(EmailDomainInput(email_domain=args.domain), service)
    _emit(result.contains)
    return EXIT_OK


def handle_balance_by_email(service: UserQueryService, args: argparse.Namespace) -> int:
    result = run_get_balance_by_email(BalanceByEmailInput(email=args.email), service)
    if not result.success:
        for error in result.errors:
            print(error.message, file=sys.stderr)
        return EXIT_FAILURE
    _emit(format(result.balance, "f"))
    return EXIT_OK


def handle_by_id(service: UserQueryService, args: argparse.Namespace) -> int:
    result = run_collect_by_id(service)
    _emit({str(user_id): _user_json(u) for user_id, u in result.users.items()})
    return EXIT_OK


def handle_first_names(service: UserQueryService, args: argparse.Namespace) -> int:
    result = run_group_first_names(service)
    _emit({last: sorted(firsts) for last, firsts in result.groups.items()})
    return EXIT_OK


HANDLERS = {
    "richest": handle_richest,
    "birthday-month": handle_birthday_month,
    "group-by-domain": handle_group_by_domain,
    "total-balance": handle_total_balance,
    "sort-by-names": handle_sort_by_names,
    "contains-domain": handle_contains_domain,
    "balance-by-email": handle_balance_by_email,
    "by-id": handle_by_id,
    "first-names-by-last-name": handle_first_names,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="user-queries", description="Query a user dataset"
    )
    parser.add_argument("--rules", help="Path to rules.yaml")
    parser.add_argument("--data", help="Path to a users YAML file (overrides rules)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("richest", help="User with the highest balance")

    month_parser = subparsers.add_parser("birthday-month", help="Users born in a month")
    month_parser.add_argument("month", type=int, help="Month number, 1-12")

    subparsers.add_parser("group-by-domain", help="Users grouped by email domain")
    subparsers.add_parser("total-balance", help="Sum of all balances")
    subparsers.add_parser("sort-by-names", help="Users sorted by first and last name")

    domain_parser = subparsers.add_parser(
        "contains-domain", help="Whether any email ends with a domain"
    )
    domain_parser.add_argument("domain", help="Email suffix, e.g. gmail.com")

    email_parser = subparsers.add_parser("balance-by-email", help="Balance for an email")
    email_parser.add_argument("email", help="Exact email address")

    subparsers.add_parser("by-id", help="Users keyed by id")
    subparsers.add_parser("first-names-by-last-name", help="First names per last name")

    return parser


def load_rules_if_present(args: argparse.Namespace) -> tuple[QueryRules | None, Path]:
    """Rules are optional when --data is given and no rules file exists."""
    rules_path = resolve_rules_path(LoadRulesInput(rules_path=args.rules), default_environment)
    if args.rules is None and args.data is not None and not rules_path.is_file():
        logger.debug("No rules file at %s, using defaults", rules_path)
        return None, rules_path

    rules = load_and_validate_rules(
        LoadRulesInput(rules_path=rules_path),
        fs=default_filesystem,
        env=default_environment,
    )
    logger.debug("Rules loaded from %s", rules_path)
    return rules, rules_path


def build_service(args: argparse.Namespace) -> UserQueryService:
    rules, rules_path = load_rules_if_present(args)

    if args.log_level is None and rules is not None:
        logging.getLogger().setLevel(rules.logging.level)

    if rules is None or args.data is not None:
        users_path = Path(args.data)
    else:
        users_path = resolve_users_path(rules, rules_path)

    users = YamlUserSource(users_path).load_users()
    duplicate_ids = rules.queries.duplicate_ids if rules is not None else "last_wins"
    return UserQueryService(users, duplicate_ids=duplicate_ids)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level or logging.INFO)

    try:
        service = build_service(args)
    except (RulesValidationError, UserDataError) as e:
        logger.error(str(e))
        return EXIT_FAILURE

    try:
        return HANDLERS[args.command](service, args)
    except UserQueryError as e:
        logger.error(str(e))
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
