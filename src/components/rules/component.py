"""
Rules component - Load and validate rules.yaml settings.

Invalid settings halt startup: every problem found is collected and
reported together.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.components.users.models import DUPLICATE_ID_POLICIES

from .models import (
    LOG_LEVELS,
    LoadRulesInput,
    LoadRulesOutput,
    QueryRules,
    RulesSchema,
    ValidateRulesInput,
    ValidateRulesOutput,
)
from .ports import EnvironmentPort, FileSystemPort

# Default rules file path (relative to project root)
DEFAULT_RULES_PATH = "rules.yaml"

RULES_PATH_ENV = "USER_QUERIES_RULES_PATH"


class RulesValidationError(Exception):
    """Raised when rules.yaml fails schema validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Rules validation failed: {'; '.join(errors)}")


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def _validate_rules_dict(rules: dict[str, Any], schema: RulesSchema) -> list[str]:
    """Pure validation logic - no I/O."""
    errors: list[str] = []

    for field_name in schema.REQUIRED_TOP_LEVEL:
        if field_name not in rules:
            errors.append(f"Missing required top-level field: {field_name}")

    if "schema_version" in rules:
        if rules["schema_version"] != schema.EXPECTED_SCHEMA_VERSION:
            errors.append(
                f"Invalid schema_version: expected {schema.EXPECTED_SCHEMA_VERSION}, "
                f"got {rules['schema_version']}"
            )

    if "project_slug" in rules:
        if not isinstance(rules["project_slug"], str) or not rules["project_slug"]:
            errors.append("project_slug must be a non-empty string")

    # Optional sections must still be mappings when present
    for section, required_fields in schema.SECTION_REQUIRED_FIELDS.items():
        if section not in rules:
            continue
        if not isinstance(rules[section], dict):
            errors.append(f"Section {section} must be a dictionary")
            continue
        for field_name in required_fields:
            if field_name not in rules[section]:
                errors.append(f"Section {section} missing required field: {field_name}")

    queries = rules.get("queries")
    if isinstance(queries, dict) and "duplicate_ids" in queries:
        if queries["duplicate_ids"] not in DUPLICATE_ID_POLICIES:
            errors.append(
                f"queries.duplicate_ids must be one of {list(DUPLICATE_ID_POLICIES)}, "
                f"got {queries['duplicate_ids']!r}"
            )

    logging_section = rules.get("logging")
    if isinstance(logging_section, dict) and "level" in logging_section:
        if logging_section["level"] not in LOG_LEVELS:
            errors.append(
                f"logging.level must be one of {list(LOG_LEVELS)}, "
                f"got {logging_section['level']!r}"
            )

    return errors


def run_validate(
    inp: ValidateRulesInput,
    *,
    schema: RulesSchema | None = None,
) -> ValidateRulesOutput:
    """
    Validate rules dictionary against schema.

    Pure function - no I/O operations.
    """
    if schema is None:
        schema = RulesSchema()

    errors = _validate_rules_dict(inp.rules, schema)
    return ValidateRulesOutput(errors=errors, is_valid=len(errors) == 0)


def resolve_rules_path(inp: LoadRulesInput, env: EnvironmentPort) -> Path:
    """Explicit path, then the environment, then the project root default."""
    if inp.rules_path is not None:
        return Path(inp.rules_path)

    env_path = env.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def run_load(
    inp: LoadRulesInput,
    *,
    fs: FileSystemPort,
    env: EnvironmentPort,
) -> LoadRulesOutput:
    """
    Load rules from file system.

    Args:
        inp: Input containing optional rules path.
        fs: File system port for reading files.
        env: Environment port for reading env vars.

    Returns:
        LoadRulesOutput with loaded rules or errors.
    """
    rules_path = resolve_rules_path(inp, env)

    if not fs.exists(rules_path):
        return LoadRulesOutput(
            rules={},
            path=rules_path,
            errors=[f"Rules file not found: {rules_path}"],
            success=False,
        )

    try:
        rules = fs.read_yaml(rules_path)
    except Exception as e:
        return LoadRulesOutput(
            rules={},
            path=rules_path,
            errors=[f"Failed to parse rules file: {e}"],
            success=False,
        )

    if not isinstance(rules, dict):
        return LoadRulesOutput(
            rules={},
            path=rules_path,
            errors=["Rules file must contain a mapping"],
            success=False,
        )

    return LoadRulesOutput(rules=rules, path=rules_path)


def run(
    inp: LoadRulesInput,
    *,
    fs: FileSystemPort,
    env: EnvironmentPort,
    schema: RulesSchema | None = None,
) -> LoadRulesOutput:
    """
    Load and validate rules with fail-fast behavior.

    This is the main entry point for the rules component.
    """
    load_result = run_load(inp, fs=fs, env=env)
    if not load_result.success:
        return load_result

    validate_result = run_validate(
        ValidateRulesInput(rules=load_result.rules),
        schema=schema,
    )

    if not validate_result.is_valid:
        return LoadRulesOutput(
            rules=load_result.rules,
            path=load_result.path,
            errors=validate_result.errors,
            success=False,
        )

    return load_result


def load_and_validate_rules(
    inp: LoadRulesInput,
    *,
    fs: FileSystemPort,
    env: EnvironmentPort,
) -> QueryRules:
    """
    Load, validate and parse rules.

    Raises:
        RulesValidationError: the file is missing, unreadable or invalid.
    """
    result = run(inp, fs=fs, env=env)
    if not result.success:
        raise RulesValidationError(result.errors)

    try:
        return QueryRules.model_validate(result.rules)
    except ValidationError as e:
        raise RulesValidationError([str(e)]) from e


def resolve_users_path(rules: QueryRules, rules_path: Path) -> Path:
    """Dataset path from rules, relative paths taken from the rules file's directory."""
    users_path = Path(rules.data.users_path)
    if users_path.is_absolute():
        return users_path
    return rules_path.parent / users_path
