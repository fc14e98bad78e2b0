"""
Rules component input/output models.

Covers the rules.yaml settings file: dataset location, query policies
and logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from src.components.users.models import DuplicateIdPolicy

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# --- Settings Models ---


class DataRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    users_path: str


class QueryPolicyRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    duplicate_ids: DuplicateIdPolicy = "last_wins"


class LoggingRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: LogLevel = "INFO"


class QueryRules(BaseModel):
    """Validated contents of rules.yaml."""

    model_config = ConfigDict(frozen=True)

    schema_version: int
    project_slug: str
    data: DataRules
    queries: QueryPolicyRules = QueryPolicyRules()
    logging: LoggingRules = LoggingRules()


# --- Component Models ---


@dataclass(frozen=True)
class LoadRulesInput:
    """Input for loading rules."""

    rules_path: Path | str | None = None


@dataclass(frozen=True)
class LoadRulesOutput:
    """Output from loading rules."""

    rules: dict[str, Any]
    path: Path | None = None
    errors: list[str] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ValidateRulesInput:
    """Input for validating rules."""

    rules: dict[str, Any]


@dataclass(frozen=True)
class ValidateRulesOutput:
    """Output from validating rules."""

    errors: list[str]
    is_valid: bool


@dataclass
class RulesSchema:
    """Expected schema for rules.yaml validation."""

    REQUIRED_TOP_LEVEL: list[str] = field(
        default_factory=lambda: ["schema_version", "project_slug", "data"]
    )

    EXPECTED_SCHEMA_VERSION: int = 1

    SECTION_REQUIRED_FIELDS: dict[str, list[str]] = field(
        default_factory=lambda: {
            "data": ["users_path"],
            "queries": [],
            "logging": [],
        }
    )
