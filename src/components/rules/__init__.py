"""
Rules component - Load and validate rules.yaml settings.
"""

from .component import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    RulesValidationError,
    load_and_validate_rules,
    resolve_rules_path,
    resolve_users_path,
    run,
    run_load,
    run_validate,
)
from .models import (
    LOG_LEVELS,
    DataRules,
    LoadRulesInput,
    LoadRulesOutput,
    LoggingRules,
    LogLevel,
    QueryPolicyRules,
    QueryRules,
    RulesSchema,
    ValidateRulesInput,
    ValidateRulesOutput,
)
from .ports import EnvironmentPort, FileSystemPort

__all__ = [
    # Component entry points
    "run",
    "run_load",
    "run_validate",
    "load_and_validate_rules",
    "resolve_rules_path",
    "resolve_users_path",
    # Models
    "LoadRulesInput",
    "LoadRulesOutput",
    "ValidateRulesInput",
    "ValidateRulesOutput",
    "RulesSchema",
    "QueryRules",
    "DataRules",
    "QueryPolicyRules",
    "LoggingRules",
    "LogLevel",
    "LOG_LEVELS",
    # Ports
    "FileSystemPort",
    "EnvironmentPort",
    # Exceptions
    "RulesValidationError",
    # Constants
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
]
