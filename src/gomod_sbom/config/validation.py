"""Validation of action inputs supplied through a YAML config file.

Unknown keys are reported as warnings with a suggestion; values of the
wrong type are errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from gomod_sbom.core.logging import get_logger

LOGGER = get_logger(__name__)

# Boolean inputs, each adding a single flag when true
BOOLEAN_INPUTS: Set[str] = {
    "include-stdlib",
    "include-test",
    "json",
    "omit-serial-number",
    "omit-version-prefix",
    "reproducible",
    "resolve-licenses",
}

# String inputs and their defaults (None means required)
STRING_INPUTS: Dict[str, Optional[str]] = {
    "module": "",
    "output": "-",
    "type": "application",
    "version": None,
}

VALID_INPUT_KEYS: Set[str] = BOOLEAN_INPUTS | set(STRING_INPUTS)

# Values accepted for boolean inputs (YAML 1.2 core schema)
TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Config will fail at runtime
    WARNING = "warning"  # Likely mistake but config usable


@dataclass
class ConfigValidationIssue:
    """A validation issue for configuration with severity."""

    message: str
    source: str
    severity: ValidationSeverity
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(data: Any, source: str) -> List[ConfigValidationIssue]:
    """Validate a config mapping of input names to values.

    Args:
        data: Parsed config file contents.
        source: Source file path for messages.

    Returns:
        List of validation issues; warnings are also logged.
    """
    issues: List[ConfigValidationIssue] = []

    if not isinstance(data, dict):
        issues.append(ConfigValidationIssue(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
            severity=ValidationSeverity.ERROR,
        ))
        return issues

    for key, value in data.items():
        if key not in VALID_INPUT_KEYS:
            issue = ConfigValidationIssue(
                message=f"Unknown input '{key}'",
                source=source,
                severity=ValidationSeverity.WARNING,
                key=str(key),
                suggestion=_suggest_key(str(key), VALID_INPUT_KEYS),
            )
            issues.append(issue)
            _log_warning(issue)
        elif key in BOOLEAN_INPUTS:
            if not isinstance(value, bool) and value not in TRUE_VALUES + FALSE_VALUES:
                issues.append(ConfigValidationIssue(
                    message=f"'{key}' must be a boolean, got {value!r}",
                    source=source,
                    severity=ValidationSeverity.ERROR,
                    key=key,
                ))
        elif value is not None and not isinstance(value, (str, int, float)):
            issues.append(ConfigValidationIssue(
                message=f"'{key}' must be a string, got {type(value).__name__}",
                source=source,
                severity=ValidationSeverity.ERROR,
                key=key,
            ))

    return issues


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo.

    Args:
        invalid_key: The invalid key entered.
        valid_keys: Set of valid keys.

    Returns:
        Closest matching valid key, or None if no good match.
    """
    matches = get_close_matches(invalid_key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(issue: ConfigValidationIssue) -> None:
    """Log a validation warning."""
    msg = f"{issue.message} in {issue.source}"
    if issue.suggestion:
        msg += f" (did you mean '{issue.suggestion}'?)"
    LOGGER.warning(msg)
