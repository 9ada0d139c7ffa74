"""Action input loading and merging.

Handles reading inputs from:
- GitHub Actions environment variables (INPUT_<NAME>)
- An optional YAML config file (--config)
- CLI flag overrides

Precedence (highest to lowest): CLI flags, config file, environment,
built-in defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from gomod_sbom.config.validation import (
    BOOLEAN_INPUTS,
    FALSE_VALUES,
    STRING_INPUTS,
    TRUE_VALUES,
    ValidationSeverity,
    validate_config,
)
from gomod_sbom.core.errors import ConfigurationError
from gomod_sbom.core.logging import get_logger
from gomod_sbom.core.models import ActionInputs, InvocationOptions

LOGGER = get_logger(__name__)


def input_env_name(name: str) -> str:
    """Return the environment variable the runner uses for an input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Read a string input from the environment, trimmed. Unset is ""."""
    env = os.environ if environ is None else environ
    return env.get(input_env_name(name), "").strip()


def parse_boolean(name: str, value: Any) -> bool:
    """Parse a boolean input value.

    Raises:
        ConfigurationError: If the value is not a recognized boolean.
    """
    if isinstance(value, bool):
        return value
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def read_environment_inputs(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect every input that is set (non-empty) in the environment."""
    values: Dict[str, Any] = {}
    for name in sorted(BOOLEAN_INPUTS | set(STRING_INPUTS)):
        value = get_input(name, environ)
        if value:
            values[name] = value
    return values


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and validate a YAML config file.

    Args:
        path: Path to YAML file.

    Returns:
        Mapping of input names to values.

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid.
    """
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}

    errors = [
        issue for issue in validate_config(data, source=str(path))
        if issue.severity == ValidationSeverity.ERROR
    ]
    if errors:
        raise ConfigurationError("; ".join(f"{e.message} in {e.source}" for e in errors))

    LOGGER.debug(f"Loaded config from {path}")
    return {k: v for k, v in data.items() if v is not None}


def load_inputs(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> ActionInputs:
    """Load action inputs with proper precedence.

    Args:
        environ: Environment to read INPUT_* variables from (defaults to os.environ).
        config_path: Optional YAML config file.
        cli_overrides: Input values given on the command line; None values are ignored.

    Returns:
        ActionInputs for this run.

    Raises:
        ConfigurationError: If an input is invalid or the version is missing.
    """
    merged: Dict[str, Any] = {}
    merged.update(read_environment_inputs(environ))
    if config_path is not None:
        merged.update(load_yaml_file(config_path))
    if cli_overrides:
        merged.update({k: v for k, v in cli_overrides.items() if v is not None})

    def string(name: str) -> str:
        value = merged.get(name)
        if value is None or str(value).strip() == "":
            return STRING_INPUTS[name] or ""
        return str(value).strip()

    def boolean(name: str) -> bool:
        if name not in merged:
            return False
        return parse_boolean(name, merged[name])

    version = string("version")
    if not version:
        raise ConfigurationError("Input required and not supplied: version")

    options = InvocationOptions(
        output=string("output"),
        type=string("type"),
        include_stdlib=boolean("include-stdlib"),
        include_test=boolean("include-test"),
        json=boolean("json"),
        module=string("module"),
        omit_serial_number=boolean("omit-serial-number"),
        omit_version_prefix=boolean("omit-version-prefix"),
        reproducible=boolean("reproducible"),
        resolve_licenses=boolean("resolve-licenses"),
    )
    return ActionInputs(version=version, options=options)
