"""Command-line assembly for cyclonedx-gomod."""

from __future__ import annotations

from typing import List, Tuple

from gomod_sbom.core.models import InvocationOptions

# Boolean options in emission order, paired with their flag.
_BOOLEAN_FLAGS: Tuple[Tuple[str, str], ...] = (
    ("include_stdlib", "-std"),
    ("include_test", "-test"),
    ("json", "-json"),
)

_TRAILING_BOOLEAN_FLAGS: Tuple[Tuple[str, str], ...] = (
    ("omit_serial_number", "-noserial"),
    ("omit_version_prefix", "-novprefix"),
    ("reproducible", "-reproducible"),
    ("resolve_licenses", "-licenses"),
)


def build_args(options: InvocationOptions) -> List[str]:
    """Map invocation options to an ordered list of arguments.

    Output and type are always present; every other option contributes
    its flag only when enabled.

    Args:
        options: Invocation options read from the action inputs.

    Returns:
        Arguments for the cyclonedx-gomod binary (without the binary itself).
    """
    args = ["-output", options.output, "-type", options.type]

    for attribute, flag in _BOOLEAN_FLAGS:
        if getattr(options, attribute):
            args.append(flag)

    if options.module:
        args.extend(["-module", options.module])

    for attribute, flag in _TRAILING_BOOLEAN_FLAGS:
        if getattr(options, attribute):
            args.append(flag)

    return args
