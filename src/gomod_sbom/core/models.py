from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_OUTPUT = "-"
DEFAULT_TYPE = "application"


@dataclass(frozen=True)
class InvocationOptions:
    """Options that shape the cyclonedx-gomod command line.

    Attributes:
        output: Destination of the SBOM; "-" writes to stdout. Always emitted as -output.
        type: Component type of the main module. Always emitted as -type.
        include_stdlib: Adds -std.
        include_test: Adds -test.
        json: Adds -json.
        module: Adds -module <value> when non-empty.
        omit_serial_number: Adds -noserial.
        omit_version_prefix: Adds -novprefix.
        reproducible: Adds -reproducible.
        resolve_licenses: Adds -licenses.
    """

    output: str = DEFAULT_OUTPUT
    type: str = DEFAULT_TYPE
    include_stdlib: bool = False
    include_test: bool = False
    json: bool = False
    module: str = ""
    omit_serial_number: bool = False
    omit_version_prefix: bool = False
    reproducible: bool = False
    resolve_licenses: bool = False

    @property
    def writes_to_stdout(self) -> bool:
        return self.output == DEFAULT_OUTPUT


@dataclass(frozen=True)
class ActionInputs:
    """Everything read from the action inputs for one run."""

    version: str
    options: InvocationOptions = field(default_factory=InvocationOptions)
