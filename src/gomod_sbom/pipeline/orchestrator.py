"""Run pipeline: check go, resolve, install, build args, execute, report."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

from gomod_sbom.bootstrap.installer import ArtifactInstaller
from gomod_sbom.bootstrap.validation import REQUIRED_TOOL, require_tool
from gomod_sbom.bootstrap.versions import VersionResolver
from gomod_sbom.core.errors import GomodSbomError
from gomod_sbom.core.invocation import build_args
from gomod_sbom.core.logging import get_logger
from gomod_sbom.core.models import ActionInputs
from gomod_sbom.core.subprocess_runner import run_tool

LOGGER = get_logger(__name__)

ProcessRunner = Callable[[List[str]], Any]
ToolCheck = Callable[[str], Path]


@dataclass
class RunResult:
    """Outcome of a pipeline run.

    On failure, stage names the step that failed and error holds its
    exception; fields of later stages stay unset.
    """

    success: bool = False
    stage: Optional[str] = None
    error: Optional[GomodSbomError] = None
    version: Optional[str] = None
    binary_path: Optional[Path] = None
    args: List[str] = field(default_factory=list)
    sbom: Optional[str] = None


class Orchestrator:
    """Runs the stages of one gomod-sbom invocation in strict order.

    Pipeline stages:
    1. check-go: the Go toolchain must be on PATH
    2. resolve: version specifier → concrete release
    3. install: download and extract the release
    4. build-args: action inputs → cyclonedx-gomod arguments
    5. execute: run cyclonedx-gomod
    6. report: log the SBOM when it was written to a file

    The first failing stage stops the run.
    """

    def __init__(
        self,
        resolver: VersionResolver,
        installer: ArtifactInstaller,
        runner: ProcessRunner = run_tool,
        tool_check: ToolCheck = require_tool,
    ) -> None:
        self._resolver = resolver
        self._installer = installer
        self._runner = runner
        self._tool_check = tool_check

    def stages(self) -> List[Tuple[str, Callable[[ActionInputs, RunResult], None]]]:
        return [
            ("check-go", self._check_go),
            ("resolve", self._resolve),
            ("install", self._install),
            ("build-args", self._build_args),
            ("execute", self._execute),
            ("report", self._report),
        ]

    def run(self, inputs: ActionInputs) -> RunResult:
        """Execute all stages for the given inputs.

        Args:
            inputs: Action inputs for this run.

        Returns:
            RunResult describing success or the failing stage.
        """
        result = RunResult()
        for name, stage in self.stages():
            LOGGER.debug(f"Running stage {name}")
            try:
                stage(inputs, result)
            except GomodSbomError as e:
                LOGGER.debug(f"Stage {name} failed: {e}")
                result.stage = name
                result.error = e
                return result

        result.success = True
        return result

    def _check_go(self, inputs: ActionInputs, result: RunResult) -> None:
        self._tool_check(REQUIRED_TOOL)

    def _resolve(self, inputs: ActionInputs, result: RunResult) -> None:
        result.version = self._resolver.resolve(inputs.version)

    def _install(self, inputs: ActionInputs, result: RunResult) -> None:
        assert result.version is not None
        result.binary_path = self._installer.install(result.version)

    def _build_args(self, inputs: ActionInputs, result: RunResult) -> None:
        result.args = build_args(inputs.options)

    def _execute(self, inputs: ActionInputs, result: RunResult) -> None:
        assert result.binary_path is not None
        self._runner([str(result.binary_path), *result.args])

    def _report(self, inputs: ActionInputs, result: RunResult) -> None:
        if inputs.options.writes_to_stdout:
            return

        output_path = Path(inputs.options.output)
        try:
            result.sbom = output_path.read_text(encoding="utf-8")
        except OSError as e:
            raise GomodSbomError(f"Failed to read SBOM from {output_path}: {e}") from e
        LOGGER.info(f"SBOM content:\n{result.sbom}")
