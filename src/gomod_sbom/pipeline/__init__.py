"""Run pipeline for gomod-sbom."""

from gomod_sbom.pipeline.orchestrator import Orchestrator, RunResult

__all__ = ["Orchestrator", "RunResult"]
