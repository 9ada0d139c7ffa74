"""Action input loading for gomod-sbom."""

from gomod_sbom.config.loader import load_inputs

__all__ = ["load_inputs"]
