"""gomod-sbom: fetch and run cyclonedx-gomod from a CI step."""

__version__ = "1.0.0"
