"""Exit codes for the gomod-sbom CLI."""

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID_USAGE = 2
