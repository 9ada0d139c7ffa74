from __future__ import annotations

import sys

from gomod_sbom.cli import main

if __name__ == "__main__":
    sys.exit(main())
