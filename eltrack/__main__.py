"""Allow running as ``python -m eltrack``."""

import sys

from eltrack.cli.main import main

sys.exit(main())
