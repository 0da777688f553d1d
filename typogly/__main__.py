"""Allow ``python -m typogly``."""

import sys

from typogly.cli import main

sys.exit(main())
