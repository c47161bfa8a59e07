"""Allow ``python -m abprune``."""

import sys

from .cli import main

sys.exit(main())
