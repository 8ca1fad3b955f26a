"""Allow running the generator with ``python -m proposal_app``."""

import sys

from .main import main

sys.exit(main())
