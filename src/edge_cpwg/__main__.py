"""Allow ``python -m edge_cpwg``."""

import sys

from edge_cpwg.cli import main

sys.exit(main())
