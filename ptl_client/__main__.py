"""Allow running as ``python -m ptl_client``"""

import sys

from .cli.main import main

sys.exit(main())
