"""Allow ``python -m ppm_blur``."""

import sys

from ppm_blur.cli import main

sys.exit(main())
