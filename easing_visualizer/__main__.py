"""Allow ``python -m easing_visualizer``."""

import sys

from .cli import main

sys.exit(main())
