"""Allow running as ``python -m nmclean``."""

from __future__ import annotations

import sys

from .main import main

sys.exit(main())
