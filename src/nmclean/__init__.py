"""Find and remove node_modules directories."""

from __future__ import annotations

__version__ = "0.1.0"
