"""Vercel serverless function serving ``/api/nutrition`` and friends.

Vercel routes requests for this file to the ASGI ``app``; the full request
path is preserved, so the FastAPI routes under ``/api`` match unchanged.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from health_tracker.api.asgi import app  # noqa: E402

__all__ = ["app"]
