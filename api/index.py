"""Vercel serverless entrypoint.

Vercel imports this file directly, so the src/ package is not installed.
"""

import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parent.parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from diet_tracker.api.asgi import app  # noqa: E402

__all__ = ["app"]
