"""
core/config.py — Centralised logging constants and environment defaults.

All other modules import settings from here rather than reading the
environment themselves, so a CLI flag or a test can override one place.

Usage::

    from core.config import LOG_LEVEL, SHOW_TRACEBACKS
"""

import os


# ── Environment variable names ────────────────────────────────────────────────

LOG_LEVEL_ENV: str = "RECIPE_HOOKS_LOG_LEVEL"
TRACEBACKS_ENV: str = "RECIPE_HOOKS_TRACEBACKS"

# ── Defaults (overridable via env) ────────────────────────────────────────────

LOG_LEVEL_DEFAULT: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s %(name)s [%(process)d] %(levelname)-5s %(message)s"
# Per-unit captured logs omit the timestamp so reports stay stable
CAPTURE_FORMAT: str = "%(levelname)-5s %(message)s"

LOG_LEVEL: str = os.environ.get(LOG_LEVEL_ENV, LOG_LEVEL_DEFAULT).upper()
SHOW_TRACEBACKS: bool = os.environ.get(TRACEBACKS_ENV, "0").lower() in ("1", "true", "yes")
