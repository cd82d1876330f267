"""Internal helpers for development-time feature flags.

Centralizes how opt-in diagnostics are toggled so semantics stay consistent
across the package. Flags are read on every call, which keeps them trivially
patchable from tests.
"""

from __future__ import annotations

import os

__all__ = ["TRACE_HOOKS_ENV", "dev_trace_hooks_enabled"]

TRACE_HOOKS_ENV = "SERVICE_OUTCOME_TRACE_HOOKS"


def dev_trace_hooks_enabled(*, override: bool | None = None) -> bool:
    """Return True when hook dispatch tracing is enabled.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``SERVICE_OUTCOME_TRACE_HOOKS`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv(TRACE_HOOKS_ENV) == "1"
