"""Pytest configuration and fixtures.

Provides environment isolation and shared test doubles. Fixtures here are
autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

from tests.helpers import CallRecorder

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_outcome_env(request, monkeypatch):
    """Clear SERVICE_OUTCOME_* env vars so dev flags start disabled.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("SERVICE_OUTCOME_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def outcome_debug_logs(caplog):
    """Capture DEBUG records from the service_outcome logger (not autouse)."""
    caplog.set_level(logging.DEBUG, logger="service_outcome")
    return caplog


# =============================================================================
# Test Doubles
# =============================================================================


@pytest.fixture
def call_recorder() -> CallRecorder:
    """Return a fresh callback double that records every call."""
    return CallRecorder()
