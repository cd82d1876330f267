"""Test helpers (small, reusable doubles)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CallRecorder:
    """Callback double that records the values it was called with."""

    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: Any) -> None:
        self.calls.append(value)

    @property
    def count(self) -> int:
        return len(self.calls)


def explode(*_args: Any) -> None:
    """Callback that must never run."""
    raise AssertionError("hook fired unexpectedly")
