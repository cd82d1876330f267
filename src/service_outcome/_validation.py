"""Internal validation helpers shared by the outcome modules.

Keeps callback checks and discriminator rules in one place so error
messages stay consistent.
"""

from __future__ import annotations

from enum import Enum
import inspect
import sys
import typing


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_callable(func: typing.Any, field_name: str) -> None:
    _require(
        condition=callable(func),
        message="must be callable",
        field_name=field_name,
        exc=TypeError,
    )


def _takes_no_arguments(func: typing.Callable[..., typing.Any]) -> bool:
    """Return True when ``func`` cannot accept a positional argument.

    Callables without an introspectable signature are assumed to accept one.
    """
    try:
        sig = inspect.signature(func)
    except (ValueError, TypeError):
        return False
    return not any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
        for p in sig.parameters.values()
    )


def _is_symbol(candidate: object) -> bool:
    """Return True for identifier strings and enum members."""
    if isinstance(candidate, Enum):
        return True
    return isinstance(candidate, str) and candidate.isidentifier()


def _normalize_discriminator(candidate: object) -> typing.Any:
    """Map empty values to None and intern identifier strings.

    Returns the input untouched when it is not a symbol; callers decide how
    to reject it.
    """
    if candidate is None or isinstance(candidate, Enum):
        return candidate
    if isinstance(candidate, str):
        if not candidate:
            return None
        # sys.intern only accepts exact str instances
        if type(candidate) is str and candidate.isidentifier():
            return sys.intern(candidate)
    return candidate
