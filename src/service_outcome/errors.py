"""Exception hierarchy for service-outcome."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class OutcomeError(Exception):
    """Base exception for all service-outcome errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class MissingArgumentError(OutcomeError, TypeError):
    """A required factory option was not supplied."""

    def __init__(self, argument: str, *, hint: str | None = None) -> None:
        super().__init__(f"missing keyword: {argument}", hint=hint)
        self.argument = argument


class UnexpectedArgumentError(OutcomeError, TypeError):
    """The factory received options it does not recognize."""

    def __init__(self, arguments: Iterable[str], *, hint: str | None = None) -> None:
        names = tuple(sorted(arguments))
        super().__init__(f"unknown keyword: {', '.join(names)}", hint=hint)
        self.arguments = names


class InvalidTypeError(OutcomeError, TypeError):
    """The ``type`` discriminator is neither absent nor a symbolic atom.

    Symbolic atoms are identifier strings or ``enum.Enum`` members.
    """

    def __init__(self, *, hint: str | None = None) -> None:
        super().__init__("type must be None or a symbol", hint=hint)
        self.argument = "type"
