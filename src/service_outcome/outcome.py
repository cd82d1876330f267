"""Outcome types: tagged Success/Failure results with chainable hooks.

An outcome carries a payload ``value`` and an optional ``type``
discriminator. Hooks react to an outcome without unwrapping it::

    Success.create(value=42, type="valid").on_failure(report).on_success(
        store, type="valid"
    )

Every hook returns the outcome it was called on, so chains of any length and
order evaluate against the same immutable instance.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
import logging
from typing import TYPE_CHECKING, Any, Self

from service_outcome._dev_flags import dev_trace_hooks_enabled
from service_outcome._validation import _require_callable, _takes_no_arguments
from service_outcome.options import parse_options

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)

type Discriminator = str | Enum


@dataclasses.dataclass(frozen=True, slots=True)
class Outcome[T]:
    """Abstract outcome contract.

    Concrete variants must override :meth:`is_success` and :meth:`is_failure`;
    on a bare ``Outcome`` both raise ``NotImplementedError``.

    The plain constructor stores its arguments verbatim. Prefer
    :meth:`create`, which validates them first.
    """

    value: T
    type: Discriminator | None = None

    @classmethod
    def create(cls, **options: Any) -> Self:
        """Build an outcome from validated keyword options.

        Args:
            **options: ``value`` (required) and ``type`` (optional; None, an
                identifier string, or an Enum member).

        Raises:
            MissingArgumentError: ``value`` was not given.
            InvalidTypeError: ``type`` is not None or a symbol.
            UnexpectedArgumentError: any other option was given.
        """
        opts = parse_options(options)
        return cls(opts.value, opts.type)

    def is_success(self) -> bool:
        raise NotImplementedError(
            f"{self.__class__.__name__}.is_success() must be overridden by a variant"
        )

    def is_failure(self) -> bool:
        raise NotImplementedError(
            f"{self.__class__.__name__}.is_failure() must be overridden by a variant"
        )

    def on_success(
        self,
        callback: Callable[[T], object] | Callable[[], object],
        type: Discriminator | None = None,
    ) -> Self:
        """Call ``callback(value)`` if this is a success matching ``type``.

        Without ``type`` any success matches. Returns ``self`` either way.
        """
        return self._dispatch("on_success", self.is_success(), callback, type)

    def on_failure(
        self,
        callback: Callable[[T], object] | Callable[[], object],
        type: Discriminator | None = None,
    ) -> Self:
        """Call ``callback(value)`` if this is a failure matching ``type``.

        Without ``type`` any failure matches. Returns ``self`` either way.
        """
        return self._dispatch("on_failure", self.is_failure(), callback, type)

    def _dispatch(
        self,
        hook: str,
        polarity: bool,
        callback: Callable[..., object],
        discriminator: Discriminator | None,
    ) -> Self:
        _require_callable(callback, "callback")
        fired = polarity and (discriminator is None or discriminator == self.type)

        if dev_trace_hooks_enabled():
            log.debug(
                "%s(type=%r) on %s(type=%r): %s",
                hook,
                discriminator,
                self.__class__.__name__,
                self.type,
                "fired" if fired else "skipped",
            )

        if fired:
            if _takes_no_arguments(callback):
                callback()
            else:
                callback(self.value)
        return self


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T](Outcome[T]):
    """A successful outcome."""

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T](Outcome[T]):
    """A failed outcome."""

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


type Result[T] = Success[T] | Failure[T]
