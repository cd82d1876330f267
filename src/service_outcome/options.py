"""Factory options: the pydantic wall in front of outcome construction.

``Success.create(...)`` and ``Failure.create(...)`` route their keyword
options through :class:`OutcomeOptions`. Pydantic collects every problem with
the record; :func:`parse_options` then raises the single most relevant
library error, checking the missing ``value`` first, then the discriminator,
then unrecognized names.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError, field_validator

from service_outcome._validation import _is_symbol, _normalize_discriminator
from service_outcome.errors import (
    InvalidTypeError,
    MissingArgumentError,
    OutcomeError,
    UnexpectedArgumentError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

_TYPE_HINT = "Pass type=None, an identifier string such as 'valid', or an Enum member."


class OutcomeOptions(BaseModel):
    """Validated construction record for an outcome."""

    model_config = {"extra": "forbid", "frozen": True}

    value: Any
    type: Any = None

    @field_validator("type", mode="before")
    @classmethod
    def validate_symbol(cls, v: Any) -> Any:
        """Accept None, empty, identifier strings and enum members."""
        v = _normalize_discriminator(v)
        if v is not None and not _is_symbol(v):
            raise ValueError("type must be None or a symbol")
        return v


def parse_options(options: Mapping[str, Any]) -> OutcomeOptions:
    """Validate a factory record, translating pydantic errors.

    Raises:
        MissingArgumentError: ``value`` was not supplied.
        InvalidTypeError: ``type`` is not None, empty, or a symbol.
        UnexpectedArgumentError: the record holds names other than
            ``value`` and ``type``.
    """
    try:
        return OutcomeOptions.model_validate(dict(options))
    except ValidationError as e:
        error = _translate(e)
        log.debug("Rejected outcome options %s: %s", sorted(options), error)
        raise error from None


def _translate(exc: ValidationError) -> OutcomeError:
    missing: list[str] = []
    unknown: list[str] = []
    invalid_type = False
    for err in exc.errors():
        loc = err.get("loc") or ("",)
        name = str(loc[0])
        kind = err.get("type")
        if kind == "missing":
            missing.append(name)
        elif kind == "extra_forbidden":
            unknown.append(name)
        elif name == "type":
            invalid_type = True

    if missing:
        return MissingArgumentError(missing[0])
    if invalid_type:
        return InvalidTypeError(hint=_TYPE_HINT)
    if unknown:
        return UnexpectedArgumentError(
            unknown, hint="Only 'value' and 'type' are recognized."
        )
    # Anything else is a pydantic error shape we do not model.
    return OutcomeError(f"invalid outcome options: {exc.error_count()} error(s)")
