"""service-outcome: tagged Success/Failure results with chainable hooks.

Public API:
    - Success / Failure: concrete outcomes, built with ``create(...)``
    - Outcome: the abstract contract both variants share
    - OutcomeError and its subclasses: factory validation errors
"""

from __future__ import annotations

import logging

from service_outcome.errors import (
    InvalidTypeError,
    MissingArgumentError,
    OutcomeError,
    UnexpectedArgumentError,
)
from service_outcome.options import OutcomeOptions
from service_outcome.outcome import Discriminator, Failure, Outcome, Result, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("service-outcome")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("service_outcome").addHandler(logging.NullHandler())

__all__ = [
    "Discriminator",
    "Failure",
    "InvalidTypeError",
    "MissingArgumentError",
    "Outcome",
    "OutcomeError",
    "OutcomeOptions",
    "Result",
    "Success",
    "UnexpectedArgumentError",
]
