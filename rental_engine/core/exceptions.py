"""Error taxonomy for the rental engine.

Business-rule refusals (an ineligible licence, an empty pool) are not
errors and are reported through ``False`` / ``0`` return values.  The
exceptions below cover malformed input, exhausted identifier spaces and
broken internal invariants.
"""


class RentalError(Exception):
    """Base class for every error raised by the rental engine."""


class InvalidArgumentError(RentalError, ValueError):
    """A public operation received a missing, malformed or non-positive argument."""


class CapacityExceededError(RentalError):
    """A creation request would exceed a configured instance cap."""


class ExhaustionError(CapacityExceededError):
    """An identifier generator has used up its address space.

    Exhaustion is permanent: every subsequent request on the same
    generator raises again.
    """


class InconsistentStateError(RentalError, RuntimeError):
    """An internal invariant was found violated."""
