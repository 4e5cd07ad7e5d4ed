"""
Error Taxonomy
==============
Exceptions raised by the series store and the evaluator.

All of them are raised synchronously at the offending call and leave the
store untouched.
"""


class FourierFunError(Exception):
    """Base class for all errors raised by the model layer."""


class InvalidArgument(FourierFunError, ValueError):
    """Malformed or out-of-range input (negative count, negative frequency, bad domain...)."""


class CapacityExceeded(FourierFunError):
    """A component was added beyond the declared count."""


class NotReady(FourierFunError):
    """Components were read or evaluated before collection was complete."""
