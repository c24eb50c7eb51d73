# taylor_ad/errors.py
"""
Exceptions and warnings raised by the Taylor engine.

All of them are deterministic mathematical or usage conditions: they are
raised synchronously by the call that triggered the faulting computation and
leave every other series untouched.
"""


class TaylorError(Exception):
    """Base class for errors raised by the Taylor engine."""


class OrderNotComputed(TaylorError, LookupError):
    """
    A coefficient was read before it was evaluated, or written out of
    sequence on a computed series. Evaluate first, then read.
    """


class SingularExpansion(TaylorError, ZeroDivisionError):
    """A recurrence divides by a zero leading coefficient (e.g. x / 0-series)."""


class DomainError(TaylorError, ValueError):
    """The order-0 argument lies outside the real domain of the function."""


class TaylorWarning(UserWarning):
    """Issued when evaluation is likely to be slow or numerically fragile."""
