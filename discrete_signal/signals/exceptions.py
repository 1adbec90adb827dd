"""
Signal Exceptions
=================

Errors raised by the generators and the Signal container.

Both concrete errors also derive from the matching builtin exception, so
callers catching ValueError or IndexError keep working.
"""


class SignalError(Exception):
    """Base class for all errors raised by the discrete signal toolkit."""


class DomainError(SignalError, ValueError):
    """
    A parameter lies outside the domain of the operation.

    Examples: a sample rate of zero (division by zero in the recurrence),
    a negative step onset, an unknown waveform name.
    """


class BoundsError(SignalError, IndexError):
    """
    A length or offset exceeds what the operand can provide.

    Example: delaying a signal by more samples than it holds.
    """
