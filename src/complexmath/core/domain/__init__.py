"""
Domain models and value objects.

Contains the immutable Complex value type and its constants.
"""

from complexmath.core.domain.complex_value import I, ONE, ZERO, Complex

__all__ = [
    "Complex",
    "ZERO",
    "ONE",
    "I",
]
