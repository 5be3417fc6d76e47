"""
complexmath — элементарные функции комплексного аргумента

Численно устойчивые abs/arg/exp/log/sqrt/trig/hyperbolic/pow на всей
комплексной плоскости в двойной точности IEEE-754.
"""

# core.math импортируется раньше core.domain: complex_value зависит от
# core.math.scalar_primitives, а complex_functions от complex_value
from complexmath.core.math import (
    SERIES_MAX,
    ComplexDomainViolation,
    NonconvergenceError,
    complex_abs,
    complex_arg,
    complex_cos,
    complex_cosh,
    complex_exp,
    complex_log,
    complex_pow,
    complex_pow_int,
    complex_pow_real,
    complex_sin,
    complex_sinh,
    complex_sqr,
    complex_sqrt,
    complex_tan,
    complex_tanh,
    real_pow_complex,
)
from complexmath.core.domain import I, ONE, ZERO, Complex  # noqa: I001

__version__ = "0.1.0"

__all__ = [
    # Types
    "Complex",
    "ZERO",
    "ONE",
    "I",
    # Constants
    "SERIES_MAX",
    # Exceptions
    "ComplexDomainViolation",
    "NonconvergenceError",
    # Functions
    "complex_abs",
    "complex_arg",
    "complex_cos",
    "complex_cosh",
    "complex_exp",
    "complex_log",
    "complex_pow",
    "complex_pow_int",
    "complex_pow_real",
    "complex_sin",
    "complex_sinh",
    "complex_sqr",
    "complex_sqrt",
    "complex_tan",
    "complex_tanh",
    "real_pow_complex",
]
