"""
Core math modules для complexmath

Элементарные функции комплексного аргумента с гарантией численной устойчивости.
"""

# Scalar Primitives
from complexmath.core.math.scalar_primitives import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # IEEE-safe wrappers
    cos,
    hypot,
    ieee_divide,
    safe_exp,
    safe_log,
    safe_pow,
    safe_sqrt,
    sin,
    sqr,
    # Epsilon comparisons
    is_close,
    is_valid_float,
)

# Complex Functions
from complexmath.core.math.complex_functions import (
    INT_POW_CHAIN_MAX,
    SERIES_MAX,
    SQRT_SERIES_RATIO,
    TAN_TANH_SWITCH,
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

__all__ = [
    # Scalar Primitives — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Scalar Primitives — IEEE-safe wrappers
    "cos",
    "hypot",
    "ieee_divide",
    "safe_exp",
    "safe_log",
    "safe_pow",
    "safe_sqrt",
    "sin",
    "sqr",
    # Scalar Primitives — Epsilon comparisons
    "is_close",
    "is_valid_float",
    # Complex Functions — Constants
    "INT_POW_CHAIN_MAX",
    "SERIES_MAX",
    "SQRT_SERIES_RATIO",
    "TAN_TANH_SWITCH",
    # Complex Functions — Exceptions
    "ComplexDomainViolation",
    "NonconvergenceError",
    # Complex Functions — Functions
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
