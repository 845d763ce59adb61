"""Canonical arbitrary-precision rational numbers."""

from .rational import (
    HALF,
    NAN,
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    BigRational,
    as_rational_array,
    canonicalize,
    is_finite,
    is_infinity,
    is_nan,
    is_negative_infinity,
    is_positive_infinity,
    nans,
    zeros,
    zeros_like,
)

__all__ = [
    "BigRational",
    "canonicalize",
    "ZERO",
    "ONE",
    "HALF",
    "NAN",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "is_nan",
    "is_positive_infinity",
    "is_negative_infinity",
    "is_infinity",
    "is_finite",
    "as_rational_array",
    "zeros",
    "zeros_like",
    "nans",
]
