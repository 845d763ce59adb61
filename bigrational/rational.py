"""Canonical arbitrary-precision rationals with NumPy interoperability."""
from __future__ import annotations

import math
import numbers
from fractions import Fraction
from typing import Any, Iterable, Optional, Tuple, Union

import numpy as np

IntegerLike = Union[numbers.Integral, np.integer]

# Stays below the smallest limit accepted by sys.set_int_max_str_digits.
_CHUNK_DIGITS = 500
_CHUNK = 10**_CHUNK_DIGITS


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _decimal_digits(value: int) -> str:
    """Render *value* in base 10 regardless of the int-to-str digit limit."""
    if value < 0:
        return "-" + _decimal_digits(-value)
    chunks = []
    while value >= _CHUNK:
        value, low = divmod(value, _CHUNK)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


def canonicalize(numerator: int, denominator: int) -> Tuple[int, int]:
    """Return the canonical ``(numerator, denominator)`` pair for ``n/d``.

    Defined for every integer pair. A zero denominator folds into one of the
    three sentinels ``0/0`` (NaN), ``1/0`` and ``-1/0``; a zero numerator
    becomes ``0/1``; everything else is fully reduced with a positive
    denominator.
    """
    num, den = numerator, denominator
    if den < 0:
        num, den = -num, -den

    if den == 0:
        if num == 0:
            return 0, 0
        return (1, 0) if num > 0 else (-1, 0)

    if num == 0:
        return 0, 1

    # Shortcuts for already-reduced or trivially reducible pairs.
    if den == 1 or num == 1:
        return num, den
    if num == den:
        return 1, 1
    if 2 * num == den:
        return 1, 2

    gcd = math.gcd(num, den)
    return num // gcd, den // gcd


class BigRational:
    """Immutable rational number kept in canonical form.

    ``BigRational()`` is NaN, ``BigRational(n)`` is ``n/1`` and
    ``BigRational(n, d)`` is the reduced form of ``n/d``. Zero denominators
    never raise: they produce NaN or one of the signed infinities.
    """

    __slots__ = ("_numerator", "_denominator")

    ZERO: "BigRational"
    ONE: "BigRational"
    HALF: "BigRational"
    NAN: "BigRational"
    POSITIVE_INFINITY: "BigRational"
    NEGATIVE_INFINITY: "BigRational"

    def __new__(
        cls,
        numerator: Optional[IntegerLike] = None,
        denominator: Optional[IntegerLike] = None,
    ) -> "BigRational":
        if numerator is None:
            if denominator is not None:
                raise TypeError("denominator given without numerator")
            num, den = 0, 0
        else:
            num = _ensure_int(numerator, name="numerator")
            den = 1 if denominator is None else _ensure_int(denominator, name="denominator")
            num, den = canonicalize(num, den)

        self = super().__new__(cls)
        object.__setattr__(self, "_numerator", num)
        object.__setattr__(self, "_denominator", den)
        return self

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_fraction(cls, value: Fraction) -> "BigRational":
        """Create a :class:`BigRational` from :class:`fractions.Fraction`."""
        if not isinstance(value, Fraction):
            raise TypeError(f"expected Fraction, got {type(value)!r}")
        return cls(value.numerator, value.denominator)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_components(self) -> Tuple[int, int]:
        return self._numerator, self._denominator

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value.

        NaN and the infinities have no :class:`Fraction` counterpart and raise
        :class:`ValueError`.
        """
        if self._denominator == 0:
            raise ValueError(f"cannot convert {self} to Fraction")
        return Fraction(self._numerator, self._denominator)

    def is_nan(self) -> bool:
        return is_nan(self)

    def is_positive_infinity(self) -> bool:
        return is_positive_infinity(self)

    def is_negative_infinity(self) -> bool:
        return is_negative_infinity(self)

    def is_infinity(self) -> bool:
        return is_infinity(self)

    def is_finite(self) -> bool:
        return is_finite(self)

    # ------------------------------------------------------------------
    # Immutability
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "BigRational":
        return self

    def __deepcopy__(self, memo: Any) -> "BigRational":
        return self

    def __reduce__(self):
        # Unpickling goes back through the canonicalizing constructor.
        return (type(self), (self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # Equality
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BigRational):
            return NotImplemented
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        num = _decimal_digits(self._numerator)
        den = _decimal_digits(self._denominator)
        return f"{type(self).__name__}({num}, {den})"

    def __str__(self) -> str:
        if is_nan(self):
            return "NaN"
        if is_positive_infinity(self):
            return "+Infinity"
        if is_negative_infinity(self):
            return "-Infinity"
        return f"{_decimal_digits(self._numerator)}/{_decimal_digits(self._denominator)}"


ZERO = BigRational(0, 1)
ONE = BigRational(1, 1)
HALF = BigRational(1, 2)
NAN = BigRational(0, 0)
POSITIVE_INFINITY = BigRational(1, 0)
NEGATIVE_INFINITY = BigRational(-1, 0)

BigRational.ZERO = ZERO
BigRational.ONE = ONE
BigRational.HALF = HALF
BigRational.NAN = NAN
BigRational.POSITIVE_INFINITY = POSITIVE_INFINITY
BigRational.NEGATIVE_INFINITY = NEGATIVE_INFINITY


# ----------------------------------------------------------------------
# Predicates
def _object_array(items) -> np.ndarray:
    items = list(items)
    result = np.empty(len(items), dtype=object)
    for index, item in enumerate(items):
        result[index] = item
    return result


def _elementwise(predicate, value):
    def checked(item):
        if not isinstance(item, BigRational):
            raise TypeError(f"expected BigRational, got {type(item)!r}")
        return predicate(item)

    if isinstance(value, list):
        value = _object_array(value)
    if isinstance(value, np.ndarray):
        vectorised = np.vectorize(checked, otypes=[bool])
        return vectorised(value)
    return checked(value)


def _is_nan(value: BigRational) -> bool:
    return value == NAN


def _is_positive_infinity(value: BigRational) -> bool:
    return value == POSITIVE_INFINITY


def _is_negative_infinity(value: BigRational) -> bool:
    return value == NEGATIVE_INFINITY


def _is_infinity(value: BigRational) -> bool:
    return _is_positive_infinity(value) or _is_negative_infinity(value)


def _is_finite(value: BigRational) -> bool:
    return not _is_infinity(value) and not _is_nan(value)


def is_nan(value):
    """Return whether *value* is NaN; NumPy arrays are tested element-wise."""
    return _elementwise(_is_nan, value)


def is_positive_infinity(value):
    return _elementwise(_is_positive_infinity, value)


def is_negative_infinity(value):
    return _elementwise(_is_negative_infinity, value)


def is_infinity(value):
    return _elementwise(_is_infinity, value)


def is_finite(value):
    """Return whether *value* is neither NaN nor infinite."""
    return _elementwise(_is_finite, value)


# ----------------------------------------------------------------------
# NumPy helpers
def _coerce_element(value: Any) -> BigRational:
    if isinstance(value, BigRational):
        return value
    if isinstance(value, Fraction):
        return BigRational.from_fraction(value)
    if isinstance(value, tuple):
        if len(value) != 2:
            raise ValueError(f"expected a (numerator, denominator) pair, got {value!r}")
        return BigRational(*value)
    return BigRational(value)


def as_rational_array(values: Iterable[Any]) -> np.ndarray:
    """Return an object array of canonical :class:`BigRational` values.

    Elements may be :class:`BigRational` instances, integers, fractions or
    ``(numerator, denominator)`` pairs. NumPy arrays keep their shape; other
    iterables produce a one-dimensional array.
    """
    if isinstance(values, np.ndarray):
        source = values.astype(object)
    else:
        source = _object_array(values)
    if source.size == 0:
        return source
    vectorised = np.vectorize(_coerce_element, otypes=[object])
    return vectorised(source)


def _filled(shape, value: BigRational) -> np.ndarray:
    result = np.empty(shape, dtype=object)
    result.fill(value)
    return result


def zeros(shape) -> np.ndarray:
    """Return an object array of ``shape`` filled with :data:`ZERO`."""
    return _filled(shape, ZERO)


def zeros_like(array: Any) -> np.ndarray:
    return _filled(np.shape(array), ZERO)


def nans(shape) -> np.ndarray:
    """Return an object array of ``shape`` filled with :data:`NAN`."""
    return _filled(shape, NAN)


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
