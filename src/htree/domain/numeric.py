# htree/domain/numeric.py
import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Generic, TypeVar

import numpy as np

from htree.app.protocols import HasSqrt, RealLike

log = logging.getLogger(__name__)

T = TypeVar("T", bound=RealLike)

NUMERIC_TYPES: dict[str, type] = {
    "float": float,
    "float32": np.float32,
    "float64": np.float64,
    "longdouble": np.longdouble,
    "decimal": Decimal,
}


def _sqrt_for(numeric: type) -> Callable[[Any], Any]:
    if numeric is float:
        return math.sqrt
    if isinstance(numeric, type) and issubclass(numeric, np.floating):
        # np.sqrt keeps the scalar's precision (float32 stays float32)
        return np.sqrt
    if isinstance(numeric, type) and issubclass(numeric, HasSqrt):
        return lambda v: v.sqrt()
    raise TypeError(f"{getattr(numeric, '__name__', numeric)!r} has no square root")


@dataclass(frozen=True)
class Arithmetic(Generic[T]):
    """
    The operations the H-tree construction needs, bound to one numeric type.

    Resolution rules:
      • float -> math.sqrt
      • numpy floating scalars -> numpy.sqrt (dtype preserved)
      • anything with a .sqrt() method (Decimal, mpmath-style types) -> that method
    The square root of 2 must come back as the same type, otherwise the type is
    rejected: Fraction or int coordinates would silently turn into floats.
    """

    numeric: type
    sqrt: Callable[[T], T] = field(repr=False, compare=False)
    half: T = field(repr=False, compare=False)
    quarter: T = field(repr=False, compare=False)
    inv_sqrt2: T = field(repr=False, compare=False)

    @classmethod
    def for_type(cls, numeric: "type | str") -> "Arithmetic":
        if isinstance(numeric, str):
            try:
                numeric = NUMERIC_TYPES[numeric]
            except KeyError:
                raise TypeError(
                    f"unknown numeric type {numeric!r}; expected one of {sorted(NUMERIC_TYPES)}"
                ) from None
        if not callable(numeric):
            raise TypeError(f"numeric type must be callable, got {numeric!r}")
        sqrt = _sqrt_for(numeric)
        one = numeric(1)
        root2 = sqrt(numeric(2))
        if type(root2) is not type(one):
            raise TypeError(
                f"square root of {numeric.__name__} returned {type(root2).__name__}; "
                "coordinates must stay in one numeric type"
            )
        inv_sqrt2 = one / root2
        log.debug("resolved arithmetic for %s (1/sqrt(2) = %r)", numeric.__name__, inv_sqrt2)
        return cls(
            numeric=numeric,
            sqrt=sqrt,
            half=one / numeric(2),
            quarter=one / numeric(4),
            inv_sqrt2=inv_sqrt2,
        )

    def of(self, value: int) -> T:
        return self.numeric(value)
