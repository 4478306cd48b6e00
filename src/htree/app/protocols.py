from typing import Protocol, runtime_checkable

from htree.domain.entities.geometry import Segment


# ------------- Numbers --------------------
class RealLike(Protocol):
    """
    What the generator needs from a coordinate type:
      • construction from small ints: T(1), T(4)
      • + - * / between values of T
      • ordering against T(0) (sign of a step)
    Square root is resolved separately, see htree.domain.numeric.
    """

    def __add__(self, other, /): ...
    def __sub__(self, other, /): ...
    def __mul__(self, other, /): ...
    def __truediv__(self, other, /): ...
    def __neg__(self): ...
    def __lt__(self, other, /) -> bool: ...
    def __gt__(self, other, /) -> bool: ...


@runtime_checkable
class HasSqrt(Protocol):
    def sqrt(self): ...


# ------------- Traversal --------------------
@runtime_checkable
class BranchLike(Protocol):
    segment: Segment
    depth: int
    parent: Segment | None
    direction: tuple[int, int]
