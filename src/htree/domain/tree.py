# htree/domain/tree.py
"""
HTree value and its lazy, depth-first traversal.

Traversal order is pre-order: a stroke is yielded, then each of its four
children (see htree.domain.branching.children) is expanded completely before
the next sibling. For order 1:

    trunk, start+90, start-90, stop+90, stop-90

Memory is bounded by the pending stack (at most 3 * order + 1 entries) and the
per-depth span table; time and output size are O(4**order). There is no upper
limit on `order` and no depth at which traversal fails, but the numeric type
bounds what the coordinates can show:

  • once a half-span is below half an ulp of its centre, a stroke's endpoints
    coincide (float64 around depth 108, float32 around depth 50, float16
    around depth 22); such strokes are still yielded and still branch
  • spans themselves underflow to zero (float64 past depth ~2150, float16
    past depth ~46); they never overflow, since they only shrink
  • Decimal keeps the active context's precision
"""

import logging
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

from htree.domain.branching import (
    ROOT_DIRECTION,
    Direction,
    HalfSpans,
    bounds,
    children,
    root_segment,
)
from htree.domain.entities.geometry import Segment
from htree.domain.numeric import Arithmetic
from htree.traversal.hooks import NoopHooks, TraversalHooks

log = logging.getLogger(__name__)


class Branch(NamedTuple):
    segment: Segment
    depth: int
    parent: Segment | None = None  # None => trunk
    direction: Direction = ROOT_DIRECTION


@dataclass(frozen=True)
class HTree:
    order: int
    numeric: type = float
    _arith: Arithmetic = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if isinstance(self.order, bool) or not isinstance(self.order, (int, np.integer)):
            raise TypeError(f"order must be an int, got {type(self.order).__name__}")
        if self.order < 0:
            raise ValueError(f"order must be >= 0, got {self.order}")
        arith = Arithmetic.for_type(self.numeric)
        object.__setattr__(self, "order", int(self.order))
        object.__setattr__(self, "numeric", arith.numeric)
        object.__setattr__(self, "_arith", arith)
        log.debug("HTree(order=%d, numeric=%s)", self.order, arith.numeric.__name__)

    # ------------- Sizes -----------------------------

    @staticmethod
    def segment_count(order: int) -> int:
        """1 + 4 + ... + 4**order."""
        return (4 ** (order + 1) - 1) // 3

    def __len__(self) -> int:
        return self.segment_count(self.order)

    def bounds(self):
        return bounds(self._arith)

    def root(self) -> Segment:
        return root_segment(self._arith)

    # ------------- Traversal -------------------------

    def __iter__(self) -> Iterator[Segment]:
        return self.segments()

    def segments(self, hooks: TraversalHooks | None = None) -> Iterator[Segment]:
        walk = self.branches(hooks)
        try:
            for branch in walk:
                yield branch.segment
        finally:
            walk.close()

    def branches(self, hooks: TraversalHooks | None = None) -> Iterator[Branch]:
        """Fresh pre-order iterator over every stroke with its depth and parent."""
        hooks = hooks or NoopHooks()
        arith = self._arith
        spans = HalfSpans(arith)
        t0 = time.perf_counter()
        hooks.traversal_start(order=self.order, expected=self.segment_count(self.order))
        produced, completed = 0, False
        stack = [Branch(root_segment(arith), 0)]
        try:
            while stack:
                branch = stack.pop()
                if branch.depth < self.order:
                    depth = branch.depth + 1
                    kids = children(branch.segment, branch.direction, spans[depth], arith)
                    # reversed so the first child is popped next
                    stack.extend(
                        Branch(kid, depth, branch.segment, d) for kid, d in reversed(kids)
                    )
                produced += 1
                hooks.segment(branch, seq=produced)
                yield branch
            completed = True
        finally:
            hooks.traversal_end(
                produced=produced,
                wall_ms=(time.perf_counter() - t0) * 1000,
                completed=completed,
            )
