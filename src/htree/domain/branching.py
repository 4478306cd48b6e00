"""
H-tree subdivision rule.

Every stroke is axis-aligned. A stroke at depth d spans 2 * half_span(d) and
the next generation is rotated a quarter turn and shorter by 1/sqrt(2):

    depth 0   horizontal trunk   ((1/4, h/2), (3/4, h/2)),  h = 1/sqrt(2)
    depth 1   vertical strokes centered on the trunk's endpoints
    depth 2   horizontal strokes centered on those endpoints, ...

Each endpoint of a parent receives two children: the parent's direction turned
+90 degrees and turned -90 degrees. Both are centered on the endpoint, so they
cover the same stroke in opposite orientations.

Directions are carried alongside strokes rather than read back from
coordinates: once a span drops below the resolution of the coordinates the
stroke collapses to a point, and its children must still be placed.

With this placement the whole tree stays inside [0, 1] x [0, 1/sqrt(2)].
"""

from htree.domain.entities.geometry import Point, Segment
from htree.domain.numeric import Arithmetic

Direction = tuple[int, int]

ROOT_DIRECTION: Direction = (1, 0)

# (dx, dy) -> (dx, dy) turned counter-clockwise / clockwise
_TURNS = (
    lambda dx, dy: (-dy, dx),
    lambda dx, dy: (dy, -dx),
)


class HalfSpans:
    """Half-lengths per depth, extended on demand.

    depth 0 is 1/4, depth 1 is 1/4 * 1/sqrt(2), and every later depth halves
    the one two levels up. Halving is exact in binary and decimal types until
    the value underflows, so 1/sqrt(2) is the only rounded factor and there is
    no power of two that could overflow.
    """

    def __init__(self, arith: Arithmetic):
        self._half = arith.half
        self._spans = [arith.quarter, arith.quarter * arith.inv_sqrt2]

    def __getitem__(self, depth: int):
        spans = self._spans
        while len(spans) <= depth:
            spans.append(spans[-2] * self._half)
        return spans[depth]


def half_span(depth: int, arith: Arithmetic):
    """Half the length of a depth-`depth` stroke: 1/4 * (1/sqrt(2))**depth."""
    return HalfSpans(arith)[depth]


def bounds(arith: Arithmetic):
    """(width, height) of the box that contains every stroke."""
    return arith.of(1), arith.inv_sqrt2


def root_segment(arith: Arithmetic) -> Segment:
    return centered(
        Point(arith.half, arith.inv_sqrt2 * arith.half), ROOT_DIRECTION, arith.quarter, arith
    )


def centered(center: Point, direction: Direction, span, arith: Arithmetic) -> Segment:
    """Stroke of half-length `span` through `center`, oriented along `direction`."""
    dx, dy = direction
    ox, oy = span * arith.of(dx), span * arith.of(dy)
    return Segment(
        Point(center.x - ox, center.y - oy),
        Point(center.x + ox, center.y + oy),
    )


def children(
    segment: Segment, direction: Direction, span, arith: Arithmetic
) -> list[tuple[Segment, Direction]]:
    """The four strokes spawned by `segment`, which points along `direction`.

    `span` is the children's half-length. Order: start endpoint (+90, -90),
    then stop endpoint (+90, -90).
    """
    out = []
    for end in (segment.start, segment.stop):
        for turn in _TURNS:
            d = turn(*direction)
            out.append((centered(end, d, span, arith), d))
    return out
