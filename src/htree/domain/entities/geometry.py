from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


# Core geometry types produced by the generator
class Point(NamedTuple, Generic[T]):
    x: T  # unit space, 0 <= x <= 1
    y: T  # unit space, 0 <= y <= 1/sqrt(2)


class Segment(NamedTuple, Generic[T]):
    start: Point[T]
    stop: Point[T]

    def delta(self) -> tuple[T, T]:
        return self.stop[0] - self.start[0], self.stop[1] - self.start[1]

    def direction(self) -> tuple[int, int]:
        """Sign of the (dx, dy) step, e.g. (1, 0) for a left-to-right stroke."""
        dx, dy = self.delta()
        # int() first: numpy bools refuse subtraction
        return int(dx > 0) - int(dx < 0), int(dy > 0) - int(dy < 0)

    def midpoint(self) -> Point[T]:
        (x0, y0), (x1, y1) = self
        return Point((x0 + x1) / 2, (y0 + y1) / 2)

    def length(self, sqrt=None) -> T:
        dx, dy = self.delta()
        # axis-aligned strokes need no root
        if dx == 0:
            return abs(dy)
        if dy == 0:
            return abs(dx)
        square = dx * dx + dy * dy
        if sqrt is not None:
            return sqrt(square)
        # Decimal and friends carry their own root; ** 0.5 would leave the type
        own = getattr(square, "sqrt", None)
        return own() if own is not None else square**0.5

    def reversed(self) -> "Segment[T]":
        return Segment(self.stop, self.start)

    def scaled(self, factor) -> "Segment":
        """Multiply every coordinate by `factor` (e.g. pixels per unit)."""
        (x0, y0), (x1, y1) = self
        return Segment(Point(x0 * factor, y0 * factor), Point(x1 * factor, y1 * factor))
