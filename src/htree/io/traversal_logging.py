# io/traversal_logging.py
import json
import logging
import sys

from htree.traversal.hooks import NoopHooks


def _default_json_logger(name="htree", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                # Decimal / numpy scalars
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def _coords(segment):
    (x0, y0), (x1, y1) = segment
    return [[float(x0), float(y0)], [float(x1), float(y1)]]


class TraversalLogging(NoopHooks):
    """
    Structured logs for one or more traversals.
    Start/end at INFO; per-segment records only with debug=True, one every
    `sample_every` segments.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._runs = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, "traversal": self._runs}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def traversal_start(self, *, order: int, expected: int):
        self._runs += 1
        self._emit("INFO", "traversal_start", order=order, expected=expected)

    def segment(self, branch, *, seq: int):
        if self.debug and (seq % self.sample_every) == 0:
            self._emit("DEBUG", "segment", seq=seq, depth=branch.depth, coords=_coords(branch.segment))

    def traversal_end(self, *, produced: int, wall_ms: float, completed: bool):
        self._emit(
            "INFO",
            "traversal_end" if completed else "traversal_stopped",
            produced=produced,
            wall_ms=round(wall_ms, 3),
            completed=completed,
        )
