# tests/io/test_traversal_logging.py
import json
import logging
from decimal import Decimal

from htree.domain.tree import HTree
from htree.io.traversal_logging import TraversalLogging, _default_json_logger

LOGGER = "htree.tests.traversal"


def _records(caplog):
    return [r for r in caplog.records if r.name == LOGGER]


def test_start_and_end_records(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    hooks = TraversalLogging(run_id="t-1", logger=logging.getLogger(LOGGER))
    segs = list(HTree(2).segments(hooks=hooks))

    recs = _records(caplog)
    assert [r.getMessage() for r in recs] == ["traversal_start", "traversal_end"]
    assert recs[0].extra["expected"] == 21
    assert recs[0].extra["run_id"] == "t-1"
    assert recs[1].extra["produced"] == len(segs) == 21
    assert recs[1].extra["completed"] is True


def test_debug_samples_segments(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    hooks = TraversalLogging(debug=True, sample_every=2, logger=logging.getLogger(LOGGER))
    list(HTree(1).segments(hooks=hooks))

    seg_recs = [r for r in _records(caplog) if r.getMessage() == "segment"]
    assert [r.extra["seq"] for r in seg_recs] == [2, 4]
    assert seg_recs[0].extra["depth"] == 1
    assert len(seg_recs[0].extra["coords"]) == 2


def test_early_close_is_reported(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    hooks = TraversalLogging(logger=logging.getLogger(LOGGER))
    it = HTree(5).segments(hooks=hooks)
    next(it)
    next(it)
    it.close()

    last = _records(caplog)[-1]
    assert last.getMessage() == "traversal_stopped"
    assert last.extra["produced"] == 2
    assert last.extra["completed"] is False


def test_traversals_are_numbered(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    hooks = TraversalLogging(logger=logging.getLogger(LOGGER))
    tree = HTree(0)
    list(tree.segments(hooks=hooks))
    list(tree.segments(hooks=hooks))
    starts = [r for r in _records(caplog) if r.getMessage() == "traversal_start"]
    assert [r.extra["traversal"] for r in starts] == [1, 2]


def test_json_formatter_handles_decimals():
    logger = _default_json_logger(name="htree.tests.json", level="DEBUG")
    fmt = logger.handlers[0].formatter
    rec = logger.makeRecord(
        logger.name,
        logging.INFO,
        __file__,
        1,
        "hello",
        (),
        None,
        extra={"extra": {"order": 2, "x": Decimal("0.5")}},
    )
    out = json.loads(fmt.format(rec))
    assert out["msg"] == "hello"
    assert out["level"] == "INFO"
    assert out["order"] == 2 and out["x"] == "0.5"
