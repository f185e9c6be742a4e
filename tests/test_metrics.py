# tests/test_metrics.py
import pytest

from multitrie.utils.logger_utils import Log
from multitrie.utils.metrics_tracker import Metrics


def test_record_and_avg():
    m = Metrics()
    m.record("search", 0.2)
    m.record("search", 0.4)
    assert m.avg("search") == pytest.approx(0.3)
    assert m.count("search") == 2
    assert m.avg("missing") == 0.0
    assert m.snapshot()["search"]["count"] == 2


def test_time_block_records_into_metrics():
    m = Metrics()
    with Log.time_block("load", m) as timer:
        sum(range(100))
    assert m.count("load") == 1
    assert timer.elapsed >= 0.0


def test_reset():
    m = Metrics()
    m.record("x", 1.0)
    m.reset()
    assert m.snapshot() == {}


def test_avg_of_missing_key_does_not_create_it():
    m = Metrics()
    assert m.avg("never") == 0.0
    assert m.snapshot() == {}
