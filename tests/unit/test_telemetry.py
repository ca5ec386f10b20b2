"""Tests for in-memory counters and stage timings."""

from __future__ import annotations

import pytest

from canvascomponents.observability.telemetry import (
    counter,
    get_counter,
    get_latency_stats,
    reset_counters,
    time_block,
)


class TestCounters:
    """Tests for counter / get_counter"""

    def test_increment(self):
        assert counter("widgets") == 1
        assert counter("widgets", 2) == 3
        assert get_counter("widgets") == 3

    def test_unknown_counter_is_zero(self):
        assert get_counter("never.touched") == 0

    def test_reset(self):
        counter("widgets")
        reset_counters()
        assert get_counter("widgets") == 0


class TestTimeBlock:
    """Tests for time_block / get_latency_stats"""

    def test_records_samples(self):
        with time_block("stage.a"):
            pass
        with time_block("stage.a"):
            pass

        stats = get_latency_stats("stage.a")
        assert stats["count"] == 2
        assert 0.0 <= stats["min"] <= stats["max"]
        assert stats["total"] >= stats["max"]

    def test_records_when_stage_raises(self):
        with pytest.raises(RuntimeError):
            with time_block("stage.fail"):
                raise RuntimeError("boom")

        assert get_latency_stats("stage.fail")["count"] == 1

    def test_empty_stats(self):
        assert get_latency_stats("stage.none") == {"count": 0, "min": 0.0, "max": 0.0, "total": 0.0}
