"""
In-memory build telemetry.

Nothing is sent anywhere: events go to the log, counters and stage timings
stay in process so the CLI can report them and tests can assert them.
"""

from __future__ import annotations

import contextlib
import time
from collections.abc import Iterator
from typing import Any

from canvascomponents.observability.logging import get_logger

logger = get_logger("canvascomponents.telemetry")

_COUNTERS: dict[str, int] = {}
_LATENCIES: dict[str, list[float]] = {}


def log_event(event_name: str, **fields: Any) -> None:
    """
    Structured log event.

    Side Effects:
        - Writes to logger (debug level)
    """
    logger.debug("event=%s %s", event_name, fields)


def counter(name: str, increment: int = 1) -> int:
    """
    Increment an in-memory counter and emit a debug log.

    Side Effects:
        - Modifies _COUNTERS dict (in-memory state)
    """
    value = _COUNTERS.get(name, 0) + increment
    _COUNTERS[name] = value
    logger.debug("counter=%s value=%s", name, value)
    return value


def get_counter(name: str) -> int:
    return _COUNTERS.get(name, 0)


@contextlib.contextmanager
def time_block(stage: str) -> Iterator[None]:
    """
    Time a build stage. Samples are kept even when the stage raises.

    Side Effects:
        - Appends to _LATENCIES dict (in-memory state)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.debug("timing=%s seconds=%.6f", stage, elapsed)
        _LATENCIES.setdefault(stage, []).append(elapsed)


def get_latency_stats(stage: str) -> dict[str, float]:
    """Count, min, max and total seconds recorded for a stage."""
    samples = _LATENCIES.get(stage, [])
    if not samples:
        return {"count": 0, "min": 0.0, "max": 0.0, "total": 0.0}

    return {
        "count": len(samples),
        "min": min(samples),
        "max": max(samples),
        "total": sum(samples),
    }


def reset_counters() -> None:
    """Clear all counters (useful for tests)."""
    _COUNTERS.clear()


def reset_latencies() -> None:
    """Clear all recorded stage timings (useful for tests)."""
    _LATENCIES.clear()
