"""Heap allocation counters for benchmark iterations.

The harness reads allocation counters through the AllocationCounter
protocol: ``snapshot()`` right before a call and ``since(before)`` right
after it.  Implementations:

- TracemallocCounter: bytes come from ``tracemalloc``.  The traced peak
  is reset at each snapshot, so ``since`` reports the highest amount of
  memory the call held above its starting point.  Temporaries the call
  allocates and frees before returning still count.
- BlockCounter: no tracing; bytes are reported as 0.
- NullCounter: no allocation metrics at all.

Allocation counts come from ``sys.getallocatedblocks``.  CPython exposes
no cumulative allocation counter, so this is the growth in live
allocator blocks across the call: blocks the call still holds when it
returns, not every allocation it made.  Negative growth is clamped to 0.
"""

from __future__ import annotations

import contextlib
import logging
import sys
import tracemalloc
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

log = logging.getLogger("microbench")


@dataclass(frozen=True)
class HeapSnapshot:
    """Allocation counters read at one point in time, or growth between two."""

    allocated_bytes: int = 0
    allocations: int = 0

    def delta(self, before: HeapSnapshot) -> HeapSnapshot:
        """Growth since *before*, with each field clamped to >= 0."""
        return HeapSnapshot(
            allocated_bytes=max(self.allocated_bytes - before.allocated_bytes, 0),
            allocations=max(self.allocations - before.allocations, 0),
        )


class AllocationCounter(Protocol):
    """Source of heap allocation counters."""

    def session(self) -> contextlib.AbstractContextManager[None]:
        """Context manager bracketing all measured iterations of one run."""
        ...

    def snapshot(self) -> HeapSnapshot:
        """Read the counters just before a call."""
        ...

    def since(self, before: HeapSnapshot) -> HeapSnapshot:
        """Non-negative allocation growth since *before*."""
        ...


# ---------------------------------------------------------------------------
# Implementations
# ---------------------------------------------------------------------------


class TracemallocCounter:
    """Peak traced bytes and live allocator block growth per call."""

    @contextlib.contextmanager
    def session(self) -> Iterator[None]:
        # Leave tracing alone if someone else already started it.
        started = not tracemalloc.is_tracing()
        if started:
            log.debug("Starting tracemalloc for allocation tracking")
            tracemalloc.start()
        try:
            yield
        finally:
            if started:
                tracemalloc.stop()

    def snapshot(self) -> HeapSnapshot:
        tracemalloc.reset_peak()
        current, _peak = tracemalloc.get_traced_memory()
        return HeapSnapshot(
            allocated_bytes=current,
            allocations=sys.getallocatedblocks(),
        )

    def since(self, before: HeapSnapshot) -> HeapSnapshot:
        _current, peak = tracemalloc.get_traced_memory()
        after = HeapSnapshot(allocated_bytes=peak, allocations=sys.getallocatedblocks())
        return after.delta(before)


class BlockCounter:
    """Live allocator block growth without tracing; bytes are always 0."""

    def session(self) -> contextlib.AbstractContextManager[None]:
        return contextlib.nullcontext()

    def snapshot(self) -> HeapSnapshot:
        return HeapSnapshot(allocations=sys.getallocatedblocks())

    def since(self, before: HeapSnapshot) -> HeapSnapshot:
        return self.snapshot().delta(before)


class NullCounter:
    """Reports no allocations."""

    def session(self) -> contextlib.AbstractContextManager[None]:
        return contextlib.nullcontext()

    def snapshot(self) -> HeapSnapshot:
        return HeapSnapshot()

    def since(self, before: HeapSnapshot) -> HeapSnapshot:
        return HeapSnapshot()


def default_counter(trace_memory: bool = True) -> AllocationCounter:
    """Return the counter matching the ``trace_memory`` setting."""
    return TracemallocCounter() if trace_memory else BlockCounter()
