"""Time-ordered queue of entity turns."""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from datetime import timedelta
from time import perf_counter
from typing import Callable, Iterable, Optional

log = logging.getLogger(__name__)

_BASE_CLEANUP_THRESHOLD = 100


@dataclass(frozen=True, order=True)
class TurnEntry:
    """A scheduled turn; ordered by time, then by entity id."""

    time: int = 0
    entity_id: int = 0


def _format_duration(duration: timedelta) -> str:
    seconds = duration.total_seconds()
    if seconds == 0:
        return "0s"
    return f"{seconds:g}s"


@dataclass(frozen=True)
class CleanupMetrics:
    """What a cleanup pass did."""

    entities_removed: int = 0
    queue_size_before: int = 0
    queue_size_after: int = 0
    processing_time: timedelta = timedelta(0)

    def __str__(self) -> str:
        return (
            f"CleanupMetrics{{Removed: {self.entities_removed}, "
            f"Before: {self.queue_size_before}, After: {self.queue_size_after}, "
            f"Time: {_format_duration(self.processing_time)}}}"
        )


class TurnQueue:
    """Min-heap of turn entries; the earliest time comes out first."""

    def __init__(self) -> None:
        self._heap: list[TurnEntry] = []
        self.current_time = 0
        self.operations_since_cleanup = 0
        self.total_cleanups = 0
        self.total_entities_removed = 0

    def add(self, entity_id: int, time: int) -> None:
        heapq.heappush(self._heap, TurnEntry(time, entity_id))
        log.debug("Added entity %d to turn queue with time %d", entity_id, time)

    def remove(self, entity_id: int) -> bool:
        """Remove the first entry of ``entity_id``; return whether one was found."""
        index = next(
            (i for i, entry in enumerate(self._heap) if entry.entity_id == entity_id),
            None,
        )
        if index is None:
            log.debug("TurnQueue: Entity %d not found in queue", entity_id)
            return False
        del self._heap[index]
        heapq.heapify(self._heap)
        return True

    def pop(self) -> Optional[TurnEntry]:
        """Remove and return the earliest entry, or None if the queue is empty."""
        if not self._heap:
            return None
        entry = heapq.heappop(self._heap)
        log.debug(
            "Popped entity %d from turn queue (time: %d)", entry.entity_id, entry.time
        )
        return entry

    def peek(self) -> Optional[TurnEntry]:
        """Return the earliest entry without removing it, or None."""
        if not self._heap:
            return None
        entry = self._heap[0]
        log.debug(
            "Peeked entity %d from turn queue (time: %d)", entry.entity_id, entry.time
        )
        return entry

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def snapshot(self) -> list[TurnEntry]:
        """A copy of all entries, in heap order."""
        return list(self._heap)

    def restore(self, entries: Iterable[TurnEntry]) -> None:
        """Replace the queue's contents with ``entries``."""
        self._heap = list(entries)
        heapq.heapify(self._heap)

    def sorted_entries(self) -> list[TurnEntry]:
        """All entries in processing order."""
        return sorted(self._heap)

    def describe(self) -> str:
        """A readable dump of the queue, also written to the debug log."""
        if self.is_empty():
            text = "---- Turn Queue: EMPTY ----"
            log.debug(text)
            return text

        lines = [
            "---- Turn Queue Contents ----",
            f"Current Game Time: {self.current_time}",
            f"Queue Size: {len(self)}",
            "Queue (in heap order):",
        ]
        lines.extend(
            f"[{i}] EntityID: {e.entity_id}, Time: {e.time} "
            f"(Δ{e.time - self.current_time} from current)"
            for i, e in enumerate(self._heap)
        )
        lines.append("")
        lines.append("Processing order (sorted by time):")
        lines.extend(
            f"{i}. EntityID: {e.entity_id}, Time: {e.time} "
            f"(Δ{e.time - self.current_time} from current)"
            for i, e in enumerate(self.sorted_entries(), start=1)
        )
        lines.append("----------------------------")
        text = "\n".join(lines)
        log.debug(text)
        return text

    def cleanup_threshold(self, entity_count: int) -> int:
        """Operations between cleanups, scaled by world and queue size."""
        size = len(self)
        if entity_count > 1000 or size > 500:
            return _BASE_CLEANUP_THRESHOLD // 2
        if entity_count < 100 and size < 50:
            return _BASE_CLEANUP_THRESHOLD * 2
        return _BASE_CLEANUP_THRESHOLD

    def cleanup(
        self, is_valid: Callable[[int], bool], entity_count: int
    ) -> CleanupMetrics:
        """Drop entries whose entity is no longer a valid turn actor.

        Runs only once enough operations have been counted since the last
        cleanup; otherwise it counts this call and returns empty metrics.
        """
        if self.operations_since_cleanup < self.cleanup_threshold(entity_count):
            self.operations_since_cleanup += 1
            return CleanupMetrics()

        log.debug("TurnQueue: Cleaning up dead entities...")
        before = len(self)
        start = perf_counter()

        kept: list[TurnEntry] = []
        removed = 0
        for entry in sorted(self._heap):
            if is_valid(entry.entity_id):
                kept.append(entry)
            else:
                removed += 1
                log.debug(
                    "TurnQueue: Removed dead entity from turn queue: %d",
                    entry.entity_id,
                )

        self._heap = kept
        heapq.heapify(self._heap)

        self.operations_since_cleanup = 0
        self.total_cleanups += 1
        self.total_entities_removed += removed

        metrics = CleanupMetrics(
            entities_removed=removed,
            queue_size_before=before,
            queue_size_after=len(self),
            processing_time=timedelta(seconds=perf_counter() - start),
        )
        log.debug("TurnQueue: Cleanup finished. %s", metrics)
        return metrics