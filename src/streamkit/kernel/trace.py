"""Runtime trace of stream pipelines.

Trace never takes part in the values flowing through a pipeline. Each
pipeline owns one root event; linked stages and terminal operations are
recorded as its children. Tree relationships are rebuilt only on demand via
as_tree().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single pipeline event captured at runtime."""

    action: str = ""
    id: int = field(default=0)
    parent_id: int | None = field(default=None)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = field(default=None)


class Trace:
    """Event log shared by every stage of one or more pipelines.

    A pipeline is opened with pipeline(), which returns the root event id.
    stage() and terminal() hang their events off that root. A disabled trace
    records nothing and hands out None instead of ids.

    Single-threaded only, like the iterators it observes.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []

    def pipeline(self, name: str) -> int | None:
        """Open a pipeline and return its root event id."""
        return self._append("pipeline", None, {"name": name})

    def stage(self, root_id: int | None, op: str) -> int | None:
        """Record a non-terminal operator linked into the pipeline ``root_id``."""
        return self._append("stage", root_id, {"op": op})

    def terminal(self, root_id: int | None, op: str, duration_ms: float) -> int | None:
        """Record a terminal operation of the pipeline ``root_id`` and how long it ran."""
        return self._append("terminal", root_id, {"op": op}, duration_ms)

    def _append(
        self,
        action: str,
        parent_id: int | None,
        info: dict[str, Any],
        duration_ms: float | None = None,
    ) -> int | None:
        if not self.enabled:
            return None
        event_id = len(self._events)
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                info=info,
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find_all(self, **kwargs: Any) -> list[Evidence]:
        """Events whose attributes or info entries match every keyword."""
        return [
            e
            for e in self._events
            if all(e.info.get(k) == v or getattr(e, k, None) == v for k, v in kwargs.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent id (None for pipeline roots) to its child event ids."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Drop all events; ids restart from zero."""
        self._events.clear()
