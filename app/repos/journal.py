"""Undo journal shared by the in-memory repositories.

Every in-memory write registers a callable that reverses it, before it
touches any state, so a write outside a transaction fails cleanly.  The unit
of work replays those callables newest-first when a transaction fails,
so an aborted operation leaves no trace.
"""

from __future__ import annotations

from collections.abc import Callable

Undo = Callable[[], None]


class UndoJournal:
    def __init__(self) -> None:
        self._entries: list[Undo] | None = None

    @property
    def active(self) -> bool:
        return self._entries is not None

    def begin(self) -> None:
        if self._entries is not None:
            raise RuntimeError("transaction already in progress")
        self._entries = []

    def record(self, undo: Undo) -> None:
        if self._entries is None:
            raise RuntimeError("write attempted outside a transaction")
        self._entries.append(undo)

    def commit(self) -> None:
        self._entries = None

    def rollback(self) -> None:
        entries, self._entries = self._entries or [], None
        for undo in reversed(entries):
            undo()
