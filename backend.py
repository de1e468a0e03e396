# backend.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from errors import CollaboratorError, FlushError
from models import STALE_ID, TrackedSource
from pactl_parse import snapshot

log = logging.getLogger(__name__)


class Sources:
    """
    Long-lived list of application streams, keyed by name.

    pactl renumbers sink inputs whenever streams come and go; refresh() folds
    each new listing into the existing entries so that callers keep stable
    objects. Ids are only valid until the next refresh.
    """

    def __init__(self, binary: str = "pactl", refresh: bool = True) -> None:
        self.binary = binary
        self._sources: List[TrackedSource] = []

        if refresh:
            self.refresh()

    def __iter__(self) -> Iterator[TrackedSource]:
        return iter(self._sources)

    def __len__(self) -> int:
        return len(self._sources)

    def __getitem__(self, i: int) -> TrackedSource:
        return self._sources[i]

    def refresh(self) -> None:
        # snapshot first: a failed listing must leave the entries as they were
        records = snapshot(self.binary)

        kept = [s for s in self._sources if s.locked]
        evicted = len(self._sources) - len(kept)
        for s in kept:
            s.id = STALE_ID

        by_name: Dict[str, TrackedSource] = {s.name: s for s in kept}
        added = 0
        for rec in records:
            s = by_name.get(rec.name)
            if s is not None:
                s.id = rec.id
                s.volume = rec.volume
                s.mute = rec.mute
                continue
            s = TrackedSource.from_record(rec, binary=self.binary)
            kept.append(s)
            by_name[s.name] = s
            added += 1

        self._sources = kept
        log.debug(
            "refresh: %d streams, %d evicted, %d added, %d stale",
            len(records), evicted, added, sum(1 for s in kept if s.is_stale),
        )

    def find_by_id(self, sid: int) -> Optional[TrackedSource]:
        if sid == STALE_ID:
            return None
        for s in self._sources:
            if s.id == sid:
                return s
        return None

    def find_by_name(self, name: str) -> Optional[TrackedSource]:
        for s in self._sources:
            if name in s.name:
                return s
        return None

    def lock(self, name: str, locked: bool = True) -> bool:
        for s in self._sources:
            if s.name == name:
                s.locked = locked
                return True
        return False

    def apply_locks(self, names: Iterable[str]) -> None:
        wanted = set(names)
        for s in self._sources:
            if s.name in wanted:
                s.locked = True

    def states(self) -> Dict[str, Tuple[int, bool]]:
        return {s.name: s.state() for s in self._sources}

    def flush_all(self) -> None:
        for s in self._sources:
            if s.is_stale:
                log.debug("flush: skipping stale '%s'", s.name)
                continue
            try:
                s.flush()
            except CollaboratorError as e:
                raise FlushError(s, e) from e

    def flush_if_changed(self, source: TrackedSource, before: Tuple[int, bool]) -> bool:
        if source.state() == before:
            return False
        source.flush()
        return True
