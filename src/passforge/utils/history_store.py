import itertools
import json
import logging
import secrets
from collections import deque
from typing import List

import pendulum

from passforge.config.config_passforge import HISTORY_SLOT, MAX_HISTORY, ID_SUFFIX_LEN
from passforge.errors import PersistenceCorrupt, PersistenceWriteFailed
from .HistoryEntry import HistoryEntry, entries_to_json
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


class HistoryStore:
    """
    Capacity-limited, newest-first ledger of archived secrets.

    The ledger is a bounded deque: archive() pushes to the front and the
    oldest entry falls off the back once MAX_HISTORY is exceeded. Every
    mutation overwrites the persisted slot. Persistence is best-effort:
    a corrupt slot at load time yields an empty store, and write
    failures are logged and swallowed.
    """

    def __init__(self, kv: KeyValueStore | None = None,
                 slot: str = HISTORY_SLOT,
                 capacity: int = MAX_HISTORY,
                 clock=pendulum.now):
        self.kv = kv if kv is not None else KeyValueStore()
        self.slot = slot
        self.capacity = capacity
        self._clock = clock
        self._counter = itertools.count(1)
        self._entries: deque[HistoryEntry] = deque(self._load(), maxlen=capacity)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f"HistoryStore(slot={self.slot}, entries={len(self)}/{self.capacity})"

    # ==============================================================
    # Public API
    # ==============================================================
    def archive(self, value: str) -> HistoryEntry | None:
        """
        Add a secret to the front of the ledger.

        Args:
            value: Secret to archive.

        Returns:
            The new entry, or None if value is empty.

        Side Effects:
            Evicts the oldest entry beyond capacity.
            Overwrites the persisted slot.
        """
        if not value:
            return None

        now = self._clock()
        entry = HistoryEntry.create(self._new_id(now), value, now.to_iso8601_string())
        self._entries.appendleft(entry)
        self._persist()
        return entry

    def remove(self, entry_id: str) -> None:
        """Delete the entry with this id. Unknown ids are ignored."""
        kept = [e for e in self._entries if e.id != entry_id]
        if len(kept) == len(self._entries):
            return
        self._entries = deque(kept, maxlen=self.capacity)
        self._persist()

    def clear(self) -> None:
        """Empty the ledger and delete the persisted slot."""
        self._entries.clear()
        try:
            self.kv.remove(self.slot)
        except PersistenceWriteFailed as e:
            logger.error(f"[{pendulum.now().to_iso8601_string()}] {e}\n")

    def list(self) -> tuple[HistoryEntry, ...]:
        """Snapshot of the ledger, newest first."""
        return tuple(self._entries)

    def to_json(self) -> str:
        """The ledger as the JSON document that is persisted."""
        return entries_to_json(self._entries)

    # ==============================================================
    # Internals
    # ==============================================================
    def _new_id(self, now: pendulum.DateTime) -> str:
        """Millisecond timestamp, per-store counter and random suffix."""
        existing = {e.id for e in self._entries}
        while True:
            entry_id = (
                f"{int(now.timestamp() * 1000)}-{next(self._counter)}-"
                f"{secrets.token_hex(ID_SUFFIX_LEN)}"
            )
            if entry_id not in existing:
                return entry_id

    def _load(self) -> List[HistoryEntry]:
        """
        Read the ledger from its slot.

        Any unreadable or malformed content resets history to empty.
        """
        try:
            text = self.kv.get(self.slot)
            if text is None:
                return []
            data = json.loads(text)
            if not isinstance(data, list):
                raise PersistenceCorrupt("History document is not a list")
            entries = [HistoryEntry.from_dict(item) for item in data]
            if len({e.id for e in entries}) != len(entries):
                raise PersistenceCorrupt("Duplicate history ids")

            # Newest first; stable for equal timestamps
            entries.sort(key=lambda e: e.created, reverse=True)
        except (PersistenceCorrupt, ValueError, TypeError, KeyError) as e:
            msg = f"History slot '{self.slot}' is corrupted, starting empty. {e}"
            logger.warning(f"[{pendulum.now().to_iso8601_string()}] {msg}\n")
            return []

        return entries[:self.capacity]

    def _persist(self) -> None:
        try:
            self.kv.set(self.slot, self.to_json())
        except PersistenceWriteFailed as e:
            logger.error(f"[{pendulum.now().to_iso8601_string()}] {e}\n")
