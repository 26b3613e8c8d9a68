"""
Vocable persistence in Redis.

The whole collection is stored as one JSON list per namespace:

    vocab:<namespace>:vocables         current data
    vocab:<namespace>:vocables:backup  data before the last save
"""

import json
import logging

import redis

from vocab.core.results import ErrorKind, Outcome, rejected
from vocab.core.state import get_namespace
from vocab.core.store import VocableStore


logger = logging.getLogger(__name__)


class VocableRepository:
    def __init__(self, client: redis.Redis, namespace: str | None = None):
        self.client = client
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace or get_namespace(self.client)

    def _key(self) -> str:
        return f"vocab:{self.namespace}:vocables"

    def _backup_key(self) -> str:
        return f"vocab:{self.namespace}:vocables:backup"

    def load(self, store: VocableStore) -> list[Outcome]:
        """Restore all stored vocables into store. Returns the rejected records."""
        data = self.client.get(self._key())
        if data is None:
            return []

        failures = []
        for record in json.loads(data):
            raw = json.dumps(record, ensure_ascii=False)
            try:
                outcome = store.restore(
                    record["native"],
                    record["foreign"],
                    int(record.get("asked", 0)),
                    int(record.get("correct", 0)),
                    record.get("created_at"),
                    raw=raw,
                )
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning("Corrupt record %s: %s", raw, e)
                outcome = rejected(ErrorKind.CORRUPT_RECORD, f"Corrupt record ({e}): {raw}", raw=raw)
            if not outcome.ok:
                failures.append(outcome)

        logger.info("Loaded %d vocables from %s (%d rejected)", len(store), self._key(), len(failures))
        return failures

    def save(self, store: VocableStore, force: bool = False) -> bool:
        """Write the store if it changed. Returns True if written."""
        return store.persist(self._write, force)

    def _write(self, vocables: list) -> None:
        records = [
            {
                "native": v.native_words,
                "foreign": v.foreign_words,
                "asked": v.times_asked,
                "correct": v.times_correct,
                "created_at": v.created_at,
            }
            for v in vocables
        ]

        old = self.client.get(self._key())
        if old is not None:
            self.client.set(self._backup_key(), old)
        self.client.set(self._key(), json.dumps(records, ensure_ascii=False))

        logger.info("Saved %d vocables to %s", len(records), self._key())

    def clear(self) -> None:
        self.client.delete(self._key(), self._backup_key())
