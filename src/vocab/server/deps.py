"""
Shared dependencies for routes.
"""

import logging
import threading

import redis

from vocab.core.repository import VocableRepository
from vocab.core.state import SettingsStore
from vocab.core.store import VocableStore


logger = logging.getLogger(__name__)

# one loaded store per redis db, shared by all requests
_stores: dict[int, VocableStore] = {}
_stores_lock = threading.Lock()
_redis_factory = None


def get_redis(db: int = 0):
    if _redis_factory is not None:
        return _redis_factory(db)
    return redis.Redis(host="localhost", port=6379, db=db)


def set_redis_factory(factory) -> None:
    """Swap the redis client factory (tests) and drop loaded stores."""
    global _redis_factory
    with _stores_lock:
        _redis_factory = factory
        _stores.clear()


def get_settings_store(db: int = 0) -> SettingsStore:
    return SettingsStore(get_redis(db))


def get_repository(db: int = 0) -> VocableRepository:
    return VocableRepository(get_redis(db))


def get_store(db: int = 0) -> VocableStore:
    # loading happens under the lock so concurrent first requests share one store
    with _stores_lock:
        store = _stores.get(db)
        if store is None:
            settings = get_settings_store(db).load()
            store = VocableStore(pref_kanji=settings.pref_kanji)
            failures = get_repository(db).load(store)
            for outcome in failures:
                logger.warning(outcome.message)
            _stores[db] = store
        return store


def drop_store(db: int = 0) -> None:
    with _stores_lock:
        _stores.pop(db, None)


def save_store(db: int = 0) -> bool:
    return get_repository(db).save(get_store(db))
