# tests/test_repository.py
"""Tests for saving and loading vocables."""

import json
import threading

import fakeredis

from vocab.core.importer import import_text
from vocab.core.repository import VocableRepository
from vocab.core.results import ErrorKind
from vocab.core.store import VocableStore


def test_save_and_load(redis_client, store):
    repo = VocableRepository(redis_client)
    store.add("sun,sol", "日")
    v = store.add("moon", "月").vocable
    store.record_answer(v, True)

    assert repo.save(store)
    assert not store.dirty

    loaded = VocableStore()
    assert repo.load(loaded) == []
    assert [(x.native_words, x.foreign_words) for x in loaded.vocables()] == [
        (["sun", "sol"], ["日"]),
        (["moon"], ["月"]),
    ]
    moon = loaded.lookup("moon")[0]
    assert (moon.times_asked, moon.times_correct, moon.created_at) == (1, 1, v.created_at)
    assert not loaded.dirty
    loaded.check_consistency()


def test_save_skips_clean_store(redis_client, store):
    repo = VocableRepository(redis_client)
    assert not repo.save(store)
    assert repo.save(store, force=True)


def test_save_keeps_backup(redis_client, store):
    repo = VocableRepository(redis_client, namespace="test")
    store.add("sun", "日")
    repo.save(store)
    store.add("moon", "月")
    repo.save(store)

    backup = json.loads(redis_client.get("vocab:test:vocables:backup"))
    current = json.loads(redis_client.get("vocab:test:vocables"))
    assert len(backup) == 1
    assert len(current) == 2


def test_load_rejects_corrupt_records(redis_client):
    records = [
        {"native": ["sun"], "foreign": ["日"], "asked": 0, "correct": 0, "created_at": 1.0},
        {"native": ["same"], "foreign": ["same"], "asked": 0, "correct": 0, "created_at": 2.0},
        {"foreign": ["月"]},
    ]
    redis_client.set("vocab:default:vocables", json.dumps(records))

    store = VocableStore()
    failures = VocableRepository(redis_client).load(store)

    assert len(store) == 1
    assert [f.reason for f in failures] == [ErrorKind.CORRUPT_RECORD, ErrorKind.CORRUPT_RECORD]
    assert '"same"' in failures[0].raw
    store.check_consistency()


def test_load_empty(redis_client):
    store = VocableStore()
    assert VocableRepository(redis_client).load(store) == []
    assert len(store) == 0


def test_import_text(store):
    text = "日 - sun\n日 - sun\n月 - sun\nねこ - cat\n"
    report = import_text(store, text)

    assert report.added == 3
    assert len(report.rejected) == 1
    line_no, outcome = report.rejected[0]
    assert line_no == 2
    assert outcome.reason is ErrorKind.ALREADY_PRESENT
    # overlap with "sun -> 日" becomes a homonym, not a merge
    assert len(store.lookup("sun")) == 2


class SlowSetRedis(fakeredis.FakeRedis):
    """Runs after_set(key) once each SET has been applied."""

    after_set = None

    def set(self, name, value, *args, **kwargs):
        result = super().set(name, value, *args, **kwargs)
        if self.after_set is not None:
            self.after_set(name)
        return result


def test_mutation_during_save_is_written_by_next_save(store):
    client = SlowSetRedis(server=fakeredis.FakeServer())
    repo = VocableRepository(client)
    store.add("sun", "日")
    racer = threading.Thread(target=store.add, args=("moon", "月"))

    def start_racer(key):
        if key == "vocab:default:vocables" and racer.ident is None:
            racer.start()
            racer.join(timeout=0.2)
            # the save still holds the store, so the add has to wait
            assert racer.is_alive()

    client.after_set = start_racer
    assert repo.save(store)
    racer.join()

    assert [r["native"] for r in json.loads(client.get("vocab:default:vocables"))] == [["sun"]]
    assert store.dirty
    assert repo.save(store)
    assert [r["native"] for r in json.loads(client.get("vocab:default:vocables"))] == [["sun"], ["moon"]]


def test_load_rejects_bad_timestamp(redis_client):
    records = [
        {"native": ["sun"], "foreign": ["日"], "asked": 0, "correct": 0, "created_at": 1.0},
        {"native": ["moon"], "foreign": ["月"], "asked": 0, "correct": 0, "created_at": "yesterday"},
    ]
    redis_client.set("vocab:default:vocables", json.dumps(records))

    store = VocableStore()
    failures = VocableRepository(redis_client).load(store)

    assert len(store) == 1
    assert [f.reason for f in failures] == [ErrorKind.CORRUPT_RECORD]
    assert "yesterday" in failures[0].raw
