# tests/test_state.py
"""Tests for namespace and settings storage."""

import pytest

from vocab.core.state import (
    DEFAULT_NAMESPACE, Settings, SettingsStore,
    get_namespace, parse_bool, set_namespace,
)
from vocab.core.training import LearningMethod, PrefLanguage
from vocab.core.vocable import PreferKanji


def test_namespace_default_and_set(redis_client):
    assert get_namespace(redis_client) == DEFAULT_NAMESPACE
    set_namespace(redis_client, "japanese")
    assert get_namespace(redis_client) == "japanese"


def test_parse_bool():
    assert parse_bool("True") is True
    assert parse_bool("t") is True
    assert parse_bool("F") is False
    with pytest.raises(ValueError):
        parse_bool("maybe")


def test_settings_defaults(redis_client):
    settings = SettingsStore(redis_client).load()
    assert settings == Settings()
    assert settings.number_of_words == 10
    assert settings.learning_method is LearningMethod.RANDOM


def test_settings_set_values():
    settings = Settings()
    settings.set("number_of_words", "25")
    settings.set("learning_method", "b")
    settings.set("pref_kanji", "force")
    settings.set("pref_language", "foreign")
    settings.set("import_delimiter", ";")
    settings.set("import_standard_order", "false")

    assert settings.number_of_words == 25
    assert settings.learning_method is LearningMethod.BAD
    assert settings.pref_kanji is PreferKanji.FORCE
    assert settings.pref_language is PrefLanguage.FOREIGN
    assert settings.import_delimiter == ";"
    assert settings.import_standard_order is False


@pytest.mark.parametrize("key, value", [
    ("number_of_words", "zero"),
    ("number_of_words", "0"),
    ("learning_method", "whenever"),
    ("pref_language", "klingon"),
    ("import_delimiter", ","),
    ("import_standard_order", "perhaps"),
    ("colour", "blue"),
])
def test_settings_reject_bad_values(key, value):
    with pytest.raises(ValueError, match=key):
        Settings().set(key, value)


def test_settings_round_trip(redis_client):
    store = SettingsStore(redis_client)
    settings = Settings()
    settings.set("learning_method", "least")
    settings.set("import_standard_order", "f")
    store.save(settings)

    loaded = store.load()
    assert loaded == settings
    assert loaded.to_dict()["learning_method"] == "least"


def test_settings_are_per_namespace(redis_client):
    store = SettingsStore(redis_client)
    settings = Settings()
    settings.set("number_of_words", "3")
    store.save(settings)

    set_namespace(redis_client, "other")
    assert store.load().number_of_words == 10
