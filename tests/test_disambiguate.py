# tests/test_disambiguate.py
"""Tests for label word selection and fragment search."""

import random

from vocab.core.resolver import DeclineResolver
from vocab.core.store import VocableStore
from vocab.core.vocable import PreferKanji, Side


def test_unique_seed_is_enough(store):
    v = store.add("cat", "猫").vocable
    assert store.pick_label_words(v, Side.NATIVE) == ["cat"]
    assert v.last_shown_native == "cat"


def test_native_homonym_gets_distinguishing_word(store):
    first = store.add("mind,care", "心").vocable
    store.add("mind", "気", DeclineResolver())

    assert store.pick_label_words(first, Side.NATIVE) == ["mind", "care"]


def test_shared_native_word_is_unique_on_foreign_side(store):
    first = store.add("cat", "猫").vocable
    store.add("cat", "kitten", DeclineResolver())

    assert store.pick_label_words(first, Side.FOREIGN) == ["猫"]


def test_homonym_without_distinguishing_word_returns_partial(store):
    # every native word of the second is also in the first
    store.add("a,b,c", "x")
    second = store.add("a,b", "y", DeclineResolver()).vocable

    assert store.pick_label_words(second, Side.NATIVE) == ["a"]


def test_one_word_resolves_several_homonyms(store):
    target = store.add("bank,shore", "Ufer").vocable
    store.add("bank", "Bank", DeclineResolver())
    store.add("bank,bench", "Sitzbank", DeclineResolver())

    assert store.pick_label_words(target, Side.NATIVE) == ["bank", "shore"]


def test_each_homonym_resolved_once():
    store = VocableStore(rng=random.Random(7))
    target = store.add("run,sprint,dash", "laufen").vocable
    store.add("run,jog", "joggen", DeclineResolver())
    store.add("run,sprint", "rennen", DeclineResolver())

    for _ in range(20):
        words = store.pick_label_words(target, Side.NATIVE)
        assert words[0] in target.native_words
        assert set(words) <= set(target.native_words)
        assert len(words) == len(set(words))


def test_label_words_start_with_drawn_seed():
    store = VocableStore(rng=random.Random(1))
    v = store.add("sun,sol,star", "日").vocable
    store.add("sun", "太陽", DeclineResolver())

    for _ in range(20):
        words = store.pick_label_words(v, Side.NATIVE)
        assert words[0] == v.last_shown_native


def test_kanji_preference_picks_kanji_seed(store):
    v = store.add("cat", "ねこ,猫").vocable
    assert store.pick_label_words(v, Side.FOREIGN, PreferKanji.YES) == ["猫"]
    assert store.pick_label_words(v, Side.FOREIGN, PreferKanji.NO) == ["ねこ"]


def test_label_renders_both_sides(store):
    first = store.add("mind,care", "心").vocable
    store.add("mind", "気", DeclineResolver())
    assert store.label(first) == "mind, care -> 心"


def test_search_by_fragment(store):
    store.add("house", "Haus")
    store.add("mouse", "Maus")
    store.add("cat", "Katze")

    found = store.search(["ous"])
    assert [v.first_word for v in found] == ["house", "mouse"]

    found = store.search(["atz", "Hau"])
    assert [v.first_word for v in found] == ["cat", "house"]

    assert store.search(["xyz"]) == []
    assert store.search([]) == []
