# tests/test_vocable.py
"""Tests for the vocable entity."""

import random

from vocab.core.vocable import (
    PreferKanji, Removed, Side, Vocable,
    contains_kanji, words_unique,
)


def test_ids_are_monotonic():
    v1 = Vocable(["a"], ["b"])
    v2 = Vocable(["c"], ["d"])
    assert v2.id > v1.id


def test_str_renders_both_sides():
    v = Vocable(["sun", "sol"], ["日", "太陽"])
    assert str(v) == "sun, sol -> 日, 太陽"


def test_equivalence_ignores_order_and_stats():
    v1 = Vocable(["sun", "sol"], ["日"], times_asked=4, times_correct=2)
    v2 = Vocable(["sol", "sun"], ["日"])
    assert v1.equivalent(v2)
    assert v1 != v2  # identity equality


def test_add_word_appends_once():
    v = Vocable(["sun"], ["日"])
    assert v.add_word("sol")
    assert not v.add_word("sol")
    assert v.native_words == ["sun", "sol"]
    assert v.dirty


def test_add_foreign_word_appends_once():
    v = Vocable(["sun"], ["日"])
    assert v.add_foreign_word("太陽")
    assert not v.add_foreign_word("日")
    assert v.foreign_words == ["日", "太陽"]


def test_add_words_reports_any_success():
    v = Vocable(["sun"], ["日"])
    assert v.add_words(["sun", "sol"], Side.NATIVE)
    assert not v.add_words(["日"], Side.FOREIGN)


def test_remove_word_native_first():
    v = Vocable(["sun", "sol"], ["日"])
    assert v.remove_word("sol") is Removed.NATIVE
    assert v.remove_word("日") is Removed.FOREIGN
    assert v.remove_word("moon") is Removed.NOT_FOUND


def test_replace_word_keeps_position():
    v = Vocable(["a", "b", "c"], ["x"])
    assert v.replace_word("b", "B", Side.NATIVE)
    assert v.native_words == ["a", "B", "c"]


def test_replace_word_rejects_word_already_in_vocable():
    v = Vocable(["a", "b"], ["x"])
    assert not v.replace_word("a", "x", Side.NATIVE)
    assert not v.replace_word("a", "b", Side.NATIVE)
    assert v.native_words == ["a", "b"]


def test_record_answer():
    v = Vocable(["a"], ["x"])
    v.record_answer(True)
    v.record_answer(False)
    assert v.times_asked == 2
    assert v.times_correct == 1
    assert v.accuracy == 0.5


def test_accuracy_when_never_asked():
    assert Vocable(["a"], ["x"]).accuracy == 1.0


def test_copy_is_independent():
    v = Vocable(["a", "b"], ["x"])
    c = v.copy()
    c.remove_word("a")
    assert v.native_words == ["a", "b"]
    assert c.id == v.id


def test_is_valid():
    assert Vocable(["a"], ["x"]).is_valid
    assert not Vocable([], ["x"]).is_valid
    assert not Vocable(["a"], ["a"]).is_valid


def test_words_unique():
    assert words_unique(["a", "b"], ["c"])
    assert not words_unique(["a", "b"], ["b"])
    assert not words_unique(["a", "a"], [])


def test_contains_kanji():
    assert contains_kanji("猫")
    assert contains_kanji("食べる")
    assert not contains_kanji("ねこ")
    assert not contains_kanji("cat")


def test_next_foreign_word_prefers_kanji():
    v = Vocable(["cat"], ["ねこ", "猫"])
    rng = random.Random(0)
    for _ in range(10):
        assert v.next_foreign_word(rng, PreferKanji.YES) == "猫"
    assert v.last_shown_foreign == "猫"


def test_next_foreign_word_falls_back_without_kanji():
    v = Vocable(["cat"], ["ねこ"])
    assert v.next_foreign_word(random.Random(0), PreferKanji.FORCE) == "ねこ"


def test_prefer_kanji_parse():
    assert PreferKanji.parse("y") is PreferKanji.YES
    assert PreferKanji.parse("Force") is PreferKanji.FORCE
    assert PreferKanji.parse("no") is PreferKanji.NO
    assert PreferKanji.parse("whatever") is PreferKanji.NO
