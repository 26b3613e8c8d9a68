"""
Quiz selection - decides which vocables to ask and how to ask them.
"""

import random
from dataclasses import dataclass
from enum import Enum

from vocab.core.parsing import correct_whitespace, split_words
from vocab.core.store import VocableStore
from vocab.core.vocable import (
    PreferKanji, Side, Vocable,
    least_asked_first, newest_first, worst_first,
)


class LearningMethod(str, Enum):
    RANDOM = "random"
    NEW = "new"
    BAD = "bad"
    LEAST = "least"

    @classmethod
    def parse(cls, value: str) -> "LearningMethod":
        aliases = {
            cls.RANDOM: ("r", "random", "randomWords"),
            cls.NEW: ("n", "new", "newWords"),
            cls.BAD: ("b", "bad", "badWords"),
            cls.LEAST: ("l", "least", "leastLearnedWords"),
        }
        for method, names in aliases.items():
            if value.strip() in names:
                return method
        raise ValueError(f"unknown learning method: {value!r}")


class PrefLanguage(str, Enum):
    """Side the question is shown in."""

    NATIVE = "native"
    NONE = "none"
    FOREIGN = "foreign"

    @classmethod
    def parse(cls, value: str) -> "PrefLanguage":
        value = value.strip().lower()
        if not value:
            raise ValueError("empty language preference")
        if "native".startswith(value):
            return cls.NATIVE
        if "none".startswith(value) or "equal".startswith(value):
            return cls.NONE
        if "foreign".startswith(value):
            return cls.FOREIGN
        raise ValueError(f"unknown language preference: {value!r}")


_ORDERINGS = {
    LearningMethod.NEW: newest_first,
    LearningMethod.BAD: worst_first,
    LearningMethod.LEAST: least_asked_first,
}


def _ordered(vocables: list[Vocable], method: LearningMethod, rng: random.Random) -> list[Vocable]:
    if method is LearningMethod.RANDOM:
        return rng.sample(vocables, len(vocables))
    return sorted(vocables, key=_ORDERINGS[method])


def select_vocables(
    vocables: list[Vocable],
    method: LearningMethod,
    count: int,
    rng: random.Random,
    pref_kanji: PreferKanji = PreferKanji.NO,
) -> list[Vocable]:
    """
    Pick up to count vocables.

    Vocables matching the kanji preference come first (with kanji for YES and
    FORCE, without for NO); FORCE drops the rest.
    """
    want_kanji = pref_kanji in (PreferKanji.YES, PreferKanji.FORCE)
    preferred = [v for v in vocables if v.has_kanji == want_kanji]
    others = [v for v in vocables if v.has_kanji != want_kanji]

    pool = _ordered(preferred, method, rng)
    if pref_kanji is not PreferKanji.FORCE:
        pool += _ordered(others, method, rng)
    return pool[:max(count, 0)]


@dataclass
class Question:
    vocable: Vocable
    shown_side: Side
    shown_words: list[str]

    @property
    def asked_side(self) -> Side:
        return self.shown_side.other

    @property
    def expected(self) -> list[str]:
        return self.vocable.words(self.asked_side)

    def to_dict(self) -> dict:
        return {
            "vocable_id": self.vocable.id,
            "shown_side": self.shown_side.value,
            "shown_words": self.shown_words,
            "asked_side": self.asked_side.value,
        }


def make_question(
    store: VocableStore,
    vocable: Vocable,
    pref_language: PrefLanguage = PrefLanguage.NONE,
    pref_kanji: PreferKanji = PreferKanji.NO,
) -> Question:
    if pref_language is PrefLanguage.NATIVE:
        side = Side.NATIVE
    elif pref_language is PrefLanguage.FOREIGN:
        side = Side.FOREIGN
    else:
        side = store.rng.choice([Side.NATIVE, Side.FOREIGN])
    words = store.pick_label_words(vocable, side, pref_kanji)
    return Question(vocable, side, words)


def check_answer(vocable: Vocable, asked_side: Side, answer: str) -> bool:
    """Correct if at least one word is given and every given word is on the asked side."""
    given = split_words(correct_whitespace(answer))
    if not given:
        return False
    expected = vocable.words(asked_side)
    return all(word in expected for word in given)
