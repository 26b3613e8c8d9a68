"""
Vocable - a pair of word groups (native and foreign) plus quiz statistics.
"""

import itertools
import random
import time
from dataclasses import dataclass, field
from enum import Enum


_next_id = itertools.count()


class Side(str, Enum):
    NATIVE = "native"
    FOREIGN = "foreign"

    @property
    def other(self) -> "Side":
        return Side.FOREIGN if self is Side.NATIVE else Side.NATIVE


class PreferKanji(str, Enum):
    """Prefer or avoid foreign words written with kanji."""

    NO = "no"
    YES = "yes"
    FORCE = "force"

    @classmethod
    def parse(cls, value: str) -> "PreferKanji":
        value = value.strip().lower()
        if value and "yes".startswith(value):
            return cls.YES
        if value and "force".startswith(value):
            return cls.FORCE
        return cls.NO


class Removed(Enum):
    NOT_FOUND = "not_found"
    NATIVE = "native"
    FOREIGN = "foreign"


def contains_kanji(text: str) -> bool:
    """True if text has at least one CJK unified ideograph."""
    return any("一" <= c <= "鿿" for c in text)


def words_unique(*word_lists) -> bool:
    """True if the words of all lists taken together are pairwise distinct."""
    expected = 0
    union = set()
    for words in word_lists:
        expected += len(words)
        union.update(words)
    return len(union) == expected


@dataclass(eq=False)
class Vocable:
    native_words: list[str]
    foreign_words: list[str]
    times_asked: int = 0
    times_correct: int = 0
    created_at: float = field(default_factory=time.time)
    id: int = field(default_factory=lambda: next(_next_id))
    dirty: bool = False
    last_shown_native: str = field(default="", repr=False)
    last_shown_foreign: str = field(default="", repr=False)

    def words(self, side: Side) -> list[str]:
        return self.native_words if side is Side.NATIVE else self.foreign_words

    def side_of(self, word: str) -> Side | None:
        if word in self.native_words:
            return Side.NATIVE
        if word in self.foreign_words:
            return Side.FOREIGN
        return None

    def has_word(self, word: str) -> bool:
        return self.side_of(word) is not None

    @property
    def key(self) -> tuple[frozenset, frozenset]:
        """Word sets compared for equivalence. Statistics are not part of it."""
        return frozenset(self.native_words), frozenset(self.foreign_words)

    def equivalent(self, other: "Vocable") -> bool:
        return self.key == other.key

    @property
    def is_valid(self) -> bool:
        return (
            bool(self.native_words)
            and bool(self.foreign_words)
            and words_unique(self.native_words, self.foreign_words)
        )

    @property
    def first_word(self) -> str:
        return self.native_words[0]

    @property
    def accuracy(self) -> float:
        if self.times_asked == 0:
            return 1.0
        return self.times_correct / self.times_asked

    # === Mutation ===

    def add_word(self, word: str) -> bool:
        return self._append(self.native_words, word)

    def add_foreign_word(self, word: str) -> bool:
        return self._append(self.foreign_words, word)

    def add_words(self, words: list[str], side: Side = Side.NATIVE) -> bool:
        """Append every absent word. True if at least one was added."""
        added = False
        for word in words:
            if self._append(self.words(side), word):
                added = True
        return added

    def _append(self, words: list[str], word: str) -> bool:
        if word in words:
            return False
        words.append(word)
        self.dirty = True
        return True

    def remove_word(self, word: str) -> Removed:
        """Remove a word, native side first."""
        if word in self.native_words:
            self.native_words.remove(word)
            self.dirty = True
            return Removed.NATIVE
        if word in self.foreign_words:
            self.foreign_words.remove(word)
            self.dirty = True
            return Removed.FOREIGN
        return Removed.NOT_FOUND

    def replace_word(self, old: str, new: str, side: Side) -> bool:
        """
        Replace old with new in place on the given side.
        Fails if new is already anywhere in the vocable or old is not on that side.
        """
        if self.has_word(new):
            return False
        words = self.words(side)
        if old not in words:
            return False
        words[words.index(old)] = new
        self.dirty = True
        return True

    def record_answer(self, correct: bool) -> None:
        self.times_asked += 1
        if correct:
            self.times_correct += 1
        self.dirty = True

    # === Drawing words ===

    def next_word(self, rng: random.Random) -> str:
        self.last_shown_native = rng.choice(self.native_words)
        return self.last_shown_native

    def next_foreign_word(self, rng: random.Random, pref_kanji: PreferKanji = PreferKanji.NO) -> str:
        pool = self.foreign_words
        if pref_kanji in (PreferKanji.YES, PreferKanji.FORCE):
            pool = [w for w in self.foreign_words if contains_kanji(w)] or self.foreign_words
        self.last_shown_foreign = rng.choice(pool)
        return self.last_shown_foreign

    def draw(self, side: Side, rng: random.Random, pref_kanji: PreferKanji = PreferKanji.NO) -> str:
        if side is Side.NATIVE:
            return self.next_word(rng)
        return self.next_foreign_word(rng, pref_kanji)

    @property
    def has_kanji(self) -> bool:
        return any(contains_kanji(w) for w in self.foreign_words)

    def copy(self) -> "Vocable":
        """Independent scratch copy with the same id, used to test edits."""
        return Vocable(
            native_words=list(self.native_words),
            foreign_words=list(self.foreign_words),
            times_asked=self.times_asked,
            times_correct=self.times_correct,
            created_at=self.created_at,
            id=self.id,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "native": list(self.native_words),
            "foreign": list(self.foreign_words),
            "asked": self.times_asked,
            "correct": self.times_correct,
            "created_at": self.created_at,
            "label": str(self),
        }

    def __str__(self) -> str:
        return f"{', '.join(self.native_words)} -> {', '.join(self.foreign_words)}"


# Orderings used to pick quiz vocables.

def newest_first(v: Vocable) -> float:
    return -v.created_at


def worst_first(v: Vocable) -> float:
    return v.accuracy


def least_asked_first(v: Vocable) -> int:
    return v.times_asked


def alphabetic(v: Vocable) -> str:
    return v.first_word
