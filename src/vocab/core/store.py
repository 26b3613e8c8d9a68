"""
Vocable store - owns every vocable and indexes them by each of their words.

Vocables live in an arena keyed by id. Two indices, one per side, map a word
to the ordered set of ids of the vocables containing it on that side:

    native:  "cat" -> {0, 3}      foreign: "猫" -> {0}
                                           "kitten" -> {3}

Every mutation validates first and mutates second, so a rejected operation
leaves the store untouched. Mutations hold the write lock; reads share the
read lock.
"""

import logging
import math
import random
from collections.abc import Iterable

from vocab.core import results
from vocab.core.disambiguate import Disambiguator
from vocab.core.locking import ReadWriteLock
from vocab.core.parsing import split_words
from vocab.core.resolver import Choice, ChoicePending, ConflictResolver, Option, ScriptedResolver
from vocab.core.results import ConsistencyError, ErrorKind, Outcome
from vocab.core.vocable import PreferKanji, Side, Vocable, words_unique


logger = logging.getLogger(__name__)


def _as_words(words: str | Iterable[str]) -> list[str]:
    if isinstance(words, str):
        return split_words(words)
    return [w.strip() for w in words if w.strip()]


def _is_timestamp(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _role_conflict(word: str, used_as: Side) -> str:
    # a word has one role across the whole store, not just within a vocable
    return (
        f'"{word}" is already used as a {used_as.value} word in another vocable; '
        "a word cannot be both native and foreign in the vocabulary."
    )


class VocableStore:
    def __init__(self, rng: random.Random | None = None, pref_kanji: PreferKanji = PreferKanji.NO):
        self.rng = rng if rng is not None else random.Random()
        self.pref_kanji = pref_kanji
        self.dirty = False
        self._vocables: dict[int, Vocable] = {}
        self._index: dict[Side, dict[str, dict[int, None]]] = {
            Side.NATIVE: {},
            Side.FOREIGN: {},
        }
        self._lock = ReadWriteLock()
        self.disambiguator = Disambiguator(self, self.rng)

    # === Index internals (caller holds the lock) ===

    def _bucket(self, word: str, side: Side) -> list[Vocable]:
        return [self._vocables[vid] for vid in self._index[side].get(word, ())]

    def _all(self) -> list[Vocable]:
        return list(self._vocables.values())

    def _touched(self, words: list[str], side: Side) -> dict[int, Vocable]:
        touched = {}
        for word in words:
            for vocable in self._bucket(word, side):
                touched[vocable.id] = vocable
        return touched

    def _link(self, vocable: Vocable, word: str, side: Side) -> None:
        self._index[side].setdefault(word, {})[vocable.id] = None

    def _unlink(self, vocable: Vocable, word: str, side: Side) -> None:
        bucket = self._index[side].get(word)
        if bucket is None:
            return
        bucket.pop(vocable.id, None)
        if not bucket:
            del self._index[side][word]

    def _insert(self, vocable: Vocable) -> None:
        self._vocables[vocable.id] = vocable
        for side in Side:
            for word in vocable.words(side):
                self._link(vocable, word, side)

    def _discard(self, vocable: Vocable) -> None:
        for side in Side:
            for word in vocable.words(side):
                self._unlink(vocable, word, side)
        del self._vocables[vocable.id]

    def _find_equivalent(
        self,
        native: list[str],
        foreign: list[str],
        exclude: Vocable | None = None,
    ) -> Vocable | None:
        # a vocable with equal word sets is indexed under every candidate word,
        # so only vocables touched on both sides need the full comparison
        touched_native = self._touched(native, Side.NATIVE)
        touched_foreign = self._touched(foreign, Side.FOREIGN)
        key = frozenset(native), frozenset(foreign)
        for vid, vocable in touched_native.items():
            if vid not in touched_foreign or vocable is exclude:
                continue
            if vocable.key == key:
                return vocable
        return None

    def _side_conflict(self, words: list[str], side: Side) -> str | None:
        """First word already indexed on the opposite side, if any."""
        for word in words:
            if word in self._index[side.other]:
                return word
        return None

    def _choice(self, question: str, default: str, vocables: list[Vocable]) -> Choice:
        options = [
            Option(self.disambiguator.label(v, self.pref_kanji), v.id)
            for v in vocables
        ]
        return Choice(question, default, options)

    def _create(self, native: list[str], foreign: list[str]) -> Outcome:
        vocable = Vocable(list(native), list(foreign), dirty=True)
        self._insert(vocable)
        self.dirty = True
        return results.added(vocable)

    def _mutate(self, operation, *args, resolver: ConflictResolver | None = None) -> Outcome:
        if resolver is None:
            resolver = ScriptedResolver()
        with self._lock.write():
            try:
                outcome = operation(*args, resolver)
            except ChoicePending as pending:
                outcome = results.needs_choice(pending.choice)
        logger.info("%s: %s", outcome.status.value, outcome.message)
        return outcome

    # === Reads ===

    def lookup(self, word: str) -> list[Vocable]:
        """Vocables containing word on either side, ordered by id."""
        with self._lock.read():
            found = self._touched([word], Side.NATIVE)
            found.update(self._touched([word], Side.FOREIGN))
            return [found[vid] for vid in sorted(found)]

    def homonyms(self, word: str, side: Side) -> list[Vocable]:
        with self._lock.read():
            return self._bucket(word, side)

    def contains_word(self, word: str) -> bool:
        with self._lock.read():
            return word in self._index[Side.NATIVE] or word in self._index[Side.FOREIGN]

    def contains_equivalent(self, native: str | Iterable[str], foreign: str | Iterable[str]) -> bool:
        with self._lock.read():
            return self._find_equivalent(_as_words(native), _as_words(foreign)) is not None

    def get(self, vocable_id: int) -> Vocable | None:
        with self._lock.read():
            return self._vocables.get(vocable_id)

    def vocables(self) -> list[Vocable]:
        """Every vocable exactly once, ordered by id."""
        with self._lock.read():
            return self._all()

    def __len__(self) -> int:
        return len(self._vocables)

    def pick_label_words(
        self,
        vocable: Vocable,
        side: Side,
        pref_kanji: PreferKanji | None = None,
    ) -> list[str]:
        with self._lock.read():
            return self.disambiguator.pick_label_words(
                vocable, side, pref_kanji if pref_kanji is not None else self.pref_kanji
            )

    def label(self, vocable: Vocable) -> str:
        with self._lock.read():
            return self.disambiguator.label(vocable, self.pref_kanji)

    def search(self, fragments: list[str]) -> list[Vocable]:
        with self._lock.read():
            return self.disambiguator.search_by_fragment(fragments)

    # === Load ===

    def restore(
        self,
        native: list[str],
        foreign: list[str],
        times_asked: int = 0,
        times_correct: int = 0,
        created_at: float | None = None,
        raw: str | None = None,
    ) -> Outcome:
        """Insert a persisted vocable. Nothing is inserted if the record is invalid."""
        native = _as_words(native)
        foreign = _as_words(foreign)
        if raw is None:
            raw = f"{', '.join(native)} -> {', '.join(foreign)}"

        with self._lock.write():
            problem = None
            if not native or not foreign:
                problem = "a side has no words"
            elif not words_unique(native, foreign):
                problem = "words are not unique"
            elif times_asked < 0 or not 0 <= times_correct <= times_asked:
                problem = "invalid statistics"
            elif created_at is not None and not _is_timestamp(created_at):
                problem = "invalid creation time"
            elif self._side_conflict(native, Side.NATIVE) or self._side_conflict(foreign, Side.FOREIGN):
                problem = "a word is already used on the other side"
            elif self._find_equivalent(native, foreign) is not None:
                problem = "duplicate vocable"

            if problem:
                logger.warning("Corrupt record (%s): %s", problem, raw)
                return results.rejected(
                    ErrorKind.CORRUPT_RECORD, f"Corrupt record ({problem}): {raw}", raw=raw
                )

            vocable = Vocable(native, foreign, times_asked, times_correct)
            if created_at is not None:
                vocable.created_at = created_at
            self._insert(vocable)
            return results.added(vocable)

    # === Mutations ===

    def add(
        self,
        native: str | Iterable[str],
        foreign: str | Iterable[str],
        resolver: ConflictResolver | None = None,
    ) -> Outcome:
        return self._mutate(self._add, _as_words(native), _as_words(foreign), resolver=resolver)

    def _add(self, native: list[str], foreign: list[str], resolver: ConflictResolver) -> Outcome:
        if not native or not foreign:
            return results.rejected(
                ErrorKind.EMPTY_SIDE, "A vocable needs at least one native and one foreign word."
            )
        if not words_unique(native, foreign):
            return results.rejected(ErrorKind.NON_UNIQUE_WORDS, "All words need to be unique.")
        for words, side in ((native, Side.NATIVE), (foreign, Side.FOREIGN)):
            word = self._side_conflict(words, side)
            if word is not None:
                return results.rejected(
                    ErrorKind.NON_UNIQUE_WORDS, _role_conflict(word, side.other)
                )

        touched_native = self._touched(native, Side.NATIVE)
        touched_foreign = self._touched(foreign, Side.FOREIGN)
        if not touched_native and not touched_foreign:
            return self._create(native, foreign)

        for vid, vocable in touched_native.items():
            if vid not in touched_foreign:
                continue
            if set(native) <= set(vocable.native_words) and set(foreign) <= set(vocable.foreign_words):
                return results.rejected(
                    ErrorKind.ALREADY_PRESENT, f'"{vocable}" is already in the vocabulary.', vocable
                )

        touched = {**touched_native, **touched_foreign}
        candidates = [touched[vid] for vid in sorted(touched)]
        descriptor = f"{', '.join(native)} -> {', '.join(foreign)}"
        choice = self._choice(
            f'Would you like to add "{descriptor}" to an existing vocable?', "No", candidates
        )
        index = resolver.choose(choice)
        if index is None:
            return self._create(native, foreign)

        target = candidates[index]
        merged_native = target.native_words + [w for w in native if w not in target.native_words]
        merged_foreign = target.foreign_words + [w for w in foreign if w not in target.foreign_words]
        if not words_unique(merged_native, merged_foreign):
            return results.rejected(ErrorKind.NON_UNIQUE_WORDS, "All words need to be unique.", target)
        if self._find_equivalent(merged_native, merged_foreign, exclude=target) is not None:
            return results.rejected(
                ErrorKind.WOULD_DUPLICATE, f'"{", ".join(merged_native)} -> {", ".join(merged_foreign)}" is already in the vocabulary.', target
            )

        for word in native:
            if target.add_word(word):
                self._link(target, word, Side.NATIVE)
        for word in foreign:
            if target.add_foreign_word(word):
                self._link(target, word, Side.FOREIGN)
        target.dirty = True
        self.dirty = True
        return results.merged(target)

    def remove(self, word: str, resolver: ConflictResolver | None = None) -> Outcome:
        return self._mutate(self._remove, word.strip(), resolver=resolver)

    def _remove(self, word: str, resolver: ConflictResolver) -> Outcome:
        in_native = word in self._index[Side.NATIVE]
        in_foreign = word in self._index[Side.FOREIGN]
        if in_native and in_foreign:
            raise ConsistencyError(f'"{word}" is indexed as native and as foreign word')
        if not (in_native or in_foreign):
            return results.not_found(word)

        side = Side.NATIVE if in_native else Side.FOREIGN
        matches = sorted(self._bucket(word, side), key=lambda v: v.id)
        target = matches[0]
        if len(matches) > 1:
            index = resolver.choose(
                self._choice("Which vocable would you like to remove?", "None", matches)
            )
            if index is None:
                return results.cancelled(f'"{word}" was not removed.')
            target = matches[index]

        trim = False
        if len(target.words(side)) > 1:
            choice = Choice(
                f'What would you like to do to "{target}"?',
                "Remove the complete vocable",
                [Option(f'Remove "{word}" from the vocable', word)],
            )
            trim = resolver.choose(choice) == 0

        if not trim:
            self._discard(target)
            self.dirty = True
            return results.removed(target)

        scratch = target.copy()
        scratch.remove_word(word)
        if self._find_equivalent(scratch.native_words, scratch.foreign_words, exclude=target) is not None:
            return results.rejected(
                ErrorKind.WOULD_DUPLICATE, f'"{scratch}" is already in the vocabulary.', target
            )

        target.remove_word(word)
        self._unlink(target, word, side)
        self.dirty = True
        return results.trimmed(target, word)

    def rename(self, old: str, new: str, resolver: ConflictResolver | None = None) -> Outcome:
        return self._mutate(self._rename, old.strip(), new.strip(), resolver=resolver)

    def _rename(self, old: str, new: str, resolver: ConflictResolver) -> Outcome:
        if old in self._index[Side.NATIVE]:
            side = Side.NATIVE
        elif old in self._index[Side.FOREIGN]:
            side = Side.FOREIGN
        else:
            return results.not_found(old)
        if not new:
            return results.rejected(ErrorKind.EMPTY_SIDE, "The new word is empty.")

        matches = sorted(self._bucket(old, side), key=lambda v: v.id)
        target = matches[0]
        if len(matches) > 1:
            index = resolver.choose(
                self._choice("Which vocable would you like to change?", "None", matches)
            )
            if index is None:
                return results.cancelled(f'"{old}" was not changed.')
            target = matches[index]

        scratch = target.copy()
        if not scratch.replace_word(old, new, side):
            return results.rejected(
                ErrorKind.NOT_UNIQUE, f'"{target}" could not be changed: "{new}" is already part of it.', target
            )
        if new in self._index[side.other]:
            return results.rejected(
                ErrorKind.NON_UNIQUE_WORDS, _role_conflict(new, side.other), target
            )
        if self._find_equivalent(scratch.native_words, scratch.foreign_words, exclude=target) is not None:
            return results.rejected(
                ErrorKind.WOULD_DUPLICATE, f'"{scratch}" is already in the vocabulary.', target
            )

        target.replace_word(old, new, side)
        self._unlink(target, old, side)
        self._link(target, new, side)
        self.dirty = True
        return results.renamed(target)

    def delete(self, vocable: Vocable) -> Outcome:
        with self._lock.write():
            if self._vocables.get(vocable.id) is not vocable:
                return results.not_found(str(vocable))
            self._discard(vocable)
            self.dirty = True
        logger.info("removed: %s", vocable)
        return results.removed(vocable)

    def record_answer(self, vocable: Vocable, correct: bool) -> None:
        with self._lock.write():
            vocable.record_answer(correct)
            self.dirty = True

    def mark_clean(self) -> None:
        with self._lock.write():
            self._mark_clean()

    def _mark_clean(self) -> None:
        self.dirty = False
        for vocable in self._vocables.values():
            vocable.dirty = False

    def persist(self, write, force: bool = False) -> bool:
        """
        Hand every vocable to write(vocables) and mark the store clean.

        Both happen under the write lock, so a mutation cannot land between
        the snapshot and the flag reset. If write raises, the store stays dirty.
        Returns False without calling write when nothing changed.
        """
        with self._lock.write():
            if not (self.dirty or force):
                return False
            write(self._all())
            self._mark_clean()
        return True

    # === Checks ===

    def check_consistency(self) -> None:
        """Raise ConsistencyError unless indices and vocables agree."""
        with self._lock.read():
            seen = {}
            for vid, vocable in self._vocables.items():
                if vocable.id != vid:
                    raise ConsistencyError(f"vocable {vocable.id} stored under id {vid}")
                if not vocable.is_valid:
                    raise ConsistencyError(f'invalid vocable "{vocable}"')
                if vocable.key in seen:
                    raise ConsistencyError(f'"{vocable}" duplicates "{seen[vocable.key]}"')
                seen[vocable.key] = vocable
                for side in Side:
                    for word in vocable.words(side):
                        if vid not in self._index[side].get(word, {}):
                            raise ConsistencyError(f'"{word}" of "{vocable}" is not indexed')

            for side in Side:
                for word, bucket in self._index[side].items():
                    if not bucket:
                        raise ConsistencyError(f'empty {side.value} bucket for "{word}"')
                    for vid in bucket:
                        vocable = self._vocables.get(vid)
                        if vocable is None or word not in vocable.words(side):
                            raise ConsistencyError(f'stale {side.value} entry "{word}" -> {vid}')

            both = self._index[Side.NATIVE].keys() & self._index[Side.FOREIGN].keys()
            if both:
                raise ConsistencyError(f"words indexed on both sides: {sorted(both)}")
