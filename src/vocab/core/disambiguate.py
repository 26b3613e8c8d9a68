"""
Disambiguation of homonyms.

A single word may belong to several vocables ("mind" -> 心, "mind" -> 気).
To refer to one of them we pick a seed word and then greedily add words of
the same side until every other vocable sharing the seed is told apart.

    {mind, care} -> {心}
    {mind}       -> {気}

    label words of the first (native, seed "mind") -> ["mind", "care"]
"""

import random
from typing import TYPE_CHECKING

from vocab.core.vocable import PreferKanji, Side, Vocable, alphabetic

if TYPE_CHECKING:
    from vocab.core.store import VocableStore


class Disambiguator:
    def __init__(self, store: "VocableStore", rng: random.Random):
        self.store = store
        self.rng = rng

    def pick_label_words(
        self,
        vocable: Vocable,
        side: Side,
        pref_kanji: PreferKanji = PreferKanji.NO,
    ) -> list[str]:
        seed = vocable.draw(side, self.rng, pref_kanji)
        result = [seed]

        homonyms = self.store._bucket(seed, side)
        if len(homonyms) <= 1:
            return result

        others = [h for h in homonyms if h is not vocable]
        resolved: set[int] = set()

        for candidate in vocable.words(side):
            if len(resolved) == len(others):
                break
            helps = False
            for other in others:
                if other.id in resolved:
                    continue
                if candidate not in other.words(side):
                    resolved.add(other.id)
                    helps = True
            if helps and candidate not in result:
                result.append(candidate)

        return result

    def label(self, vocable: Vocable, pref_kanji: PreferKanji = PreferKanji.NO) -> str:
        """Distinguishing words of both sides, rendered like a vocable."""
        native = self.pick_label_words(vocable, Side.NATIVE)
        foreign = self.pick_label_words(vocable, Side.FOREIGN, pref_kanji)
        return f"{', '.join(native)} -> {', '.join(foreign)}"

    def search_by_fragment(self, fragments: list[str]) -> list[Vocable]:
        """Vocables with any word containing any fragment, sorted by first native word."""
        fragments = [f for f in fragments if f]
        if not fragments:
            return []
        results = []
        for vocable in self.store._all():
            words = vocable.native_words + vocable.foreign_words
            if any(fragment in word for fragment in fragments for word in words):
                results.append(vocable)
        return sorted(results, key=alphabetic)
