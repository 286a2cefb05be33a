"""In-memory vocabulary library: parts contain tests, tests contain words."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass(frozen=True)
class VocabItem:
    word: str
    definition: str
    example: str = ""


@dataclass
class VocabularyTest:
    id: int
    title: str
    words: list[VocabItem] = field(default_factory=list)

    def pairs(self) -> list[tuple[str, str]]:
        """(word, definition) pairs in list order, ready for the generator."""
        return [(item.word, item.definition) for item in self.words]


@dataclass
class VocabularyPart:
    id: int
    title: str
    description: str = ""
    tests: list[VocabularyTest] = field(default_factory=list)


class VocabularyLibrary:
    """Lookup and random draws over a set of vocabulary parts."""

    def __init__(self, parts: list[VocabularyPart] | None = None) -> None:
        self.parts = list(parts or [])
        self._all_words: list[str] | None = None

    def add_part(self, part: VocabularyPart) -> None:
        self.parts.append(part)
        self._all_words = None

    def get_part(self, part_id: int) -> VocabularyPart | None:
        return next((p for p in self.parts if p.id == part_id), None)

    def get_test(self, part_id: int, test_id: int) -> VocabularyTest | None:
        part = self.get_part(part_id)
        if part is None:
            return None
        return next((t for t in part.tests if t.id == test_id), None)

    def all_words(self) -> list[str]:
        """Every distinct word across all parts, in first-seen order."""
        if self._all_words is None:
            seen: dict[str, None] = {}
            for part in self.parts:
                for test in part.tests:
                    for item in test.words:
                        seen.setdefault(item.word, None)
            self._all_words = list(seen)
        return self._all_words

    def random_words(self, count: int, rng: random.Random | None = None) -> list[str]:
        words = self.all_words()
        if not words:
            return []
        rng = rng or random.Random()
        return rng.sample(words, min(count, len(words)))
