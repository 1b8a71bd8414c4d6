"""
Text-measurement primitives shared by every readability formula.

The module-level functions are pure and apply the sampling window
themselves. ``TextMeasurements`` wraps them for a single scoring call and
memoizes each count in a ``MeasurementCache`` so that all formulas in that
call agree on the same numbers.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, TypeVar

from .models import TextCounts
from .textutils import (
    SENTENCE_RE,
    remove_punctuation,
    sample_text,
    split_words,
    strip_whitespace,
    word_syllables,
)

DEFAULT_SAMPLE_LIMIT = 1000
POLY_SYLLABLE_THRESHOLD = 3
# Sentence fragments with this many words or fewer are split artifacts.
MIN_SENTENCE_WORDS = 2

T = TypeVar("T")


def char_count(text: str, sample_limit: int = DEFAULT_SAMPLE_LIMIT) -> int:
    """Count non-whitespace characters in the sampled text."""
    return len(strip_whitespace(sample_text(text, sample_limit)))


def letter_count(text: str, sample_limit: int = DEFAULT_SAMPLE_LIMIT) -> int:
    """Count non-whitespace, non-punctuation characters in the sampled text."""
    return len(remove_punctuation(strip_whitespace(sample_text(text, sample_limit))))


def lexicon_count(
    text: str,
    ignore_sample: bool = False,
    sample_limit: int = DEFAULT_SAMPLE_LIMIT,
) -> int:
    """Count space-separated tokens after punctuation is removed."""
    if not ignore_sample:
        text = sample_text(text, sample_limit)
    return len(split_words(remove_punctuation(text)))


def get_words(text: str, sample_limit: int = DEFAULT_SAMPLE_LIMIT) -> List[str]:
    """Return the lower-cased, punctuation-free tokens of the sampled text."""
    sampled = sample_text(text, sample_limit).lower()
    return split_words(remove_punctuation(sampled))


def syllable_count(text: str, sample_limit: int = DEFAULT_SAMPLE_LIMIT) -> int:
    return sum(word_syllables(word) for word in get_words(text, sample_limit))


def poly_syllable_count(text: str, sample_limit: int = DEFAULT_SAMPLE_LIMIT) -> int:
    return _count_poly_syllables(get_words(text, sample_limit))


def sentence_count(text: str, sample_limit: int = DEFAULT_SAMPLE_LIMIT) -> int:
    """Count sentences in the sampled text; never less than one.

    Fragments of two words or fewer (titles, abbreviation debris) are not
    counted as sentences.
    """
    fragments = SENTENCE_RE.split(sample_text(text, sample_limit))
    ignored = sum(
        1
        for fragment in fragments
        if lexicon_count(fragment, ignore_sample=True) <= MIN_SENTENCE_WORDS
    )
    return max(1, len(fragments) - ignored)


def _count_poly_syllables(words: List[str]) -> int:
    return sum(1 for word in words if word_syllables(word) >= POLY_SYLLABLE_THRESHOLD)


class MeasurementCache:
    """Write-once memo of named measurements, scoped to one scoring call."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def get_or_compute(self, name: str, compute: Callable[[], T]) -> T:
        if name not in self._values:
            self._values[name] = compute()
        return self._values[name]


class TextMeasurements:
    """Cached view over the counts of one text under one sampling limit."""

    def __init__(
        self,
        text: str,
        sample_limit: int = DEFAULT_SAMPLE_LIMIT,
        cache: MeasurementCache | None = None,
    ) -> None:
        self.text = text
        self.sample_limit = sample_limit
        self.cache = cache if cache is not None else MeasurementCache()

    def char_count(self) -> int:
        return self.cache.get_or_compute(
            "char_count", lambda: char_count(self.text, self.sample_limit)
        )

    def letter_count(self) -> int:
        return self.cache.get_or_compute(
            "letter_count", lambda: letter_count(self.text, self.sample_limit)
        )

    def lexicon_count(self, ignore_sample: bool = False) -> int:
        name = "lexicon_count_full" if ignore_sample else "lexicon_count"
        return self.cache.get_or_compute(
            name, lambda: lexicon_count(self.text, ignore_sample, self.sample_limit)
        )

    def get_words(self) -> List[str]:
        return self.cache.get_or_compute(
            "words", lambda: get_words(self.text, self.sample_limit)
        )

    def syllable_count(self) -> int:
        return self.cache.get_or_compute(
            "syllable_count",
            lambda: sum(word_syllables(word) for word in self.get_words()),
        )

    def poly_syllable_count(self) -> int:
        return self.cache.get_or_compute(
            "poly_syllable_count",
            lambda: _count_poly_syllables(self.get_words()),
        )

    def sentence_count(self) -> int:
        return self.cache.get_or_compute(
            "sentence_count", lambda: sentence_count(self.text, self.sample_limit)
        )

    def counts(self) -> TextCounts:
        """Snapshot of the sampled counts, mostly for logging and debugging."""
        return TextCounts(
            characters=self.char_count(),
            letters=self.letter_count(),
            words=self.lexicon_count(),
            syllables=self.syllable_count(),
            poly_syllables=self.poly_syllable_count(),
            sentences=self.sentence_count(),
        )
