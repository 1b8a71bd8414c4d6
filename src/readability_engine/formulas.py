from __future__ import annotations

import math

from .measurements import POLY_SYLLABLE_THRESHOLD, TextMeasurements, sentence_count
from .rounding import legacy_round
from .textutils import split_words, word_syllables

# Flesch Reading Ease baseline, English only.
FRE_BASE = 206.835
FRE_SENTENCE_LENGTH = 1.015
FRE_SYLLABLES_PER_WORD = 84.6

LINSEAR_WINDOW = 100
LONG_WORD_LENGTH = 6
DEFAULT_WORDS_PER_SECOND = 4.17


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / (denominator or 1)


def avg_sentence_length(m: TextMeasurements) -> float:
    return legacy_round(_ratio(m.lexicon_count(), m.sentence_count()), 2)


def avg_syllables_per_word(m: TextMeasurements) -> float:
    return legacy_round(_ratio(m.syllable_count(), m.lexicon_count()), 2)


def avg_characters_per_word(m: TextMeasurements) -> float:
    return legacy_round(_ratio(m.char_count(), m.lexicon_count()), 2)


def avg_letters_per_word(m: TextMeasurements) -> float:
    return legacy_round(_ratio(m.letter_count(), m.lexicon_count()), 2)


def avg_sentences_per_word(m: TextMeasurements) -> float:
    return legacy_round(_ratio(m.sentence_count(), m.lexicon_count()), 2)


def flesch_reading_ease(m: TextMeasurements) -> float:
    score = (
        FRE_BASE
        - FRE_SENTENCE_LENGTH * avg_sentence_length(m)
        - FRE_SYLLABLES_PER_WORD * avg_syllables_per_word(m)
    )
    return legacy_round(score, 2)


def flesch_kincaid_grade(m: TextMeasurements) -> float:
    grade = 0.39 * avg_sentence_length(m) + 11.8 * avg_syllables_per_word(m) - 15.59
    return legacy_round(grade, 2)


def smog_index(m: TextMeasurements) -> float:
    """SMOG grade; 0.0 for texts with fewer than three sentences."""
    sentences = m.sentence_count()
    if sentences < 3:
        return 0.0
    smog = 1.043 * math.sqrt(m.poly_syllable_count() * (30 / sentences)) + 3.1291
    return legacy_round(smog, 2)


def coleman_liau_index(m: TextMeasurements) -> float:
    letters = legacy_round(avg_letters_per_word(m) * 100, 2)
    sentences = legacy_round(avg_sentences_per_word(m) * 100, 2)
    return legacy_round(0.0588 * letters - 0.296 * sentences - 15.8, 2)


def automated_readability_index(m: TextMeasurements) -> float:
    chars = m.char_count()
    words = m.lexicon_count()
    sentences = m.sentence_count()
    a = legacy_round(_ratio(chars, words), 2)
    b = legacy_round(_ratio(words, sentences), 2)
    return legacy_round(4.71 * a + 0.5 * b - 21.43, 2)


def linsear_write_formula(m: TextMeasurements) -> float:
    """Linsear Write over the first hundred words of the text.

    The sentence count is taken again over that leading slice rather than
    reused from the whole text.
    """
    leading_text = " ".join(split_words(m.text)[:LINSEAR_WINDOW])
    easy = 0
    difficult = 0
    for word in m.get_words()[:LINSEAR_WINDOW]:
        if word_syllables(word) < POLY_SYLLABLE_THRESHOLD:
            easy += 1
        else:
            difficult += 1

    number = (easy + difficult * 3) / sentence_count(leading_text, m.sample_limit)
    if number <= 20:
        number -= 2
    return legacy_round(number / 2, 2)


def rix(m: TextMeasurements) -> float:
    long_words = sum(1 for word in m.get_words() if len(word) > LONG_WORD_LENGTH)
    return legacy_round(_ratio(long_words, m.sentence_count()), 2)


def reading_time(
    m: TextMeasurements, words_per_second: float = DEFAULT_WORDS_PER_SECOND
) -> float:
    """Seconds needed to read the whole text, ignoring the sample window."""
    return legacy_round(m.lexicon_count(ignore_sample=True) / words_per_second, 2)
