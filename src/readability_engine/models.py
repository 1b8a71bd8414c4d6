from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict

# Report attribute -> key used by the presentation layer.
FIELD_KEYS: Dict[str, str] = {
    "automated_readability_index": "automatedReadabilityIndex",
    "coleman_liau_index": "colemanLiauIndex",
    "flesch_kincaid_grade": "fleschKincaidGrade",
    "flesch_reading_ease": "fleschReadingEase",
    "linsear_write_formula": "linsearWriteFormula",
    "median_grade": "medianGrade",
    "reading_time": "readingTime",
    "rix": "rix",
    "smog_index": "smogIndex",
}


@dataclass(slots=True)
class ReadabilityReport:
    """Scores computed for one piece of text."""

    automated_readability_index: float
    coleman_liau_index: float
    flesch_kincaid_grade: float
    flesch_reading_ease: float
    linsear_write_formula: float
    median_grade: float
    reading_time: float
    rix: float
    smog_index: float

    def to_dict(self) -> dict[str, float]:
        """Return the report keyed by its camelCase field names."""
        return {
            FIELD_KEYS[field.name]: getattr(self, field.name)
            for field in fields(self)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "ReadabilityReport":
        """Build a report from camelCase or snake_case keys."""
        reverse = {key: name for name, key in FIELD_KEYS.items()}
        kwargs = {reverse.get(key, key): float(value) for key, value in data.items()}
        return cls(**kwargs)


@dataclass(slots=True)
class TextCounts:
    """Raw counts measured from the sampled text."""

    characters: int
    letters: int
    words: int
    syllables: int
    poly_syllables: int
    sentences: int
