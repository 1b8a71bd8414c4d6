from __future__ import annotations

from typing import Any

from readability_engine.measurements import MeasurementCache, TextMeasurements

GOLDEN_TEXT = (
    "This is not a scientific result in any way. Heck, the whole concept of "
    "readability escapes scientific scrutiny (just look at the number of "
    "different tests with different values!). If you want to modify it, you "
    "could use the average grade as well (take both rounded down and rounded "
    "up to get the grade spread). Or you could find what grade is the most "
    "common in the whole spread and use that instead."
)

GOLDEN_SCORES = {
    "automatedReadabilityIndex": 8.84,
    "colemanLiauIndex": 8.24,
    "fleschKincaidGrade": 8.28,
    "fleschReadingEase": 68.18,
    "linsearWriteFormula": 11.38,
    "medianGrade": 9,
    "readingTime": 17.51,
    "rix": 3,
    "smogIndex": 11.7,
}


def seeded_measurements(text: str = "", **counts: Any) -> TextMeasurements:
    """Build measurements whose cache already holds the given counts."""
    cache = MeasurementCache()
    for name, value in counts.items():
        cache.get_or_compute(name, lambda value=value: value)
    return TextMeasurements(text, cache=cache)
