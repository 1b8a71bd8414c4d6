"""Helpers for showing a report; none of these change engine output."""

from __future__ import annotations

from typing import Dict, Tuple

from .models import ReadabilityReport
from .rounding import legacy_round

# Scale of the progress indicator drawn for each score.
SCORE_RANGES: Dict[str, Tuple[float, float]] = {
    "automatedReadabilityIndex": (1, 14),
    "colemanLiauIndex": (0, 11),
    "fleschKincaidGrade": (0, 100),
    "fleschReadingEase": (0, 100),
    "linsearWriteFormula": (0, 100),
    "medianGrade": (0, 14),
    "rix": (0, 56),
    "smogIndex": (5, 18),
}

# Shown before any text has been scored.
DEFAULT_SCORES = ReadabilityReport(
    automated_readability_index=1,
    coleman_liau_index=0,
    flesch_kincaid_grade=0,
    flesch_reading_ease=0,
    linsear_write_formula=0,
    median_grade=0,
    reading_time=0,
    rix=0,
    smog_index=5,
)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_for_display(report: ReadabilityReport) -> Dict[str, float]:
    """Return the report's values clamped to their display ranges.

    Fields without a range, such as reading time, are passed through.
    """
    clamped: Dict[str, float] = {}
    for key, value in report.to_dict().items():
        bounds = SCORE_RANGES.get(key)
        clamped[key] = clamp(value, *bounds) if bounds else value
    return clamped


def format_reading_time(seconds: float) -> str:
    """Format a reading time in seconds as ``"2m 5s"``."""
    total = max(0, int(legacy_round(seconds)))
    minutes, secs = divmod(total, 60)
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
