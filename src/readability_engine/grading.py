"""
Consensus grade level.

Each formula votes with one or two US school grades and the median of the
votes is the reported grade. Flesch Reading Ease and RIX are mapped through
threshold tables of ``(lower_bound, grades)`` pairs, checked from the top
down; the other grade-style formulas vote with both the floor and the
ceiling of their score.
"""

from __future__ import annotations

import math
import statistics
from typing import List, Sequence, Tuple

from .models import ReadabilityReport
from .rounding import legacy_round

GradeTable = Sequence[Tuple[float, Tuple[int, ...]]]

# Scores of 100 and above stay in the top row and vote grade 5.
FLESCH_READING_EASE_GRADES: GradeTable = (
    (90.0, (5,)),
    (80.0, (6,)),
    (70.0, (7,)),
    (60.0, (8, 9)),
    (50.0, (10,)),
    (40.0, (11,)),
    (30.0, (12,)),
)
FLESCH_READING_EASE_FLOOR: Tuple[int, ...] = (13,)

RIX_GRADES: GradeTable = (
    (7.2, (13,)),
    (6.2, (12,)),
    (5.3, (11,)),
    (4.5, (10,)),
    (3.7, (9,)),
    (3.0, (8,)),
    (2.4, (7,)),
    (1.8, (6,)),
    (1.3, (5,)),
    (0.8, (4,)),
    (0.5, (3,)),
    (0.2, (2,)),
)
RIX_FLOOR: Tuple[int, ...] = (1,)

# Scores that vote with floor and ceiling, in voting order.
SPREAD_FIELDS = (
    "flesch_kincaid_grade",
    "smog_index",
    "coleman_liau_index",
    "automated_readability_index",
    "linsear_write_formula",
)


def bucket_grades(
    value: float, table: GradeTable, floor: Tuple[int, ...]
) -> Tuple[int, ...]:
    """Return the grades of the first row whose lower bound ``value`` reaches."""
    for lower_bound, grades in table:
        if value >= lower_bound:
            return grades
    return floor


def grade_spread(value: float) -> List[int]:
    return [math.floor(value), math.ceil(value)]


def grade_levels(report: ReadabilityReport) -> List[int]:
    """Collect every grade vote for ``report``; ``median_grade`` is ignored."""
    grades: List[int] = list(
        bucket_grades(
            report.flesch_reading_ease,
            FLESCH_READING_EASE_GRADES,
            FLESCH_READING_EASE_FLOOR,
        )
    )
    for name in SPREAD_FIELDS:
        grades.extend(grade_spread(getattr(report, name)))
    grades.extend(bucket_grades(report.rix, RIX_GRADES, RIX_FLOOR))
    return grades


def median_grade(grades: Sequence[float]) -> float:
    """Median of the grade votes, rounded to a whole grade."""
    if not grades:
        raise ValueError("median_grade requires at least one grade.")
    return legacy_round(statistics.median(grades))
