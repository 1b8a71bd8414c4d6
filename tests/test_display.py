from readability_engine import score
from readability_engine.display import (
    DEFAULT_SCORES,
    SCORE_RANGES,
    clamp_for_display,
    format_reading_time,
)
from readability_engine.models import ReadabilityReport
from tests.utils import GOLDEN_SCORES, GOLDEN_TEXT


def test_clamp_for_display_limits_to_ranges():
    report = ReadabilityReport.from_dict(
        {**GOLDEN_SCORES, "automatedReadabilityIndex": 20.5, "smogIndex": 0.0}
    )
    clamped = clamp_for_display(report)
    assert clamped["automatedReadabilityIndex"] == 14
    assert clamped["smogIndex"] == 5
    assert clamped["fleschReadingEase"] == 68.18
    assert clamped["readingTime"] == 17.51


def test_clamp_does_not_alter_engine_output():
    report = score("")
    clamp_for_display(report)
    assert report.flesch_reading_ease > SCORE_RANGES["fleschReadingEase"][1]


def test_default_scores_sit_at_range_floors():
    defaults = DEFAULT_SCORES.to_dict()
    assert defaults["automatedReadabilityIndex"] == 1
    assert defaults["smogIndex"] == 5
    assert defaults["readingTime"] == 0
    assert clamp_for_display(DEFAULT_SCORES) == defaults


def test_format_reading_time():
    assert format_reading_time(score(GOLDEN_TEXT).reading_time) == "18s"
    assert format_reading_time(125) == "2m 5s"
    assert format_reading_time(0) == "0s"
