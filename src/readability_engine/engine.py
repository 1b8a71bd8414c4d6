from __future__ import annotations

import logging
from typing import Any, Mapping

from . import formulas
from .config import EngineConfig, resolve_options
from .grading import grade_levels, median_grade
from .measurements import MeasurementCache, TextMeasurements
from .models import ReadabilityReport

logger = logging.getLogger(__name__)


class ReadabilityEngine:
    """Scores text with a fixed configuration.

    The engine keeps no state between calls; every ``score`` call measures
    the text through its own ``MeasurementCache``, so one engine can be
    shared between threads.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = (config or EngineConfig()).validate()

    def measure(self, text: str) -> TextMeasurements:
        if not isinstance(text, str):
            raise TypeError(f"Expected text as str, got {type(text).__name__}.")
        return TextMeasurements(text, self.config.sample_limit, MeasurementCache())

    def score(self, text: str) -> ReadabilityReport:
        """Compute every readability score for ``text``."""
        m = self.measure(text)
        report = ReadabilityReport(
            automated_readability_index=formulas.automated_readability_index(m),
            coleman_liau_index=formulas.coleman_liau_index(m),
            flesch_kincaid_grade=formulas.flesch_kincaid_grade(m),
            flesch_reading_ease=formulas.flesch_reading_ease(m),
            linsear_write_formula=formulas.linsear_write_formula(m),
            median_grade=0.0,
            reading_time=formulas.reading_time(m, self.config.words_per_second),
            rix=formulas.rix(m),
            smog_index=formulas.smog_index(m),
        )
        report.median_grade = median_grade(grade_levels(report))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Scored text (sample_limit=%d): %s -> median grade %.0f",
                self.config.sample_limit,
                m.counts(),
                report.median_grade,
            )
        return report


def score(
    text: str, options: EngineConfig | Mapping[str, Any] | None = None
) -> ReadabilityReport:
    """Score ``text``; ``options`` may be an EngineConfig or a mapping such as
    ``{"sampleLimit": 500}``."""
    return ReadabilityEngine(resolve_options(options)).score(text)
