"""
readability_engine package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import EngineConfig, config_from_dict, config_from_yaml, load_config
from .engine import ReadabilityEngine, score
from .grading import grade_levels, median_grade
from .measurements import MeasurementCache, TextMeasurements
from .models import ReadabilityReport
from .rounding import legacy_round

__all__ = [
    "EngineConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "ReadabilityEngine",
    "ReadabilityReport",
    "MeasurementCache",
    "TextMeasurements",
    "grade_levels",
    "median_grade",
    "legacy_round",
    "score",
]

__version__ = "0.1.0"
