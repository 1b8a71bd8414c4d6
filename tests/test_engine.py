import math
import threading

import pytest

from readability_engine import EngineConfig, ReadabilityEngine, score
from readability_engine.models import ReadabilityReport
from tests.utils import GOLDEN_SCORES, GOLDEN_TEXT

LONG_TEXT = (
    "The storm clouds rolled over the bay. Sailors watched the winds shift "
    "from the north. Nobody expected the extraordinary weather to last. "
    "By evening the harbour was quiet again and the lanterns were lit."
)


def test_score_matches_reference_paragraph():
    """Whole-report golden values for the reference paragraph."""
    assert score(GOLDEN_TEXT).to_dict() == GOLDEN_SCORES


def test_score_is_deterministic():
    assert score(LONG_TEXT) == score(LONG_TEXT)
    engine = ReadabilityEngine()
    assert engine.score(GOLDEN_TEXT) == engine.score(GOLDEN_TEXT)


@pytest.mark.parametrize("limit", [1, 5, 12, 30])
def test_sample_limit_equals_truncated_text(limit):
    """A positive limit scores exactly like the text cut to that many words."""
    truncated = " ".join(LONG_TEXT.split(" ")[:limit])
    sampled = score(LONG_TEXT, {"sampleLimit": limit}).to_dict()
    expected = score(truncated, {"sampleLimit": 0}).to_dict()
    sampled.pop("readingTime")
    expected.pop("readingTime")
    assert sampled == expected


def test_zero_sample_limit_uses_whole_text():
    text = " ".join([GOLDEN_TEXT] * 20)
    assert score(text, {"sampleLimit": 0}) != score(text, {"sampleLimit": 50})
    assert score(text, EngineConfig(sample_limit=0)) == score(
        text, {"sample_limit": 0}
    )


def test_reading_time_always_covers_full_text():
    text = " ".join(["word"] * 417)
    assert score(text, {"sampleLimit": 10}).reading_time == 100.0


@pytest.mark.parametrize(
    "text", ["", "   ", "word", "!!!", "\n\n", "A. B. C.", "?! ... ,,,", "x" * 500]
)
def test_every_field_is_finite(text):
    report = score(text)
    for value in report.to_dict().values():
        assert math.isfinite(value)


def test_degenerate_input_scores_one_sentence():
    for text in ("", "   "):
        report = score(text)
        assert report.smog_index == 0.0
        assert report.rix == 0.0
    assert score("").reading_time == 0.24


def test_score_rejects_non_string():
    with pytest.raises(TypeError):
        score(None)  # type: ignore[arg-type]


def test_invalid_options_raise():
    with pytest.raises(ValueError):
        score("text", {"sampleLimit": -1})
    with pytest.raises(ValueError):
        ReadabilityEngine(EngineConfig(words_per_second=0))


def test_each_call_gets_a_fresh_cache():
    engine = ReadabilityEngine()
    first = engine.measure(GOLDEN_TEXT)
    second = engine.measure(LONG_TEXT)
    assert first.cache is not second.cache
    assert first.lexicon_count() == 73
    assert "lexicon_count" not in second.cache


def test_concurrent_calls_do_not_share_counts():
    engine = ReadabilityEngine()
    expected = {GOLDEN_TEXT: engine.score(GOLDEN_TEXT), LONG_TEXT: engine.score(LONG_TEXT)}
    results: list[tuple[str, ReadabilityReport]] = []
    lock = threading.Lock()

    def worker(text: str) -> None:
        report = engine.score(text)
        with lock:
            results.append((text, report))

    threads = [
        threading.Thread(target=worker, args=(text,))
        for text in [GOLDEN_TEXT, LONG_TEXT] * 10
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 20
    for text, report in results:
        assert report == expected[text]


def test_score_logs_counts_at_debug(caplog: pytest.LogCaptureFixture):
    caplog.set_level("DEBUG", logger="readability_engine.engine")
    score(GOLDEN_TEXT)
    assert "median grade 9" in caplog.text
    assert "words=73" in caplog.text


def test_fractional_sample_limit_scores_like_truncated_limit():
    assert score(LONG_TEXT, {"sampleLimit": 12.7}) == score(
        LONG_TEXT, {"sampleLimit": 12}
    )
