import pytest

from novasearch.domain.models.search import Intent
from novasearch.domain.services.keyword_intent import KeywordIntentDetector
from novasearch.domain.services.language import detect_script_language


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("buy cheap laptop", Intent.SHOPPING),
        ("latest news on elections", Intent.NEWS),
        ("how to learn python step by step", Intent.LEARNING),
        ("cheap flights to paris", Intent.TRAVEL),
        ("diabetes symptoms and treatment", Intent.HEALTH),
        ("bitcoin price prediction stocks", Intent.FINANCE),
        ("chocolate cake recipe", Intent.FOOD),
        ("اخبار عاجل", Intent.NEWS),
        ("eiffel tower height", Intent.GENERAL),
        ("", Intent.GENERAL),
    ],
)
def test_keyword_detection(query: str, expected: Intent) -> None:
    assert KeywordIntentDetector().detect(query) == expected


def test_scores_below_threshold_fall_back_to_general() -> None:
    detector = KeywordIntentDetector(threshold=100)

    assert detector.detect("buy cheap laptop") == Intent.GENERAL


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hello world", "en"),
        ("مرحبا", "ar"),
        ("你好", "zh"),
        ("こんにちは東京", "ja"),
        ("안녕하세요", "ko"),
        ("привет", "ru"),
        ("", "en"),
    ],
)
def test_detect_script_language(text: str, expected: str) -> None:
    assert detect_script_language(text) == expected
