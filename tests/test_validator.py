import pytest

from news_engine.errors import ValidationError, ValidationKind
from news_engine.validator import parse_body, validate_request


def test_minimal_request_gets_defaults():
    req = validate_request({"topic": "  fuel price Nigeria  "})
    assert req.topic == "fuel price Nigeria"
    assert req.language == "en"
    assert req.trend_type == "manual"
    assert req.trend_score is None
    assert req.trend_source == ()
    assert req.trend_window_minutes is None


def test_full_request_is_normalized():
    req = validate_request(
        {
            "topic": "fuel price",
            "language": " FR ",
            "trendType": " trending ",
            "trendScore": 3,
            "trendSource": ["google_trends", "", 7, None],
            "trendWindowMinutes": 20.9,
        }
    )
    assert req.language == "fr"
    assert req.trend_type == "trending"
    assert req.trend_score == 3.0
    assert req.trend_source == ("google_trends", "7", "null")
    assert req.trend_window_minutes == 20


@pytest.mark.parametrize("body", [{}, {"topic": ""}, {"topic": "   "}, {"topic": 42}])
def test_missing_topic_is_rejected(body):
    with pytest.raises(ValidationError) as excinfo:
        validate_request(body)
    assert excinfo.value.kind is ValidationKind.MISSING_TOPIC
    assert excinfo.value.message == "topic is required"
    assert excinfo.value.status_code == 400


def test_wrong_types_are_silently_dropped():
    req = validate_request(
        {
            "topic": "x",
            "language": 5,
            "trendType": ["a"],
            "trendScore": "3.4",
            "trendSource": "twitter",
            "trendWindowMinutes": True,
        }
    )
    assert req.language == "en"
    assert req.trend_type == "manual"
    assert req.trend_score is None
    assert req.trend_source == ()
    assert req.trend_window_minutes is None


def test_request_is_immutable():
    req = validate_request({"topic": "x"})
    with pytest.raises(Exception):
        req.topic = "y"


def test_non_object_body_is_invalid():
    with pytest.raises(ValidationError) as excinfo:
        validate_request(["topic"])
    assert excinfo.value.kind is ValidationKind.INVALID_BODY


def test_parse_body():
    assert parse_body(None) == {}
    assert parse_body(b"  ") == {}
    assert parse_body('{"topic": "x"}') == {"topic": "x"}
    with pytest.raises(ValidationError):
        parse_body("{not json")


def test_large_integers_keep_precision():
    req = validate_request({"topic": "x", "trendWindowMinutes": 2**53 + 1})
    assert req.trend_window_minutes == 2**53 + 1


def test_deeply_nested_body_is_invalid():
    with pytest.raises(ValidationError) as excinfo:
        parse_body("[" * 200000)
    assert excinfo.value.kind is ValidationKind.INVALID_BODY
