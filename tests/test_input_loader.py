import csv
from pathlib import Path

import pytest

from news_engine.input_loader import load_generation_requests


def _write_csv(path: Path, rows: list[dict[str, str | int]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=rows[0].keys())
        writer.writeheader()
        writer.writerows(rows)


def test_load_generation_requests(tmp_path: Path) -> None:
    """Rows become requests ordered by trend score, blanks falling back to defaults."""
    topics_csv = tmp_path / "trends" / "news_topics.csv"
    _write_csv(
        topics_csv,
        [
            {
                "topic": "Lagos flooding",
                "language": "EN",
                "trend_type": "trending",
                "significance_score": "8.7",
                "trend_source": "twitter|google_trends",
                "trend_window_minutes": 20,
            },
            {
                "topic": "fuel price Nigeria",
                "language": "",
                "trend_type": "",
                "significance_score": "",
                "trend_source": "",
                "trend_window_minutes": "",
            },
            {
                "topic": "Naira exchange rate",
                "language": "fr",
                "trend_type": "trending",
                "significance_score": "9.1",
                "trend_source": "twitter",
                "trend_window_minutes": "",
            },
        ],
    )

    requests = load_generation_requests(topics_csv)
    assert [r.topic for r in requests] == ["Naira exchange rate", "Lagos flooding", "fuel price Nigeria"]

    flooding = requests[1]
    assert flooding.language == "en"
    assert flooding.trend_score == 8.7
    assert flooding.trend_source == ("twitter", "google_trends")
    assert flooding.trend_window_minutes == 20

    fuel = requests[2]
    assert fuel.language == "en"
    assert fuel.trend_type == "manual"
    assert fuel.trend_score is None
    assert fuel.trend_source == ()


def test_rows_without_topic_are_skipped(tmp_path: Path) -> None:
    topics_csv = tmp_path / "topics.csv"
    _write_csv(topics_csv, [{"topic": ""}, {"topic": "  "}, {"topic": "Election results"}])
    assert [r.topic for r in load_generation_requests(topics_csv)] == ["Election results"]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_generation_requests(tmp_path / "nope.csv")
