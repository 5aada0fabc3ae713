#!/usr/bin/env python3
"""Console-script wrappers for the news generator.

After an editable install (``pip install -e .``) the following commands become
available system-wide:

* ``news-generate``        – generate and store one article for ``--topic``
* ``news-generate-batch``  – one article per row of a trending-topics CSV

Both go through :func:`news_engine.handler.handle_invocation`, exactly like the
HTTP service, so responses and exit codes match what the API would return.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import httpx

from .config import Settings, load_settings
from .handler import InvocationResult, handle_invocation
from .input_loader import load_generation_requests
from .models import GenerationRequest

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOGGER = logging.getLogger(__name__)


def _invoke(payload: Dict[str, Any], settings: Settings, client: httpx.Client) -> InvocationResult:
    return handle_invocation("POST", json.dumps(payload), settings, client=client)


def _request_payload(request: GenerationRequest) -> Dict[str, Any]:
    return request.model_dump(by_alias=True, mode="json", exclude_none=True)


# ---------------------------------------------------------------------------
# Entry-points
# ---------------------------------------------------------------------------

def generate(argv: List[str] | None = None) -> None:
    """Generate one article and print the invocation result as JSON."""
    parser = argparse.ArgumentParser(description="Generate and store one AI-written news article")
    parser.add_argument("--topic", required=True, help="Topic to write about")
    parser.add_argument("--language", default="en", help="Language code (default: en)")
    parser.add_argument("--trend-type", default="manual", help="Trend type stored with the article")
    parser.add_argument("--trend-score", type=float, default=None, help="Optional trend score")
    parser.add_argument(
        "--trend-source",
        action="append",
        default=[],
        help="Trend source; repeat for several sources",
    )
    parser.add_argument("--trend-window-minutes", type=int, default=None, help="Trend window in minutes")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    payload: Dict[str, Any] = {
        "topic": args.topic,
        "language": args.language,
        "trendType": args.trend_type,
        "trendSource": args.trend_source,
    }
    if args.trend_score is not None:
        payload["trendScore"] = args.trend_score
    if args.trend_window_minutes is not None:
        payload["trendWindowMinutes"] = args.trend_window_minutes

    settings = load_settings()
    with httpx.Client(timeout=settings.request_timeout) as client:
        result = _invoke(payload, settings, client)

    print(json.dumps(result.payload, indent=2, ensure_ascii=False))
    sys.exit(0 if result.status_code == 201 else 1)


def generate_batch(argv: List[str] | None = None) -> None:
    """Generate one article per CSV row, highest trend score first."""
    parser = argparse.ArgumentParser(description="Generate articles for every topic in a CSV file")
    parser.add_argument("csv_path", type=Path, help="CSV with a 'topic' column")
    parser.add_argument("--limit", type=int, default=None, help="Only process the first N topics")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    requests = load_generation_requests(args.csv_path)
    if args.limit is not None:
        requests = requests[: args.limit]
    LOGGER.info("🚀 Generating %d articles from %s", len(requests), args.csv_path)

    settings = load_settings()
    failures = 0
    with httpx.Client(timeout=settings.request_timeout) as client:
        for request in requests:
            result = _invoke(_request_payload(request), settings, client)
            if result.status_code == 201:
                LOGGER.info("✅ %s -> %s", request.topic, result.payload["id"])
            else:
                failures += 1
                LOGGER.error("❌ %s failed: %s", request.topic, result.payload.get("error"))

    LOGGER.info("🎉 Batch finished: %d ok, %d failed", len(requests) - failures, failures)
    sys.exit(1 if failures else 0)
