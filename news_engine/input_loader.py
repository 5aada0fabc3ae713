"""Load a CSV of trending topics into validated :class:`GenerationRequest` objects."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .errors import ValidationError
from .models import GenerationRequest
from .validator import validate_request

logger = logging.getLogger(__name__)

SOURCE_SEPARATOR = "|"


def _cell(row: pd.Series, *columns: str) -> Any:
    """Return the first non-empty value among *columns*, or *None*."""
    for column in columns:
        value = row.get(column)
        if value is None or (isinstance(value, float) and pd.isna(value)):
            continue
        # numpy scalars -> plain Python numbers for the JSON-style decoder
        return value.item() if hasattr(value, "item") else value
    return None


def _row_payload(row: pd.Series) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "topic": _cell(row, "topic"),
        "language": _cell(row, "language"),
        "trendType": _cell(row, "trend_type"),
        "trendScore": _cell(row, "trend_score", "significance_score"),
        "trendWindowMinutes": _cell(row, "trend_window_minutes"),
    }
    sources = _cell(row, "trend_source")
    if sources is not None:
        payload["trendSource"] = [part.strip() for part in str(sources).split(SOURCE_SEPARATOR)]
    # The topic is text even when pandas reads it as a number
    if payload["topic"] is not None:
        payload["topic"] = str(payload["topic"])
    return {key: value for key, value in payload.items() if value is not None}


def load_generation_requests(csv_path: Path) -> List[GenerationRequest]:
    """Read *csv_path* and return one request per row with a usable topic.

    Parameters
    ----------
    csv_path:
        CSV with a ``topic`` column and optional ``language``, ``trend_type``,
        ``trend_score`` (or ``significance_score``), ``trend_source``
        (``|``-separated) and ``trend_window_minutes`` columns.

    Requests are ordered by trend score, highest first; rows without a score
    come last in file order.
    """

    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(csv_path)

    df = pd.read_csv(csv_path, dtype={"topic": str, "language": str, "trend_type": str, "trend_source": str})
    if "topic" not in df.columns:
        raise ValueError(f"{csv_path} has no 'topic' column")

    requests: List[GenerationRequest] = []
    for index, row in df.iterrows():
        try:
            requests.append(validate_request(_row_payload(row)))
        except ValidationError as exc:
            logger.warning("Skipping row %s of %s: %s", index, csv_path.name, exc.message)

    # sorted() is stable, so unscored rows keep their file order
    return sorted(
        requests,
        key=lambda req: (req.trend_score is None, -(req.trend_score or 0.0)),
    )
