"""Decode the raw service response into a validated AnalysisResult."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from ..errors import DecodeError
from ..models.analysis import AnalysisResult

logger = logging.getLogger(__name__)


def decode_result(raw: str) -> AnalysisResult:
    """Parse and validate a JSON response.

    The text is parsed as-is: no fence stripping or other repair. Anything
    that is not a JSON object carrying every required section raises
    DecodeError.
    """
    try:
        data = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        result = AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Response does not match the analysis schema ({e.error_count()} errors)"
        ) from e

    logger.debug(
        "Decoded analysis: %d highlights, %d schedule items",
        len(result.highlights),
        len(result.schedule),
    )
    return result
