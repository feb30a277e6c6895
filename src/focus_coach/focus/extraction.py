"""Pull the candidate suggestion out of raw model output.

Models sometimes wrap the JSON in prose or ```json fences despite being told
not to, so the parser takes the span from the first `{` to the last `}`.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, StrictStr
from pydantic import ValidationError as PayloadError

from focus_coach.core.errors import ExtractionError


class SuggestionPayload(BaseModel):
    """Shape of the model's JSON answer. Extra fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    suggestion: StrictStr


def extract_suggestion(raw_text: str) -> str:
    """Return the `suggestion` string from `raw_text`.

    Raises:
        ExtractionError: No `{...}` span, invalid JSON, or no string
            `suggestion` field.
    """
    start = raw_text.find("{")
    end = raw_text.rfind("}")
    if start == -1 or end < start:
        raise ExtractionError(
            "No JSON object found in the model response.", raw_response=raw_text
        )

    try:
        data = json.loads(raw_text[start : end + 1])
    except json.JSONDecodeError as e:
        raise ExtractionError(
            f"Model response contains malformed JSON: {e.msg}.", raw_response=raw_text
        ) from e

    if not isinstance(data, dict):
        raise ExtractionError("Model response JSON is not an object.", raw_response=raw_text)

    try:
        payload = SuggestionPayload.model_validate(data)
    except PayloadError as e:
        raise ExtractionError(
            'Invalid response format: JSON must have a "suggestion" field of type string.',
            raw_response=raw_text,
        ) from e

    return payload.suggestion
