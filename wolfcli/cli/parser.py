"""Response body decoding."""

import json
from typing import Any

from wolfcli.core.exceptions import DecodeError
from wolfcli.core.logging import get_logger

logger = get_logger(__name__)


def decode_response(text: str) -> Any:
    """
    Decode the raw response body into a result document.

    No schema validation happens here; the formatter falls back field by field.

    Raises:
        DecodeError: If the body is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Response is not valid JSON", error=str(e), size=len(text))
        raise DecodeError(f"Could not decode response as JSON: {e}") from e
