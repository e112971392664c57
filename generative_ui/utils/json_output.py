"""Parse JSON documents out of raw model output"""
import json
import re
from typing import Any

_FENCE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?```$", re.DOTALL | re.IGNORECASE)


def strip_code_fence(text: str) -> str:
    """
    Remove one enclosing Markdown code fence, if present.

    Models asked for bare JSON still wrap it in ```json blocks now and then.
    """
    text = text.strip()
    match = _FENCE.match(text)
    if match:
        return match.group(1).strip()
    return text


def parse_json_output(text: str) -> Any:
    """
    Parse model output as JSON.

    Any well-formed JSON value is returned as-is; no shape checks.

    Raises:
        json.JSONDecodeError: text is not valid JSON
    """
    return json.loads(strip_code_fence(text))
