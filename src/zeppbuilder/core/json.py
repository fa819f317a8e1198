"""Fast JSON parsing and encoding with multiple backends."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code block, if any."""
    if "```" not in text:
        return text

    if "```json" in text:
        start = text.find("```json") + 7
    else:
        start = text.find("```") + 3

    end = text.find("```", start)
    if end == -1:
        return text[start:].strip()
    return text[start:end].strip()


def extract_json_array(text: str, repair: bool = True) -> list[Any]:
    """
    Extract and parse a top-level JSON array from model output.

    Args:
        text: Text containing a JSON array
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed list

    Raises:
        JSONParseError: If no array is found or parsing fails
    """
    working = strip_code_fence(text.strip())

    start = working.find("[")
    end = working.rfind("]")
    if start == -1 or end == -1 or end < start:
        raise JSONParseError("No JSON array found in text")

    json_str = working[start:end + 1]

    # msgspec first (fastest)
    try:
        result = msgspec.json.decode(json_str.encode("utf-8"))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e
        try:
            result = json.loads(repair_json(json_str))
        except Exception as repair_error:
            raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error

    if not isinstance(result, list):
        raise JSONParseError(f"Expected list, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any, indent: int = 0) -> str:
    """
    Encode object to JSON string.

    Compact output goes through orjson; indented output uses the stdlib so
    the indent width is honoured exactly.
    """
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

    return json.dumps(obj, indent=indent if indent > 0 else None, ensure_ascii=False)
