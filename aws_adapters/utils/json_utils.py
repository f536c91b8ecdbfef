"""
JSON canonicalization for free-form JSON attributes.

Two documents that differ only in whitespace or key order normalize to the
same string, so they never show up as a change.
"""

import json

from aws_adapters.errors import InvalidJsonError


def normalize_json_string(value: str | None) -> str:
    """
    Normalize a JSON document to compact, key-sorted form.

    Args:
        value: JSON text; None or "" normalize to ""

    Returns:
        str: Canonical JSON text

    Raises:
        InvalidJsonError: If the text is not valid JSON
    """
    if not value:
        return ""
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise InvalidJsonError(f"contains an invalid JSON: {e}") from e
    return json.dumps(parsed, sort_keys=True, separators=(",", ":"))
