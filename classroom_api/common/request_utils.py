from typing import Any, Optional

from flask import request


def get_json_body() -> dict[str, Any]:
    """
    Return the JSON object sent with the request.

    Requests without a JSON content type, or whose body is not an
    object, count as an empty body. Malformed JSON is a 400.
    """
    if not request.is_json:
        return {}
    data = request.get_json()
    return data if isinstance(data, dict) else {}


def required_text(value: Any) -> Optional[str]:
    """Trimmed string, or None when the value is not a non-blank string."""
    if not isinstance(value, str):
        return None
    return value.strip() or None


def optional_text(value: Any) -> Optional[str]:
    """str(value), keeping null as None."""
    return str(value) if value is not None else None


def optional_trimmed_text(value: Any) -> Optional[str]:
    """Trimmed str(value); null and blank both become None."""
    return (str(value).strip() or None) if value is not None else None
