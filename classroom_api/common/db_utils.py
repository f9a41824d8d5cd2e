"""
Helpers for running PostgREST queries built from a scoped Supabase client.
"""
from typing import Any, Iterable, Optional

from flask import current_app
from postgrest import APIError

from classroom_api.errors import DatabaseError, NotVisible

# Postgres: invalid_text_representation (e.g. a malformed uuid in the path)
INVALID_TEXT_REPRESENTATION = "22P02"


def execute(query, action: str, not_visible_message: Optional[str] = None) -> list[dict[str, Any]]:
    """
    Execute a query builder and return its rows.

    Raises DatabaseError for provider failures. When `not_visible_message`
    is given, an id the database cannot parse is reported as NotVisible
    instead, since no row can match it.
    """
    try:
        response = query.execute()
    except APIError as e:
        if not_visible_message and e.code == INVALID_TEXT_REPRESENTATION:
            raise NotVisible(not_visible_message)
        current_app.logger.warning(f"{action}: {e.code} {e.message}")
        raise DatabaseError(action, e.message, e.code) from e
    return response.data or []


def project(row: dict[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Keep only the public fields of a row."""
    return {field: row.get(field) for field in fields}


def inserted_row(rows: list[dict[str, Any]], action: str) -> dict[str, Any]:
    """The row an insert returned; an empty representation is a provider failure."""
    if not rows:
        current_app.logger.warning(f"{action}: insert returned no row")
        raise DatabaseError(action, "No row returned")
    return rows[0]
