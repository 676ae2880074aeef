"""Shared utilities for SQLAlchemy repositories."""

from typing import Optional

from sqlalchemy import ColumnElement, Select
from sqlalchemy.exc import IntegrityError

from mindstore.domain.shared.value_objects import PageRequest


def is_unique_violation(error: IntegrityError, column: Optional[str] = None) -> bool:
    """Tell unique-constraint failures apart from other integrity errors.

    SQLite reports "UNIQUE constraint failed: <table>.<column>", PostgreSQL
    reports "duplicate key value violates unique constraint" followed by
    the constraint or index name, which contains the column name. When
    ``column`` is given, only a violation on that column counts.
    """
    message = str(error.orig if error.orig is not None else error).lower()
    if "unique" not in message and "duplicate key" not in message:
        return False
    return column is None or column.lower() in message


def apply_page(
    stmt: Select,
    page_request: PageRequest,
    sort_columns: dict[str, ColumnElement],
    tie_breaker: ColumnElement,
) -> Select:
    """Add ORDER BY, OFFSET and LIMIT for ``page_request`` to ``stmt``.

    ``tie_breaker`` (normally the primary key) keeps page boundaries
    stable when the sort column has duplicates.
    """
    column = sort_columns[page_request.sort_field]
    order = column.desc() if page_request.is_descending else column.asc()
    return (
        stmt.order_by(order, tie_breaker.asc())
        .offset(page_request.offset)
        .limit(page_request.page_size)
    )
