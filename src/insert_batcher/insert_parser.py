"""
INSERT statement parser for multi-row batching.

This module extracts the table and column list from single-row
``INSERT INTO table (col1, col2, ...) VALUES (...)`` statements, decides when two
such statements can share a batch, and generates the combined multi-row INSERT.

Every function here is pure: unparseable input yields ``None`` (or ``False``)
instead of an exception, so callers can probe arbitrary SQL safely.

Known limitation: the column list is split on every comma, so a quoted
identifier that contains a comma (``(`a,b`, c)``) is split into separate
columns. Callers may depend on this, so it is kept as is.

Example:
    >>> from insert_batcher import parse_insert, generate_multi_row_insert
    >>> info = parse_insert("INSERT INTO users (id, name) VALUES (?, ?)")
    >>> info.table_name, info.columns
    ('users', ('id', 'name'))
    >>> generate_multi_row_insert(info, 2)
    'INSERT INTO users (id, name) VALUES (?, ?), (?, ?)'
"""
import logging
import re
from typing import Iterable, List, Optional, Tuple

from insert_batcher.config import PLACEHOLDER

logger = logging.getLogger(__name__)

# INSERT INTO table (col1, col2, ...) VALUES (
# \w and \s are ASCII-only, so non-ASCII table names do not match
INSERT_PATTERN = re.compile(
    r"^\s*INSERT\s+INTO\s+([\w`.]+)\s*\(([^)]+)\)\s+VALUES\s*\(",
    re.IGNORECASE | re.DOTALL | re.ASCII,
)


class InsertInfo:
    """
    Parsed components of a single-row INSERT statement.

    Instances are immutable. Equality and hashing only consider the table name
    and the ordered column list; ``original_sql`` is kept for diagnostics.

    Attributes:
        table_name (str): Table token as written, backticks included
        columns (tuple): Column names in statement order, backticks removed
        original_sql (str): The trimmed source statement
    """

    __slots__ = ("_table_name", "_columns", "_original_sql")

    def __init__(self, table_name: str, columns: Iterable[str], original_sql: str = ""):
        columns = tuple(columns)
        if not table_name:
            raise ValueError("table_name must not be empty")
        if not columns:
            raise ValueError("columns must not be empty")

        object.__setattr__(self, "_table_name", table_name)
        object.__setattr__(self, "_columns", columns)
        object.__setattr__(self, "_original_sql", original_sql)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def table_name(self) -> str:
        return self._table_name

    @property
    def columns(self) -> Tuple[str, ...]:
        return self._columns

    @property
    def original_sql(self) -> str:
        return self._original_sql

    @property
    def column_count(self) -> int:
        return len(self._columns)

    def is_compatible_with(self, other: Optional["InsertInfo"]) -> bool:
        """
        Check whether this INSERT can share a multi-row batch with another.

        Two INSERTs are compatible when they target the same table with the
        same columns in the same order. Both comparisons are case-sensitive.

        Args:
            other: Parsed INSERT to compare against

        Returns:
            True if both statements can be merged into one multi-row INSERT
        """
        if other is None:
            return False
        return self._table_name == other.table_name and self._columns == other.columns

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, InsertInfo):
            return NotImplemented
        return self.is_compatible_with(other)

    def __hash__(self):
        return hash((self._table_name, self._columns))

    def __reduce__(self):
        # Rebuild through __init__ since __setattr__ is blocked
        return (type(self), (self._table_name, self._columns, self._original_sql))

    def __repr__(self):
        return f"InsertInfo(table_name={self._table_name!r}, columns={list(self._columns)!r})"


def match_insert_statement(sql: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Recognize the ``INSERT INTO <table> (<columns>) VALUES (`` prefix.

    Keywords are matched case-insensitively with any whitespace between tokens.
    Nothing after the opening parenthesis of the VALUES tuple is inspected.

    Args:
        sql: SQL text to inspect

    Returns:
        ``(table_token, columns_substring)`` both trimmed, or None if the text
        does not have that shape
    """
    if sql is None or not sql.strip():
        return None

    match = INSERT_PATTERN.match(sql.strip())
    if not match:
        return None

    return match.group(1).strip(), match.group(2).strip()


def _strip_backticks(token: str) -> str:
    if len(token) >= 2 and token.startswith("`") and token.endswith("`"):
        return token[1:-1]
    return token


def parse_columns(columns_str: str) -> List[str]:
    """
    Split a raw column list into column names.

    Each comma-separated token is trimmed and one surrounding pair of backticks
    is removed. Empty tokens are dropped; order and duplicates are kept.
    Commas inside quoted identifiers are not special.

    Args:
        columns_str: Text found between the column-list parentheses

    Returns:
        List of column names, possibly empty
    """
    columns = []
    for token in columns_str.split(","):
        column = _strip_backticks(token.strip())
        if column:
            columns.append(column)
    return columns


def parse_insert(sql: Optional[str]) -> Optional[InsertInfo]:
    """
    Parse an INSERT statement to extract table and column information.

    Args:
        sql: The INSERT SQL statement to parse

    Returns:
        InsertInfo with the parsed information, or None if the statement is
        not a column-list INSERT or its column list is empty
    """
    matched = match_insert_statement(sql)
    if matched is None:
        logger.debug("Not a column-list INSERT statement")
        return None

    table_name, columns_str = matched
    columns = parse_columns(columns_str)
    if not columns:
        logger.debug(f"INSERT into {table_name} has an empty column list")
        return None

    return InsertInfo(table_name, columns, sql.strip())


def is_compatible(first: Optional[InsertInfo], second: Optional[InsertInfo]) -> bool:
    """Return True if both parsed INSERTs exist and can share a batch."""
    if first is None or second is None:
        return False
    return first.is_compatible_with(second)


def is_parametrized_insert(sql: Optional[str]) -> bool:
    """
    Check if the SQL statement is a parametrized INSERT suitable for batching.

    The placeholder may appear anywhere in the statement, not only in the
    VALUES clause.

    Args:
        sql: The SQL statement to check

    Returns:
        True if the statement parses and contains at least one placeholder
    """
    return parse_insert(sql) is not None and PLACEHOLDER in sql


def generate_multi_row_insert(insert_info: Optional[InsertInfo], number_of_rows: int) -> Optional[str]:
    """
    Generate a multi-row INSERT statement for a parsed template.

    Output always uses single-space separators, so for one row the result may
    differ in whitespace from the source statement. No values are bound here:
    the caller flattens the per-row parameters in the same row order.

    Args:
        insert_info: The parsed INSERT information
        number_of_rows: Number of value tuples to emit

    Returns:
        The multi-row INSERT SQL, or None if ``insert_info`` is None or
        ``number_of_rows`` is not positive
    """
    if insert_info is None or number_of_rows <= 0:
        logger.warning(
            f"Cannot generate multi-row INSERT (insert_info={insert_info!r}, "
            f"number_of_rows={number_of_rows})"
        )
        return None

    value_clause = "(" + ", ".join([PLACEHOLDER] * insert_info.column_count) + ")"
    sql = (
        f"INSERT INTO {insert_info.table_name} ({', '.join(insert_info.columns)}) "
        f"VALUES {', '.join([value_clause] * number_of_rows)}"
    )

    logger.debug(f"Generated {number_of_rows}-row INSERT for {insert_info.table_name}")
    return sql
