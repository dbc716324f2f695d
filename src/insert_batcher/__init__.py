"""
Insert Batcher - Merge compatible single-row INSERT statements into multi-row batches

This package recognizes parametrized ``INSERT INTO table (cols) VALUES (?, ...)``
statements, decides whether two of them target the same table and column list,
and generates the combined multi-row INSERT text so a client can send many rows
in a single round-trip.
"""

from insert_batcher.insert_parser import (
    InsertInfo,
    generate_multi_row_insert,
    is_compatible,
    is_parametrized_insert,
    match_insert_statement,
    parse_columns,
    parse_insert,
)

__version__ = "0.1.0"
__all__ = [
    "InsertInfo",
    "generate_multi_row_insert",
    "is_compatible",
    "is_parametrized_insert",
    "match_insert_statement",
    "parse_columns",
    "parse_insert",
]
