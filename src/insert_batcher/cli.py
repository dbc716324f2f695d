#!/usr/bin/env python
"""
Command-line interface for Insert Batcher.

This module exposes the INSERT parser from the shell: inspect statements,
generate multi-row INSERTs and check whether two statements can be batched.
"""
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from insert_batcher import __version__
from insert_batcher.config import DEFAULT_DELIMITER, setup_logging
from insert_batcher.insert_parser import (
    InsertInfo,
    generate_multi_row_insert,
    is_parametrized_insert,
    parse_insert,
)

# Initialize console for rich output
console = Console()

logger = logging.getLogger(__name__)


def read_sql_statements(file_path: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """
    Read SQL statements from a file.

    Args:
        file_path: Path to the SQL file
        delimiter: Statement delimiter

    Returns:
        List of SQL statements without their trailing delimiter
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"SQL file not found: {file_path}")

    with open(path, "r") as f:
        content = f.read()

    # Delimiters inside comments or quotes are not handled
    statements = []
    current = ""
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("--"):
            continue

        current += line + " "
        if line.endswith(delimiter):
            statement = current.strip()
            # An empty delimiter makes every line its own statement
            if delimiter:
                statement = statement[: -len(delimiter)].strip()
            statements.append(statement)
            current = ""

    if current.strip():
        statements.append(current.strip())

    return statements


def _describe(info: InsertInfo) -> str:
    return f"{info.table_name} ({', '.join(info.columns)})"


def _error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="insert-batcher")
def cli():
    """
    Insert Batcher - merge single-row INSERT statements into multi-row batches.

    Inspect parametrized INSERT statements, check whether two of them can share
    a batch, and generate the combined multi-row INSERT text.
    """
    pass


@cli.command()
@click.argument('sql_file', required=False, type=click.Path(dir_okay=False))
@click.option('--sql', '-s', 'sql_texts', multiple=True, help='SQL statement to parse (repeatable)')
@click.option('--delimiter', '-d', default=DEFAULT_DELIMITER, help='SQL statement delimiter (default: ;)')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def parse(sql_file: Optional[str], sql_texts: tuple, delimiter: str, as_json: bool, verbose: bool):
    """Parse INSERT statements from SQL_FILE and/or --sql options."""
    setup_logging(verbose)

    statements = list(sql_texts)
    if sql_file:
        try:
            statements = read_sql_statements(sql_file, delimiter) + statements
        except (FileNotFoundError, OSError) as e:
            logger.error(f"Error reading SQL file: {str(e)}")
            _error(str(e))

    if not statements:
        _error("No SQL statements given. Pass a SQL file or --sql.")

    logger.debug(f"Parsing {len(statements)} SQL statements")

    results = []
    for statement in statements:
        info = parse_insert(statement)
        results.append({
            "sql": statement,
            "table_name": info.table_name if info else None,
            "columns": list(info.columns) if info else None,
            "parametrized": is_parametrized_insert(statement),
        })

    if as_json:
        click.echo(json.dumps(results, indent=2))
        return

    table = Table(title="INSERT statements")
    table.add_column("#", justify="right")
    table.add_column("Table")
    table.add_column("Columns")
    table.add_column("Parametrized")
    for i, result in enumerate(results, start=1):
        if result["table_name"] is None:
            table.add_row(str(i), "[dim]no match[/dim]", "", "no")
        else:
            table.add_row(
                str(i),
                escape(result["table_name"]),
                escape(", ".join(result["columns"])),
                "yes" if result["parametrized"] else "no",
            )
    console.print(table)


@cli.command()
@click.argument('sql')
@click.option('--rows', '-n', required=True, type=int, help='Number of value tuples to generate')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def expand(sql: str, rows: int, verbose: bool):
    """Generate a multi-row INSERT from a single-row INSERT SQL."""
    setup_logging(verbose)

    info = parse_insert(sql)
    if info is None:
        _error("Statement is not an INSERT with an explicit column list")

    multi_row_sql = generate_multi_row_insert(info, rows)
    if multi_row_sql is None:
        _error(f"Row count must be positive, got {rows}")

    click.echo(multi_row_sql)


@cli.command()
@click.argument('sql_a')
@click.argument('sql_b')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def compare(sql_a: str, sql_b: str, verbose: bool):
    """Check whether two INSERT statements can share a multi-row batch."""
    setup_logging(verbose)

    first = parse_insert(sql_a)
    second = parse_insert(sql_b)
    if first is None or second is None:
        _error("Both statements must be INSERTs with an explicit column list")

    if first.is_compatible_with(second):
        console.print(f"[bold green]✓[/bold green] Compatible: {escape(_describe(first))}")
    else:
        console.print("[bold yellow]✗[/bold yellow] Not compatible")
        console.print(f"  A: {escape(_describe(first))}")
        console.print(f"  B: {escape(_describe(second))}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
