#!/usr/bin/env python
"""
Multi-row INSERT example for Insert Batcher

This example plays the role of a client that queues parametrized INSERTs:
it keeps only parametrized INSERTs, groups consecutive compatible statements,
flattens their bound values row by row and executes one multi-row INSERT per
group against an in-memory SQLite database.
"""
import logging
import sqlite3

from insert_batcher import generate_multi_row_insert, is_compatible, is_parametrized_insert, parse_insert


# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    """Run the multi-row INSERT example."""
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE users (id INTEGER, name TEXT)")
    conn.execute("CREATE TABLE orders (id INTEGER, user_id INTEGER)")

    pending = [
        ("INSERT INTO users (id, name) VALUES (?, ?)", [1, "Alice"]),
        ("insert into users (id, name) values (?, ?)", [2, "Bob"]),
        ("INSERT INTO orders (id, user_id) VALUES (?, ?)", [10, 1]),
        ("INSERT INTO users (id, name) VALUES (?, ?)", [3, "Carol"]),
    ]

    # Group consecutive compatible statements
    groups = []
    for sql, params in pending:
        if not is_parametrized_insert(sql):
            groups.append((None, sql, [params]))
            continue

        info = parse_insert(sql)
        if groups and is_compatible(groups[-1][0], info):
            groups[-1][2].append(params)
        else:
            groups.append((info, sql, [params]))

    for info, sql, rows in groups:
        if info is None:
            conn.execute(sql, rows[0])
            continue

        multi_row_sql = generate_multi_row_insert(info, len(rows))
        flattened = [value for row in rows for value in row]
        logger.info(f"Executing {len(rows)} rows: {multi_row_sql}")
        conn.execute(multi_row_sql, flattened)

    logger.info(f"Users: {conn.execute('SELECT * FROM users ORDER BY id').fetchall()}")
    logger.info(f"Orders: {conn.execute('SELECT * FROM orders').fetchall()}")
    conn.close()


if __name__ == "__main__":
    main()
