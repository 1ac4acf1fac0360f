"""Repository for the key-value settings table."""

import sqlite3


def get_setting(conn: sqlite3.Connection, key: str) -> str | None:
    row = conn.execute(
        "SELECT value FROM settings WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_setting(conn: sqlite3.Connection, key: str, value: str) -> None:
    """Insert or overwrite a setting."""
    conn.execute(
        "INSERT INTO settings (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


def delete_setting(conn: sqlite3.Connection, key: str) -> bool:
    """Remove a setting. Returns True if a row was deleted."""
    cursor = conn.execute("DELETE FROM settings WHERE key = ?", (key,))
    conn.commit()
    return cursor.rowcount > 0
