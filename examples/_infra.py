from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


SEED_USERS = (
    User(1, "ada"),
    User(2, "grace", is_active=False),
    User(3, "linus"),
    User(4, "barbara"),
    User(5, "ken", is_active=False),
    User(6, "margaret"),
)


@dataclass(slots=True)
class TrackedConnection:
    """sqlite3 connection that remembers whether it was closed."""

    conn: sqlite3.Connection
    closed: bool = False

    def close(self) -> None:
        self.conn.close()
        self.closed = True


def open_users_db(opened: list[TrackedConnection]) -> Callable[[], TrackedConnection]:
    def connect() -> TrackedConnection:
        conn = sqlite3.connect(":memory:")
        conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, is_active INTEGER)")
        conn.executemany(
            "INSERT INTO users VALUES (?, ?, ?)",
            [(u.id, u.name, int(u.is_active)) for u in SEED_USERS],
        )
        tracked = TrackedConnection(conn)
        opened.append(tracked)
        return tracked

    return connect


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None], *, debug: bool = False) -> None:  # pragma: no cover (examples only)
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    main()
