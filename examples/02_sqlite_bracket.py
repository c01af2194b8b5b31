from __future__ import annotations

from _infra import TrackedConnection, User, banner, open_users_db, run

from kungfu import Error, Ok

from lazyseq import bracket, lift as L


def main() -> None:
    banner("02_sqlite_bracket: connection per traversal, closed on early stop")

    opened: list[TrackedConnection] = []
    users = bracket(
        open_users_db(opened),
        release=lambda tracked: tracked.close(),
        use=lambda tracked: tracked.conn.execute("SELECT id, name, is_active FROM users ORDER BY id"),
    ).map(lambda row: User(row[0], row[1], bool(row[2])))

    active = users.filter(lambda user: user.is_active)
    print([user.name for user in active.take(2)])
    print(f"connections opened={len(opened)} closed={sum(c.closed for c in opened)}")

    match L.down.first(active.skip(10), error=lambda: "no such user"):
        case Ok(user):
            print(f"found {user.name}")
        case Error(message):
            print(f"error: {message}")

    print(f"connections opened={len(opened)} closed={sum(c.closed for c in opened)}")


if __name__ == "__main__":
    run(main, debug=True)
