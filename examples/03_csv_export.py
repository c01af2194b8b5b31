from __future__ import annotations

import csv
import io

from _infra import SEED_USERS, banner, run

from kungfu import Error, Ok

from lazyseq import Seq


class ExportFailed(Exception):
    pass


def main() -> None:
    banner("03_csv_export: each() drives the traversal, to_result() reports failures")

    out = io.StringIO()
    writer = csv.writer(out)
    exported = (
        Seq.from_iterable(SEED_USERS)
        .peek(lambda user, index: print(f"  row {index}: {user.name}"))
        .each(lambda user: writer.writerow((user.id, user.name, user.is_active)))
    )
    print(f"exported {exported} rows")
    print(out.getvalue().strip())

    def check(user):
        if not user.is_active:
            raise ExportFailed(f"inactive user {user.name}")
        return user

    match Seq.from_iterable(SEED_USERS).map(check).to_result(on_error=str):
        case Ok(users):
            print(f"all {len(users)} users active")
        case Error(message):
            print(f"error: {message}")


if __name__ == "__main__":
    run(main)
