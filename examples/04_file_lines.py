from __future__ import annotations

import tempfile
from pathlib import Path

from _infra import banner, run

from lazyseq import managed


def main() -> None:
    banner("04_file_lines: managed() opens the file per traversal")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "access.log"
        path.write_text(
            "\n".join(f"{'ERROR' if n % 4 == 0 else 'INFO'} request {n}" for n in range(1, 21)),
            encoding="utf-8",
        )

        lines = managed(lambda: open(path, encoding="utf-8")).map(str.rstrip)
        errors = lines.filter(lambda line: line.startswith("ERROR"))

        print(errors.take(2).to_list())
        print(f"{errors.count()} errors in {lines.count()} lines")


if __name__ == "__main__":
    run(main, debug=True)
