from __future__ import annotations

from _infra import banner, run

from lazyseq import Seq, iterate


def main() -> None:
    banner("01_quickstart: build once, traverse many times")

    evens_squared = (
        Seq.range(1, 20)
        .filter(lambda n: n % 2 == 0)
        .map(lambda n: n * n)
        .take(5)
    )
    print(evens_squared.to_list())
    print(evens_squared.reduce(lambda acc, n: acc + n, 0))

    fib = iterate([0, 1], lambda a, b: a + b)
    print(fib.skip_while(lambda n: n < 100).take(5).to_list())

    words = Seq.of("pear", "fig", "banana", "kiwi")
    print(words.sort_by(len).to_list())
    print(words.max(lambda a, b: len(a) - len(b)))
    print(Seq.zip(words, Seq.range(1, 100), lambda w, i: f"{i}. {w}").to_list())


if __name__ == "__main__":
    run(main)
