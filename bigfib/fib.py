"""Fibonacci numbers by fast doubling, with timing and a printable report."""

from __future__ import annotations

import sys
import time
from typing import TextIO

from bigfib.bigint import BigInt


def fibonacci(n: int) -> BigInt:
    """Return the ``n``-th Fibonacci number (F(0) = 0, F(1) = 1)."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int term, got {type(n).__name__}")
    if n < 0:
        raise ValueError("the Fibonacci term must be non-negative")
    if n == 0:
        return BigInt(0)
    if n < 3:
        return BigInt(1)

    a, b = BigInt(0), BigInt(1)
    for bit in bin(n)[2:]:
        c = a * (b + b - a)
        d = a * a + b * b
        if bit == "1":
            a, b = d, c + d
        else:
            a, b = c, d
    return a


class Fibonacci:
    """A computed Fibonacci term with its decimal text and timings."""

    def __init__(self, n: int) -> None:
        self.n = n

        start = time.perf_counter()
        self.f = fibonacci(n)
        self.calc_ms = (time.perf_counter() - start) * 1000.0

        start = time.perf_counter()
        self.text = str(self.f)
        self.cast_ms = (time.perf_counter() - start) * 1000.0

    def digits(self) -> int:
        """Number of decimal digits of the term."""
        return len(self.text)

    def report(
        self,
        summary: bool = True,
        number: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        """Write the number and/or a summary of it to ``stream``."""
        out = sys.stdout if stream is None else stream
        print_ms = 0.0

        if number:
            start = time.perf_counter()
            out.write(f"{self.text}\n")
            out.flush()
            print_ms = (time.perf_counter() - start) * 1000.0

        if summary:
            lines = [
                f"Term: {self.n}",
                f"Chunks: {self.f.chunks()}",
                f"Digits: {self.digits()}",
                f"Calculating time: {self.calc_ms:14.6f} ms",
                f"Casting time:     {self.cast_ms:14.6f} ms",
            ]
            if number:
                lines.append(f"Printing time:    {print_ms:14.6f} ms")
            total = self.calc_ms + self.cast_ms + print_ms
            lines.append(f"Total time:       {total:14.6f} ms")
            out.write("\n".join(lines) + "\n")