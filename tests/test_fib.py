import io
import re

import pytest

from bigfib.fib import Fibonacci, fibonacci


def test_first_terms():
    assert int(fibonacci(0)) == 0
    assert int(fibonacci(1)) == 1
    assert int(fibonacci(2)) == 1


def test_known_term():
    assert str(fibonacci(10)) == "55"


def test_recurrence_holds():
    terms = [int(fibonacci(n)) for n in range(200)]
    for previous, current, following in zip(terms, terms[1:], terms[2:]):
        assert following == previous + current


@pytest.mark.parametrize("n", [50, 500, 3000])
def test_doubling_identity(n):
    fn = int(fibonacci(n))
    fn1 = int(fibonacci(n + 1))
    assert int(fibonacci(2 * n)) == fn * (2 * fn1 - fn)
    assert int(fibonacci(2 * n + 1)) == fn * fn + fn1 * fn1


def test_cassini_identity():
    n = 1001
    prev, cur, nxt = (int(fibonacci(k)) for k in (n - 1, n, n + 1))
    assert prev * nxt - cur * cur == (-1) ** n


def test_negative_term_rejected():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_non_int_term_rejected():
    with pytest.raises(TypeError):
        fibonacci(2.0)


def test_fibonacci_object_fields():
    fib = Fibonacci(300)
    assert fib.n == 300
    assert fib.text == str(fibonacci(300))
    assert fib.digits() == len(str(int(fibonacci(300))))
    assert fib.calc_ms >= 0.0
    assert fib.cast_ms >= 0.0


def test_report_full():
    stream = io.StringIO()
    Fibonacci(10).report(True, True, stream)
    lines = stream.getvalue().splitlines()
    assert lines[0] == "55"
    assert lines[1] == "Term: 10"
    assert lines[2] == "Chunks: 1"
    assert lines[3] == "Digits: 2"
    assert re.fullmatch(r"Calculating time: +\d+\.\d{6} ms", lines[4])
    assert re.fullmatch(r"Casting time: +\d+\.\d{6} ms", lines[5])
    assert re.fullmatch(r"Printing time: +\d+\.\d{6} ms", lines[6])
    assert re.fullmatch(r"Total time: +\d+\.\d{6} ms", lines[7])
    assert len(lines) == 8


def test_report_time_field_width():
    stream = io.StringIO()
    Fibonacci(5).report(True, False, stream)
    line = stream.getvalue().splitlines()[3]
    assert line.startswith("Calculating time: ")
    assert len(line[len("Calculating time: "):-len(" ms")]) == 14


def test_report_summary_only_has_no_printing_time():
    stream = io.StringIO()
    Fibonacci(20).report(summary=True, number=False, stream=stream)
    text = stream.getvalue()
    assert "Printing time" not in text
    assert text.splitlines()[0] == "Term: 20"


def test_report_number_only():
    stream = io.StringIO()
    fib = Fibonacci(100)
    fib.report(summary=False, number=True, stream=stream)
    assert stream.getvalue() == fib.text + "\n"