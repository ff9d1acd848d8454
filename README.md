# bigfib

Calculate Fibonacci numbers of very large terms. Numbers are stored as
base-10^9 limbs. They are multiplied with Karatsuba multiplication and
computed by fast doubling.

## Installation

```
pip install .
```

## Command line

```
bigfib [OPTIONS]... N...
```

The same command can also be started with `python -m bigfib.cli`.

For each term `N` the command prints its Fibonacci number and then a
summary. The summary gives the term, the number of chunks (base-10^9 limbs),
the number of decimal digits, and the time spent calculating, converting to
text and printing, all in milliseconds. A blank line separates the output of
two terms.

Options:

- `-q`, `--quiet`: don't print the Fibonacci number
- `-s`, `--simple`: don't print the summary
- `-h`, `--help`: display help and exit
- `-v`, `--version`: output version information and exit

Options come before the terms. Every argument from the first one that does
not start with `-` onward is treated as a term. Unknown options are reported
on standard error, and the terms are still processed.

A term is read from its leading decimal digits, and any characters after them
are ignored. Leading whitespace and a sign are allowed. An argument with no
leading digits is reported as `Error. Not valid number: "..."`. A term above
2^64 - 1, or a negative one, is reported as `Error. Unknown.`. In both cases
the remaining terms are still processed.

If no term is given, the command prints a usage hint on standard error and
exits with status 1. If `-q` and `-s` are given together, it prints a warning
and does nothing more.

Example:

```
bigfib -s 10 100
```

```
55

354224848179261915075
```

## Library

```python
from bigfib.bigint import BigInt
from bigfib.fib import Fibonacci, fibonacci

print(fibonacci(100))                  # 354224848179261915075

f = Fibonacci(1000)
print(f.digits())                      # 209
f.report(summary=True, number=False)   # summary with timings on stdout

a = BigInt(123456789) * BigInt(987654321)
print(a, a.chunks())
```

### `bigfib.bigint`

`BigInt(value)` holds a non-negative `int`. A negative value raises
`ValueError`, and a value that is not an `int` raises `TypeError`.
`BigInt.from_limbs(limbs)` builds a value from base-10^9 limbs, least
significant limb first. Every limb must be in `0 <= limb < 10**9`, and at
least one limb is required.

The supported operations are `+`, `-` and `*`, with another `BigInt` or a
plain `int` as the operand, as well as `str()`, `int()`, `==` and `hash()`.
Subtraction raises `ValueError` if the result would be negative. It keeps the
leading zero limbs of the minuend. `chunks()` reports the number of stored
limbs, and that count includes these leading zero limbs.

### `bigfib.fib`

`fibonacci(n)` returns F(n) as a `BigInt`, with F(0) = 0 and F(1) = 1.

`Fibonacci(n)` computes the term and its decimal text, and times both. It has
these attributes:

- `n`: the term
- `f`: the value
- `text`: the decimal text
- `calc_ms`: the calculation time in milliseconds
- `cast_ms`: the conversion time in milliseconds

`digits()` returns the number of decimal digits. `report(summary, number,
stream)` writes the number and the summary to `stream`, which defaults to
standard output.

### `bigfib.cli`

`parse_args(argv)` turns an argument list into an `Options` dataclass.
`run(options, out, err)` acts on the options and returns the exit status.
`main(argv=None)` is the entry point of the command.