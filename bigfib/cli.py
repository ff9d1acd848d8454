"""Command-line interface: compute and print Fibonacci terms."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field, replace
from typing import TextIO

from bigfib.fib import Fibonacci

VERSION = "2.1"
_TERM_MAX = 2**64 - 1
_TERM = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


@dataclass
class Options:
    """Settings gathered from the command line."""

    program: str = "bigfib"
    show_help: bool = False
    show_version: bool = False
    print_number: bool = True
    print_summary: bool = True
    terms: list[str] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)


def parse_args(argv: list[str]) -> Options:
    """Parse arguments (without the program name) into ``Options``.

    Help and version stop parsing; the first non-option argument and
    everything after it are taken as terms.
    """
    options = Options()
    args = list(argv)
    for position, arg in enumerate(args):
        if arg in ("-h", "--help"):
            options.show_help = True
            return options
        if arg in ("-v", "--version"):
            options.show_version = True
            return options
        if arg in ("-q", "--quiet"):
            options.print_number = False
        elif arg in ("-s", "--simple"):
            options.print_summary = False
        elif arg.startswith("-"):
            options.unknown.append(arg)
        else:
            options.terms = args[position:]
            return options
    return options


def _parse_term(text: str) -> int:
    """Read a leading decimal term; trailing characters are ignored."""
    match = _TERM.match(text)
    if match is None:
        raise ValueError(text)
    value = int(match.group(2))
    if (match.group(1) == "-" and value) or value > _TERM_MAX:
        raise OverflowError(text)
    return value


def _help_text(program: str) -> str:
    return (
        f"Usage: {program} [OPTIONS]... N...\n"
        "Calculate the Fibonacci number of the given N terms.\n"
        "\n"
        "  -q, --quiet          don't print the Fibonacci number\n"
        "  -s, --simple         don't print summary.\n"
        "  -h, --help           display this help and exit\n"
        "  -v, --version        output version information and exit\n"
    )


def _version_text(program: str) -> str:
    return (
        f"{program} {VERSION}\n"
        "This is free software: you are free to change and redistribute it.\n"
        "There is NO WARRANTY, to the extent permitted by law.\n"
    )


def run(options: Options, out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Act on ``options``, writing to ``out`` and ``err``; return the exit status."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    if options.show_help:
        out.write(_help_text(options.program))
        return 0
    if options.show_version:
        out.write(_version_text(options.program))
        return 0

    for arg in options.unknown:
        err.write(f'Error. Unknown argument: "{arg}"\n')

    if not options.terms:
        err.write(
            f"{options.program}: Missing arguments.\n"
            f"Try '{options.program} --help' for more information.\n"
        )
        return 1

    if not options.print_summary and not options.print_number:
        out.write(
            "Warning. Nothing is printed if the -q and -s options are "
            "specified at the same time.\n"
        )
        return 0

    last = len(options.terms) - 1
    for position, text in enumerate(options.terms):
        try:
            term = _parse_term(text)
        except OverflowError:
            err.write("Error. Unknown.\n")
            continue
        except ValueError:
            err.write(f'Error. Not valid number: "{text}"\n')
            continue
        Fibonacci(term).report(options.print_summary, options.print_number, out)
        if position != last:
            out.write("\n")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the command line."""
    if argv is None:
        program = os.path.basename(sys.argv[0]) or "bigfib"
        args = sys.argv[1:]
    else:
        program = "bigfib"
        args = list(argv)
    options = replace(parse_args(args), program=program)
    return run(options, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())