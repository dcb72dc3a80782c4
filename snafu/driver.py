"""Sum a list of SNAFU numbers, one per line, and report the total in both decimal and SNAFU.

Each line is parsed digit by digit and decoded to an integer; the integers are summed (with a check
that the running total stays in the 64-bit signed range) and the total is encoded back to the
shortest SNAFU representation. Blank lines are skipped; any other malformed line aborts the run.
"""
from itertools import starmap
from typing import IO, Iterable, Iterator, Tuple

from .errors import InvalidLine, ParseError
from .number import decode, encode, parse_snafu, render_snafu
from .util import checked_sum, compose, print_, set_verbose

to_snafu = compose(encode, render_snafu)


def numbered_lines(input_: Iterable[str]) -> Iterator[Tuple[int, str]]:
    stripped = enumerate(map(str.strip, input_), 1)
    return ((i, line) for i, line in stripped if line)


def parse_line(line_number: int, line: str) -> int:
    try:
        number = parse_snafu(line)
    except ParseError as e:
        raise InvalidLine(line_number, line, e) from e
    value = decode(number)
    print_(f"{line_number}: {line} -> {value}")
    return value


def parse(input_: IO[str]) -> Iterator[int]:
    return starmap(parse_line, numbered_lines(input_))


def total(values: Iterable[int]) -> int:
    return checked_sum(values)


def run(input_: IO[str], verbose: bool = False) -> Tuple[int, str]:
    set_verbose(verbose)
    total_ = total(parse(input_))
    print_(f"Total: {total_}")
    return total_, to_snafu(total_)


test_input = """
1=-0-2
12111
2=0=
21
2=01
111
20012
112
1=-1=
1-12
12
1=
122""".strip()

reference_values = [
    ("0", 0),
    ("1", 1),
    ("2", 2),
    ("1=", 3),
    ("1=-0-2", 1747),
    ("12111", 906),
    ("2=0=", 198),
    ("1=11-2", 2022),
    ("1-0---0", 12345),
    ("1121-1110-1=0", 314159265),
]


def test():
    import io

    for text, value in reference_values:
        decoded = decode(parse_snafu(text))
        assert decoded == value, (text, value, decoded)
        encoded = to_snafu(value)
        assert encoded == text, (value, text, encoded)

    result = run(io.StringIO(test_input))
    expected = (4890, "2=-1=0")
    assert result == expected, (expected, result)
