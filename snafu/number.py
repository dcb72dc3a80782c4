"""Balanced base-5 ("SNAFU") numbers.

A SNAFU number is written most-significant digit first with the symbols `2`, `1`, `0`, `-` and `=`,
standing for the digit weights 2, 1, 0, -1 and -2. Parsing keeps the digits exactly as written
(leading zeros included); encoding an integer always produces the shortest representation.
"""
from functools import partial
from itertools import count, starmap
from operator import index, mul
from typing import Iterator, NamedTuple, Tuple

from .digit import BASE, MAX_WEIGHT, Digit
from .errors import EmptyNumber, InvalidSymbol
from .util import check_int64, first


class Number(NamedTuple):
    digits: Tuple[Digit, ...]

    @classmethod
    def parse(cls, text: str) -> "Number":
        return parse_snafu(text)

    @classmethod
    def encode(cls, value: int) -> "Number":
        return encode(value)

    def decode(self) -> int:
        return decode(self)

    def render(self) -> str:
        return render_snafu(self)

    def __int__(self):
        return decode(self)

    def __str__(self):
        return render_snafu(self)

    def __repr__(self):
        return f"{type(self).__name__}({render_snafu(self)!r})"


# Parsing and rendering


def _parse_digit(position: int, symbol: str) -> Digit:
    try:
        return Digit.from_symbol(symbol)
    except InvalidSymbol:
        raise InvalidSymbol(symbol, position) from None


def parse_snafu(text: str) -> Number:
    if not text:
        raise EmptyNumber()
    return Number(tuple(starmap(_parse_digit, enumerate(text))))


def render_snafu(number: Number) -> str:
    return "".join(map(Digit.to_symbol, number.digits))


# Conversion to and from integers


def place_values() -> Iterator[int]:
    return map(partial(pow, BASE), count())


def decode(number: Number) -> int:
    weights = map(Digit.to_weight, reversed(number.digits))
    return check_int64(sum(map(mul, weights, place_values())))


def max_magnitude(n_digits: int) -> int:
    """The largest absolute value representable with `n_digits` digits; every `n_digits`-digit
    number lies in the closed range [-max_magnitude(n_digits), max_magnitude(n_digits)]"""
    return BASE**n_digits // 2


def n_digits(value: int) -> int:
    """The minimal number of digits needed to represent non-negative `value`"""
    return first(n for n in count(1) if max_magnitude(n) >= value)


def select_digits(residue: int, n: int) -> Iterator[Digit]:
    """Yield the `n` digits representing `residue`, most significant first.

    The range [-max_magnitude(n), max_magnitude(n)] splits into five bands of width 5^(n-1),
    one per leading digit from `=` up to `2`. Removing the leading digit's contribution leaves a
    residue within [-max_magnitude(n - 1), max_magnitude(n - 1)], so the remaining n - 1 digits
    can always represent it.
    """
    if n == 1:
        assert abs(residue) <= MAX_WEIGHT, f"residue {residue} is out of range for a single digit"
        yield Digit.from_weight(residue)
    else:
        half = max_magnitude(n)
        unit = BASE ** (n - 1)
        assert -half <= residue <= half, f"residue {residue} is out of range for {n} digits"
        weight = (residue + half) // unit - MAX_WEIGHT
        yield Digit.from_weight(weight)
        yield from select_digits(residue - weight * unit, n - 1)


def encode(value: int) -> Number:
    value = index(value)
    if value < 0:
        raise ValueError(f"Can only encode non-negative integers; got {value}")
    check_int64(value)
    return Number(tuple(select_digits(value, n_digits(value))))
