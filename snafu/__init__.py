from .digit import Digit
from .errors import (
    EmptyNumber,
    InvalidLine,
    InvalidSymbol,
    InvalidWeight,
    ParseError,
    SnafuError,
)
from .number import Number, decode, encode, max_magnitude, n_digits, parse_snafu, render_snafu

__all__ = [
    "Digit",
    "Number",
    "parse_snafu",
    "decode",
    "encode",
    "render_snafu",
    "n_digits",
    "max_magnitude",
    "SnafuError",
    "ParseError",
    "InvalidSymbol",
    "EmptyNumber",
    "InvalidLine",
    "InvalidWeight",
]
