from enum import IntEnum
from typing import Dict

from .errors import InvalidSymbol, InvalidWeight

BASE = 5
SYMBOLS = "=-012"


class Digit(IntEnum):
    """A balanced base-5 digit; the integer value of each member is its weight"""

    minus_two = -2
    minus_one = -1
    zero = 0
    one = 1
    two = 2

    @classmethod
    def from_symbol(cls, symbol: str) -> "Digit":
        digit = SYMBOL_TO_DIGIT.get(symbol)
        if digit is None:
            raise InvalidSymbol(symbol)
        return digit

    @classmethod
    def from_weight(cls, weight: int) -> "Digit":
        digit = WEIGHT_TO_DIGIT.get(weight)
        if digit is None:
            raise InvalidWeight(weight)
        return digit

    def to_symbol(self) -> str:
        return DIGIT_TO_SYMBOL[self]

    def to_weight(self) -> int:
        return int(self)


DIGIT_TO_SYMBOL: Dict[Digit, str] = dict(zip(Digit, SYMBOLS))
SYMBOL_TO_DIGIT: Dict[str, Digit] = {s: d for d, s in DIGIT_TO_SYMBOL.items()}
WEIGHT_TO_DIGIT: Dict[int, Digit] = {int(d): d for d in Digit}
MAX_WEIGHT = max(WEIGHT_TO_DIGIT)
