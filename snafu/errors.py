from typing import Optional


class SnafuError(ValueError):
    pass


class ParseError(SnafuError):
    pass


class InvalidSymbol(ParseError):
    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        where = "" if position is None else f" at position {position}"
        super().__init__(f"Invalid SNAFU symbol {symbol!r}{where}; legal symbols are =, -, 0, 1, 2")


class EmptyNumber(ParseError):
    def __init__(self):
        super().__init__("Can't parse a SNAFU number from empty text")


class InvalidLine(ParseError):
    def __init__(self, line_number: int, line: str, cause: ParseError):
        self.line_number = line_number
        self.line = line
        self.cause = cause
        super().__init__(f"Line {line_number} ({line!r}): {cause}")


class InvalidWeight(SnafuError):
    def __init__(self, weight: int):
        self.weight = weight
        super().__init__(f"Invalid SNAFU digit weight {weight!r}; legal weights are -2, -1, 0, 1, 2")
