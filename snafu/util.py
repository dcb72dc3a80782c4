import sys
from functools import reduce
from operator import add
from typing import Callable, Iterable, TypeVar

VERBOSE = False

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


# Math


def check_int64(value: int) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise OverflowError(f"{value} is outside the 64-bit signed integer range")
    return value


def checked_sum(values: Iterable[int]) -> int:
    """Sum integers, raising `OverflowError` as soon as a partial sum leaves the 64-bit range"""
    return reduce(compose(add, check_int64), values, 0)


# Functional


def compose(f: Callable[..., U], g: Callable[[U], V]) -> Callable[..., V]:
    """Compose 2 functions, chaining output to input from left to right"""
    return lambda *x: g(f(*x))


# Iterators


def first(it: Iterable[T]) -> T:
    return next(iter(it))


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)
