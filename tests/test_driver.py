import io

import pytest

from snafu import driver
from snafu.errors import InvalidLine, InvalidSymbol, ParseError
from snafu.util import INT64_MAX


def test_run_example():
    result = driver.run(io.StringIO(driver.test_input))
    expected = (4890, "2=-1=0")
    assert result == expected, (expected, result)


def test_self_check():
    driver.test()


def test_parse_values():
    actual = list(driver.parse(io.StringIO(driver.test_input)))
    expected = [1747, 906, 198, 11, 201, 31, 1257, 32, 353, 107, 7, 3, 37]
    assert actual == expected, (expected, actual)


def test_blank_lines_and_whitespace_skipped():
    input_ = io.StringIO("\n  1=  \n\n2=0=\r\n\n")
    actual = driver.run(input_)
    expected = (201, "2=01")
    assert actual == expected, (expected, actual)


def test_empty_input():
    actual = driver.run(io.StringIO(""))
    assert actual == (0, "0"), actual


@pytest.mark.parametrize(
    "text, line_number, symbol",
    [
        ("1=\n12x3\n2=", 2, "x"),
        ("x", 1, "x"),
        ("1\n\n\n2\n1 2", 5, " "),
    ],
)
def test_invalid_line_fails_fast(text: str, line_number: int, symbol: str):
    with pytest.raises(InvalidLine) as e:
        driver.run(io.StringIO(text))
    assert isinstance(e.value, ParseError)
    assert e.value.line_number == line_number
    assert isinstance(e.value.cause, InvalidSymbol)
    assert e.value.cause.symbol == symbol
    assert e.value.__cause__ is e.value.cause


def test_invalid_line_stops_reading():
    lines = iter(["1", "x", "2"])
    values = driver.parse(lines)  # type: ignore
    assert next(values) == 1
    with pytest.raises(InvalidLine):
        next(values)
    assert list(lines) == ["2"]


def test_total_overflow():
    assert driver.total([INT64_MAX - 1, 1]) == INT64_MAX
    # the running total is checked, not just the final sum
    with pytest.raises(OverflowError):
        driver.total([INT64_MAX, 1, -1])


def test_verbose_logging(capsys):
    driver.run(io.StringIO("1=\n2=0="), verbose=True)
    captured = capsys.readouterr()
    assert "1: 1= -> 3" in captured.err
    assert "2: 2=0= -> 198" in captured.err
    assert "Total: 201" in captured.err
    assert captured.out == ""

    driver.run(io.StringIO("1=\n2=0="))
    captured = capsys.readouterr()
    assert captured.err == ""
