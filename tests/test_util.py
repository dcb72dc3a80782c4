import operator

import pytest

from snafu import util


@pytest.mark.parametrize(
    "value, ok",
    [
        (0, True),
        (util.INT64_MAX, True),
        (util.INT64_MIN, True),
        (util.INT64_MAX + 1, False),
        (util.INT64_MIN - 1, False),
        (5**28, False),
    ],
)
def test_check_int64(value: int, ok: bool):
    if ok:
        assert util.check_int64(value) == value
    else:
        with pytest.raises(OverflowError):
            util.check_int64(value)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], 0),
        ([1, 2, 3], 6),
        ([util.INT64_MAX, -util.INT64_MAX], 0),
        ([util.INT64_MIN, 1], util.INT64_MIN + 1),
    ],
)
def test_checked_sum(values, expected):
    actual = util.checked_sum(values)
    assert actual == expected, (expected, actual)


def test_compose():
    f = util.compose(operator.add, str)
    assert f(1, 2) == "3"


def test_first():
    assert util.first(n for n in range(10) if n > 3) == 4
    with pytest.raises(StopIteration):
        util.first([])


def test_print_(capsys):
    util.set_verbose(False)
    util.print_("hidden")
    util.set_verbose(True)
    util.print_("shown", 1)
    util.set_verbose(False)
    captured = capsys.readouterr()
    assert captured.err == "shown 1\n"
    assert captured.out == ""
