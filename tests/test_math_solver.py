import pytest

from bothn_server.engine.math_solver import format_math_reply, format_number, solve_math


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("2 + 2 * 3", 8.0),
        ("10 / 4", 2.5),
        ("-3 * (2 + 1)", -9.0),
        ("2 ** 3", 8.0),
        ("  7  ", 7.0),
        (".5 + 1.", 1.5),
    ],
)
def test_solve_math_valid(expression, expected):
    assert solve_math(expression) == pytest.approx(expected)


@pytest.mark.parametrize(
    "expression",
    [
        "",
        "   ",
        "2 + a",
        "1e5",
        "1 / 0",
        "(1 + 2",
        "1 // 2",
        "10 ** 400",
        "(-8) ** 0.5",
        "xin chào",
    ],
)
def test_solve_math_not_applicable(expression):
    assert solve_math(expression) is None


def test_math_reply_format():
    assert format_math_reply(solve_math("2 + 2 * 3")) == "Kết quả của phép tính là: 8"


def test_format_number():
    assert format_number(8.0) == "8"
    assert format_number(-0.0) == "0"
    assert format_number(2.5) == "2.5"
    assert format_number(0.1 + 0.2) == "0.30000000000000004"
