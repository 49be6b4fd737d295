"""
Arithmetic Strategy

Evaluates messages that are plain arithmetic expressions. A message is a
candidate only if it consists exclusively of digits, whitespace and the
characters `+ - * / ( ) .`. Evaluation walks the Python AST and never
calls eval().

Any failure (syntax error, division by zero, overflow, non-finite result)
means "strategy not applicable" and is reported as None, never raised.
"""

from __future__ import annotations

import ast
import math
import operator
import re
from typing import Callable, Dict, Optional, Type


DISALLOWED_RE = re.compile(r"[^0-9\s+\-*/().]")

MATH_REPLY_TEMPLATE = "Kết quả của phép tính là: {value}"

_BINARY_OPS: Dict[Type[ast.operator], Callable[[float, float], float]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.Pow: operator.pow,
}

_UNARY_OPS: Dict[Type[ast.unaryop], Callable[[float], float]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}


class _UnsupportedExpression(ValueError):
    pass


def _evaluate(node: ast.AST) -> float:
    if isinstance(node, ast.Expression):
        return _evaluate(node.body)

    if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)):
        return float(node.value)

    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPS:
        left = _evaluate(node.left)
        right = _evaluate(node.right)
        return _BINARY_OPS[type(node.op)](left, right)

    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPS:
        return _UNARY_OPS[type(node.op)](_evaluate(node.operand))

    raise _UnsupportedExpression(type(node).__name__)


def solve_math(expression: str) -> Optional[float]:
    """
    Evaluate `expression` if it is a well-formed arithmetic expression.

    Returns
    -------
    Optional[float]
        The finite result, or None when the message is not arithmetic.
    """
    if DISALLOWED_RE.search(expression):
        return None

    try:
        tree = ast.parse(expression.strip(), mode="eval")
        result = _evaluate(tree)
    except (SyntaxError, ValueError, ArithmeticError, RecursionError):
        return None

    if isinstance(result, complex) or not math.isfinite(result):
        return None
    return result


def format_number(value: float) -> str:
    """Render integral results without a trailing '.0'."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_math_reply(value: float) -> str:
    return MATH_REPLY_TEMPLATE.format(value=format_number(value))
