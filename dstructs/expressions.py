"""Bracket matching, postfix evaluation and infix-to-postfix conversion."""

from __future__ import annotations

OPENING = "({["
CLOSING = ")}]"
OPERATORS = "+-*/"
DELIMITERS = " ,"

_PAIRS = dict(zip(OPENING, CLOSING))
_WEIGHTS = {"+": 1, "-": 1, "*": 2, "/": 2, "$": 3}


def are_pair(open_symbol: str, close_symbol: str) -> bool:
    """Whether the two characters are a matching opening and closing bracket."""
    return _PAIRS.get(open_symbol) == close_symbol


def are_parentheses_balanced(expression: str) -> bool:
    """Whether every (), {} and [] in ``expression`` is closed in the right order.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in expression:
        if char in OPENING:
            stack.append(char)
        elif char in CLOSING:
            if not stack or not are_pair(stack[-1], char):
                return False
            stack.pop()
    return not stack


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def perform_operation(operand1: int, operand2: int, operation: str) -> int:
    """Apply ``operation`` to the operands; division truncates toward zero."""
    if operation == "+":
        return operand1 + operand2
    if operation == "-":
        return operand1 - operand2
    if operation == "*":
        return operand1 * operand2
    if operation == "/":
        return _truncating_div(operand1, operand2)
    raise ValueError(f"unexpected operator {operation!r}")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of non-negative integers.

    Spaces and commas separate tokens; other characters are skipped. For each
    operator the most recently pushed value is the first operand.
    """
    stack: list[int] = []
    i = 0
    length = len(expression)
    while i < length:
        char = expression[i]
        if char in DELIMITERS:
            i += 1
        elif char in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} at {i} lacks two operands")
            operand1 = stack.pop()
            operand2 = stack.pop()
            stack.append(perform_operation(operand1, operand2, char))
            i += 1
        elif _is_digit(char):
            operand = 0
            while i < length and _is_digit(expression[i]):
                operand = operand * 10 + int(expression[i])
                i += 1
            stack.append(operand)
        else:
            i += 1
    if not stack:
        raise ValueError("expression holds no operands")
    return stack[-1]


def operator_weight(operator: str) -> int:
    """Precedence weight of ``operator``; -1 for anything unknown."""
    return _WEIGHTS.get(operator, -1)


def has_higher_precedence(operator1: str, operator2: str) -> bool:
    """Whether ``operator1`` binds strictly tighter than ``operator2``."""
    return operator_weight(operator1) > operator_weight(operator2)


def _is_operand(char: str) -> bool:
    return "0" <= char <= "9" or "a" <= char <= "z" or "A" <= char <= "Z"


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    stack: list[str] = []
    postfix: list[str] = []
    for char in expression:
        if char in DELIMITERS:
            continue
        if _is_operand(char):
            postfix.append(char)
        elif char in OPERATORS:
            while stack and stack[-1] != "(" and has_higher_precedence(stack[-1], char):
                postfix.append(stack.pop())
            stack.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                postfix.append(stack.pop())
            if not stack:
                raise ValueError("unmatched closing parenthesis")
            stack.pop()
    postfix.extend(reversed(stack))
    return "".join(postfix)