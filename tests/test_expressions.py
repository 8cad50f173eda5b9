import pytest

from dstructs.expressions import (
    are_pair,
    are_parentheses_balanced,
    evaluate_postfix,
    has_higher_precedence,
    infix_to_postfix,
    operator_weight,
    perform_operation,
)


@pytest.mark.parametrize("opening, closing", [("(", ")"), ("{", "}"), ("[", "]")])
def test_are_pair_matching(opening, closing):
    assert are_pair(opening, closing) is True
    assert are_pair(closing, opening) is False


@pytest.mark.parametrize("opening, closing", [("(", "]"), ("{", ")"), ("[", "}"), ("a", "b")])
def test_are_pair_mismatched(opening, closing):
    assert are_pair(opening, closing) is False


@pytest.mark.parametrize("expression", ["", "()", "{[()]}", "a+(b*[c-d])", "()[]{}", "x"])
def test_balanced_expressions(expression):
    assert are_parentheses_balanced(expression) is True


@pytest.mark.parametrize("expression", ["(", ")", "(]", "{[(])}", "(()", "())", "]["])
def test_unbalanced_expressions(expression):
    assert are_parentheses_balanced(expression) is False


def test_balanced_is_preserved_by_wrapping():
    inner = "[a{b}c]"
    assert are_parentheses_balanced(inner)
    assert are_parentheses_balanced("(" + inner + ")")
    assert not are_parentheses_balanced("(" + inner)


def test_perform_operation_basic():
    assert perform_operation(7, 3, "+") == 7 + 3
    assert perform_operation(7, 3, "-") == 7 - 3
    assert perform_operation(7, 3, "*") == 7 * 3
    assert perform_operation(7, 3, "/") == 7 // 3


def test_perform_operation_division_truncates_toward_zero():
    assert perform_operation(-7, 2, "/") == -(7 // 2)
    assert perform_operation(7, -2, "/") == -(7 // 2)
    assert perform_operation(-7, -2, "/") == 7 // 2


def test_perform_operation_unknown_operator():
    with pytest.raises(ValueError):
        perform_operation(1, 2, "%")


def test_perform_operation_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        perform_operation(1, 0, "/")


def test_evaluate_single_number():
    assert evaluate_postfix("123") == 123


def test_evaluate_addition_and_multiplication():
    assert evaluate_postfix("2 3 +") == 2 + 3
    assert evaluate_postfix("4,5,*") == 4 * 5
    assert evaluate_postfix("12 30 + 2 *") == (12 + 30) * 2


def test_evaluate_uses_latest_value_as_first_operand():
    assert evaluate_postfix("2 9 -") == 9 - 2
    assert evaluate_postfix("9 2 -") == -evaluate_postfix("2 9 -")
    assert evaluate_postfix("4 20 /") == 20 // 4


def test_evaluate_multidigit_numbers():
    assert evaluate_postfix("100 250 +") == 350


def test_evaluate_rejects_missing_operand():
    with pytest.raises(ValueError):
        evaluate_postfix("5 +")


def test_evaluate_rejects_empty_expression():
    with pytest.raises(ValueError):
        evaluate_postfix("  ")


def test_operator_weights():
    assert operator_weight("+") == 1
    assert operator_weight("-") == 1
    assert operator_weight("*") == 2
    assert operator_weight("/") == 2
    assert operator_weight("$") == 3
    assert operator_weight("(") == -1


def test_has_higher_precedence():
    assert has_higher_precedence("*", "+")
    assert has_higher_precedence("$", "/")
    assert not has_higher_precedence("+", "-")
    assert not has_higher_precedence("-", "*")


def test_infix_to_postfix_worked_example():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_infix_to_postfix_parentheses_change_order():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_infix_to_postfix_ignores_delimiters():
    assert infix_to_postfix("a + b, * c") == infix_to_postfix("a+b*c")


def test_infix_to_postfix_keeps_operands_in_order():
    result = infix_to_postfix("A*(B+C)-D/E")
    assert [c for c in result if c.isalnum()] == list("ABCDE")
    assert sorted(c for c in result if not c.isalnum()) == sorted("*+-/")


def test_infix_to_postfix_unmatched_closing():
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")