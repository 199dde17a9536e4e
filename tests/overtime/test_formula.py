import pytest

from src.otms.otms.core.exceptions import FormulaError
from src.otms.otms.overtime.formula import (
    convert_if_calls,
    evaluate_formula,
    rates_for,
    validate_formula_syntax,
)


def test_rates_for_basic_salary():
    orp, hrp = rates_for(2600)
    assert orp == 100.0
    assert hrp == 12.5


def test_evaluate_simple_formula():
    result = evaluate_formula("HRP * 1.5 * Hours", basic_salary=2600, hours=4)
    assert result.ot_amount == 75.0
    assert result.orp == 100.0
    assert result.hrp == 12.5
    assert result.breakdown == (
        "Basic: RM 2600.00\n"
        "ORP: RM 100.00\n"
        "HRP: RM 12.50\n"
        "Hours: 4\n"
        "OT Amount: RM 75.00"
    )


def test_multiplier_is_applied_and_labelled():
    result = evaluate_formula("HRP * Hours", basic_salary=2600, hours=2, multiplier=2)
    assert result.ot_amount == 50.0
    assert result.breakdown.endswith("Final OT Amount: RM 50.00")


def test_if_min_max_round():
    assert evaluate_formula("IF(Hours > 4, 10, 20)", 2600, 5).ot_amount == 10.0
    assert evaluate_formula("IF(Hours > 4, 10, 20)", 2600, 4).ot_amount == 20.0
    assert evaluate_formula("MIN(Hours, 3) + MAX(1, 2)", 2600, 5).ot_amount == 5.0
    assert evaluate_formula("ROUND(Hours / 3, 2)", 2600, 1).ot_amount == 0.33
    assert evaluate_formula("ROUND(2.5)", 2600, 1).ot_amount == 3.0


def test_if_only_evaluates_taken_branch():
    assert evaluate_formula("IF(Hours > 0, 1, 1 / 0)", 2600, 1).ot_amount == 1.0


def test_division_by_zero_raises():
    with pytest.raises(FormulaError):
        evaluate_formula("Hours / 0", 2600, 1)


@pytest.mark.parametrize(
    "formula",
    [
        "__import__('os')",
        "Hours.real",
        "Salary * 2",
        "[1, 2]",
        "'text'",
        "Hours ** 2",
    ],
)
def test_disallowed_expressions_raise(formula):
    with pytest.raises(FormulaError):
        evaluate_formula(formula, 2600, 1)


def test_validate_accepts_good_formula():
    result = validate_formula_syntax("IF(Hours > 4, HRP * 1.5 * Hours, ROUND(ORP / 8 * Hours, 2))")
    assert result.is_valid
    assert result.errors == ()


def test_validate_empty():
    result = validate_formula_syntax("   ")
    assert not result.is_valid
    assert result.errors == ("Formula cannot be empty",)


def test_validate_reports_unbalanced_parentheses():
    result = validate_formula_syntax("MIN(Hours, 2")
    assert not result.is_valid
    assert "Unbalanced parentheses: missing closing bracket(s)" in result.errors

    result = validate_formula_syntax("Hours)")
    assert "Unbalanced parentheses: closing bracket without opening" in result.errors


def test_validate_reports_unknown_names():
    result = validate_formula_syntax("Salary * Rate + Hours")
    assert not result.is_valid
    assert "Unknown variables or functions: Salary, Rate" in result.errors


def test_validate_if_arity():
    result = validate_formula_syntax("IF(Hours > 4, 10)")
    assert not result.is_valid
    assert (
        "IF statement requires exactly 3 arguments (condition, true_value, false_value)"
        in result.errors
    )


@pytest.mark.parametrize(
    "formula",
    [
        "ROUND(HRP, 40)",
        "ROUND(HRP, -40)",
        "ROUND(Basic * 1e300, 10)",
        "ROUND(HRP, 1 / 0)",
        "MIN()",
        "IF(Hours > 4, 10)",
    ],
)
def test_evaluation_failures_raise_formula_error(formula):
    with pytest.raises(FormulaError):
        evaluate_formula(formula, 3000, 2)


def test_nested_if_is_converted_innermost_first():
    formula = "IF(Hours > 4, IF(Hours > 8, 3, 2), 1)"
    assert convert_if_calls(formula) == "((((3) if (Hours > 8) else (2))) if (Hours > 4) else (1))"
    assert evaluate_formula(formula, 2600, 9).ot_amount == 3.0
    assert evaluate_formula(formula, 2600, 6).ot_amount == 2.0
    assert evaluate_formula(formula, 2600, 2).ot_amount == 1.0


def test_round_half_up_within_digit_limit():
    assert evaluate_formula("ROUND(HRP * Hours, 1)", 2600, 0.5).ot_amount == 6.3
