"""OT rate formulas configured by HR.

A formula is an arithmetic expression over the variables ``Hours``, ``ORP``
(ordinary rate of pay, basic / 26), ``HRP`` (hourly rate of pay, ORP / 8) and
``Basic``, with the functions ``IF(cond, a, b)``, ``MIN``, ``MAX`` and
``ROUND(x[, digits])``. Example::

    IF(Hours > 4, HRP * 1.5 * Hours, ROUND(HRP * Hours, 2))

``IF(...)`` calls are rewritten to conditional expressions first, so only the
selected branch is evaluated; the result is then evaluated with simpleeval
restricted to the operators and functions above.
"""
from __future__ import annotations

import ast
import logging
import math
import operator
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterator, Optional

from simpleeval import InvalidExpression, SimpleEval

from ..core.constants import NORMAL_HOURS_PER_DAY, WORKING_DAYS_PER_MONTH
from ..core.exceptions import FormulaError

logger = logging.getLogger(__name__)

ALLOWED_VARIABLES = ("Hours", "ORP", "HRP", "Basic")
ALLOWED_FUNCTIONS = ("IF", "MIN", "MAX", "ROUND")

MAX_ROUND_DIGITS = 10

IF_ARITY_ERROR = "IF statement requires exactly 3 arguments (condition, true_value, false_value)"

_IDENTIFIER = re.compile(r"\b([A-Za-z_][A-Za-z0-9_]*)\b")
_IF_CALL = re.compile(r"(?<![A-Za-z0-9_])IF\s*\(", re.IGNORECASE)
_IF_FUNCTION = re.compile(r"(?<![A-Za-z0-9_])IF\s*\(")

_OPERATORS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
    ast.Lt: operator.lt,
    ast.LtE: operator.le,
    ast.Gt: operator.gt,
    ast.GtE: operator.ge,
    ast.Eq: operator.eq,
    ast.NotEq: operator.ne,
}

# simpleeval errors plus what the operators / functions themselves raise
_EVALUATION_ERRORS = (InvalidExpression, SyntaxError, ArithmeticError, LookupError, TypeError, ValueError)


@dataclass(frozen=True)
class FormulaValidationResult:
    is_valid: bool
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class FormulaEvaluationResult:
    orp: float
    hrp: float
    ot_amount: float
    breakdown: str


def rates_for(basic_salary: float) -> tuple[float, float]:
    """Return (ORP, HRP) for a monthly basic salary."""
    orp = float(basic_salary) / WORKING_DAYS_PER_MONTH
    return orp, orp / NORMAL_HOURS_PER_DAY


def _round_half_up(value: float, digits: int) -> float:
    exponent = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def _formula_min(*values):
    if not values:
        raise FormulaError("MIN requires at least 1 argument")
    return min(float(v) for v in values)


def _formula_max(*values):
    if not values:
        raise FormulaError("MAX requires at least 1 argument")
    return max(float(v) for v in values)


def _formula_round(value, digits=0):
    try:
        digits = int(digits)
        if abs(digits) > MAX_ROUND_DIGITS:
            raise FormulaError(f"ROUND digits must be between -{MAX_ROUND_DIGITS} and {MAX_ROUND_DIGITS}")
        return _round_half_up(float(value), digits)
    except (InvalidOperation, OverflowError, ValueError) as e:
        raise FormulaError(f"ROUND failed: {e}")


_FUNCTIONS = {"MIN": _formula_min, "MAX": _formula_max, "ROUND": _formula_round}


class _FormulaEvaluator(SimpleEval):
    """simpleeval without attribute or item access."""

    def __init__(self, names):
        super().__init__(operators=dict(_OPERATORS), functions=dict(_FUNCTIONS), names=names)
        self.nodes.pop(ast.Attribute, None)
        self.nodes.pop(ast.Subscript, None)


def _split_top_level(text: str) -> list[str]:
    parts = []
    depth = 0
    current = ""
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append(current.strip())
            current = ""
        else:
            current += ch
    parts.append(current.strip())
    return parts


def _matching_paren(text: str, open_index: int) -> int:
    depth = 0
    for j in range(open_index, len(text)):
        if text[j] == "(":
            depth += 1
        elif text[j] == ")":
            depth -= 1
            if depth == 0:
                return j
    return -1


def _if_argument_lists(formula: str) -> Iterator[str]:
    for match in _IF_CALL.finditer(formula):
        close = _matching_paren(formula, match.end() - 1)
        if close != -1:
            yield formula[match.end():close]


def _count_top_level_commas(text: str) -> int:
    return len(_split_top_level(text)) - 1


def convert_if_calls(formula: str) -> str:
    """Rewrite ``IF(c, a, b)`` as ``((a) if (c) else (b))``, innermost first.

    Calls with the wrong number of arguments are left as they are and fail
    later as an unknown function.
    """
    result = formula
    while True:
        for match in reversed(list(_IF_FUNCTION.finditer(result))):
            close = _matching_paren(result, match.end() - 1)
            if close == -1:
                continue
            args = _split_top_level(result[match.end():close])
            if len(args) == 3:
                cond, when_true, when_false = args
                ternary = f"(({when_true}) if ({cond}) else ({when_false}))"
                result = result[:match.start()] + ternary + result[close + 1:]
                break
        else:
            return result


def validate_formula_syntax(formula: str) -> FormulaValidationResult:
    if not formula or not formula.strip():
        return FormulaValidationResult(is_valid=False, errors=("Formula cannot be empty",))

    errors: list[str] = []

    depth = 0
    for ch in formula:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                errors.append("Unbalanced parentheses: closing bracket without opening")
                break
    if depth > 0:
        errors.append("Unbalanced parentheses: missing closing bracket(s)")

    allowed = set(ALLOWED_VARIABLES) | set(ALLOWED_FUNCTIONS)
    unknown = [name for name in dict.fromkeys(_IDENTIFIER.findall(formula)) if name not in allowed]
    if unknown:
        errors.append(f"Unknown variables or functions: {', '.join(unknown)}")

    for block in _if_argument_lists(formula):
        if _count_top_level_commas(block) != 2:
            errors.append(IF_ARITY_ERROR)
            break

    try:
        ast.parse(convert_if_calls(formula.strip()), mode="eval")
    except SyntaxError as e:
        errors.append(f"Syntax error: {e.msg}")

    return FormulaValidationResult(is_valid=not errors, errors=tuple(errors))


def _evaluate(formula: str, names: dict):
    expression = convert_if_calls(formula.strip())
    if not expression:
        raise FormulaError("Syntax error: formula is empty")
    return _FormulaEvaluator(names).eval(expression)


def _plain_number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def evaluate_formula(
    formula: str,
    basic_salary: float,
    hours: float,
    multiplier: Optional[float] = None,
) -> FormulaEvaluationResult:
    """Evaluate a rate formula for one employee and OT duration.

    A truthy ``multiplier`` (the day-type rate) is applied to the formula
    result. Raises FormulaError when the formula cannot be evaluated.
    """
    orp, hrp = rates_for(basic_salary)
    names = {"Hours": float(hours), "ORP": orp, "HRP": hrp, "Basic": float(basic_salary)}

    try:
        result = _evaluate(formula, names)
    except ZeroDivisionError:
        raise FormulaError("Division by zero")
    except _EVALUATION_ERRORS as e:
        raise FormulaError(f"Evaluation error: {e}")

    if isinstance(result, bool) or not isinstance(result, (int, float)) or math.isnan(result):
        raise FormulaError("Formula did not evaluate to a valid number")
    result = float(result)

    ot_amount = result * multiplier if multiplier else result
    logger.debug("Evaluated OT formula %r -> %s", formula, ot_amount)

    breakdown = (
        f"Basic: RM {float(basic_salary):.2f}\n"
        f"ORP: RM {orp:.2f}\n"
        f"HRP: RM {hrp:.2f}\n"
        f"Hours: {_plain_number(hours)}"
    )
    amount_label = "Final OT Amount" if multiplier else "OT Amount"
    breakdown += f"\n{amount_label}: RM {ot_amount:.2f}"

    return FormulaEvaluationResult(orp=orp, hrp=hrp, ot_amount=ot_amount, breakdown=breakdown)
