"""
Business logic for the four-function calculator.

Operands arrive already validated as numbers (see
``CalculationRequest``).  Division by zero is reported as an
``InvalidArgumentError`` instead of producing an infinite result, and
so are integers too large to take part in float arithmetic.
"""

import math
import operator
from decimal import Decimal
from typing import Any, Callable, Dict, Union

from showcase_api.app.core.errors import InvalidArgumentError
from showcase_api.app.schemas.calculation import CalculationRequest, CalculationResult, Operation

DIVISION_BY_ZERO = "Division by zero is not allowed"
OUT_OF_RANGE = "Operands are out of range"
# integral results up to this size are returned as JSON integers
MAX_SAFE_INTEGER = 2 ** 53 - 1

_OPERATORS: Dict[Operation, Callable[[Any, Any], Union[int, float]]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}


def format_number(value: Union[int, float]) -> str:
    """Render a number the way a JavaScript client would print it.

    Uses the shortest round-tripping digits, plain notation for decimal
    exponents in ``[-7, 21)`` and ``1e+21``/``1e-7`` style otherwise.
    Integral floats lose their ``.0`` (``2.0`` -> ``"2"``); non-finite
    values are spelled ``NaN`` and ``Infinity``.
    """
    if isinstance(value, int):
        if abs(value) < 10 ** 21:
            return str(value)
        try:
            value = float(value)
        except OverflowError:
            return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # position of the decimal point relative to the first digit
    point = exponent + len(digits)

    if len(digits) <= point <= 21:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        power = point - 1
        text = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + text


class CalculatorService:
    """Stateless calculator."""

    @classmethod
    def evaluate(cls, data: CalculationRequest) -> CalculationResult:
        """Apply ``data.operation`` to the operands.

        Raises ``InvalidArgumentError`` for a zero divisor before any
        division takes place.
        """
        if data.operation is Operation.DIVIDE and data.b == 0:
            raise InvalidArgumentError(DIVISION_BY_ZERO)
        try:
            result = _OPERATORS[data.operation](data.a, data.b)
        except OverflowError as exc:
            # integer operands too large to convert to float
            raise InvalidArgumentError(OUT_OF_RANGE) from exc
        calculation = (
            f"{format_number(data.a)} {data.operation.value} {format_number(data.b)} = {format_number(result)}"
        )
        finite = isinstance(result, int) or math.isfinite(result)
        if finite and isinstance(result, float) and result.is_integer() and abs(result) <= MAX_SAFE_INTEGER:
            result = int(result)
        return CalculationResult(
            a=data.a,
            b=data.b,
            operation=data.operation,
            result=result if finite else None,
            calculation=calculation,
        )

    @classmethod
    def calculate(cls, a: Any, b: Any, operation: Any) -> CalculationResult:
        """Validate raw values and evaluate them in one step."""
        return cls.evaluate(CalculationRequest.from_payload({"a": a, "b": b, "operation": operation}))
