"""
Pydantic schemas for the calculator.

``CalculationRequest`` accepts only real JSON numbers for the operands:
booleans, strings and ``null`` are rejected rather than coerced.  The
operation must be one of the four ``Operation`` tags.
"""

from enum import Enum
from typing import Annotated, Any, Dict, Optional, Union

from pydantic import AllowInfNan, BaseModel, Field, StrictFloat, StrictInt, ValidationError

from showcase_api.app.core.errors import InvalidArgumentError

# finite numbers only: 1e400 decodes to inf and is rejected like a string
Number = Union[StrictInt, Annotated[StrictFloat, AllowInfNan(False)]]

OPERANDS_NOT_NUMBERS = "Both a and b must be numbers"
INVALID_OPERATION = "Invalid operation. Use: add, subtract, multiply, or divide"


class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class CalculationRequest(BaseModel):
    """Schema for a calculation request body."""

    a: Number = Field(..., examples=[10])
    b: Number = Field(..., examples=[5])
    operation: Operation = Field(..., examples=["add"])

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CalculationRequest":
        """Validate a decoded JSON object.

        Operand errors are reported before operation errors, whatever
        order pydantic lists them in.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            fields = {error["loc"][0] for error in exc.errors() if error["loc"]}
            if fields & {"a", "b"}:
                raise InvalidArgumentError(OPERANDS_NOT_NUMBERS) from exc
            raise InvalidArgumentError(INVALID_OPERATION) from exc


class CalculationResult(BaseModel):
    """Schema for a successful calculation.

    ``result`` is ``None`` only when the arithmetic overflowed to an
    infinite value, which JSON cannot carry.
    """

    a: Number
    b: Number
    operation: Operation
    result: Optional[Number]
    calculation: str = Field(..., examples=["10 add 5 = 15"])
