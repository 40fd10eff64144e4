"""
Calculator endpoint.

Accepts ``{"a": number, "b": number, "operation": tag}`` where the tag
is ``add``, ``subtract``, ``multiply`` or ``divide``.  Every invalid
request is answered with ``400 {"error": ...}``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from showcase_api.app.api.deps import read_json_object
from showcase_api.app.schemas.calculation import CalculationRequest, CalculationResult
from showcase_api.app.services.calculator_service import CalculatorService

router = APIRouter()


@router.post("", response_model=CalculationResult)
async def calculate(payload: Dict[str, Any] = Depends(read_json_object)) -> CalculationResult:
    """Evaluate one arithmetic operation.

    Checks run in a fixed order: body is a JSON object, both operands
    are numbers, the operation is known, and finally that a division
    does not have a zero divisor.
    """
    data = CalculationRequest.from_payload(payload)
    return CalculatorService.evaluate(data)
