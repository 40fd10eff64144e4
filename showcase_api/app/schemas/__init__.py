"""
Pydantic schema definitions for API payloads.

Request schemas (``CalculationRequest``, ``UserCreate``) are validated
at the HTTP boundary through their ``from_payload`` constructors, which
turn pydantic errors into ``InvalidArgumentError`` with the message the
API reports to the caller.
"""
