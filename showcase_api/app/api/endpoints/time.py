"""
Time endpoint.

Returns the current instant as epoch milliseconds plus ISO, locale,
UTC, date-only and time-only strings and the server's zone name.
"""

from fastapi import APIRouter, Depends

from showcase_api.app.api.deps import get_time_service
from showcase_api.app.schemas.time import TimeSnapshot
from showcase_api.app.services.time_service import TimeService

router = APIRouter()


@router.get("", response_model=TimeSnapshot)
async def get_current_time(service: TimeService = Depends(get_time_service)) -> TimeSnapshot:
    """Return a snapshot of the current time.  Takes no input and never fails."""
    return service.current_time()
