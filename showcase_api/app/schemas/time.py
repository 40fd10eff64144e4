"""Pydantic model for the current-time snapshot."""

from pydantic import BaseModel, Field


class TimeSnapshot(BaseModel):
    """One instant rendered in several textual forms.

    All fields are derived from the same captured instant.
    """

    timestamp: int = Field(..., description="Milliseconds since the Unix epoch", examples=[1704164645678])
    iso: str = Field(..., examples=["2024-01-02T03:04:05.678Z"])
    local: str = Field(..., examples=["1/2/2024, 3:04:05 AM"])
    utc: str = Field(..., examples=["Tue, 02 Jan 2024 03:04:05 GMT"])
    date: str = Field(..., examples=["Tue Jan 02 2024"])
    time: str = Field(..., examples=["03:04:05 GMT+0000 (UTC)"])
    timezone: str = Field(..., examples=["UTC"])
