"""
Pydantic models for audit log entries.

Logs are append-only: they are created, listed and deleted, never
updated.  ``user`` holds the name of the referenced user, or ``None``
when the entry does not point at an existing user.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @classmethod
    def choices(cls) -> List[str]:
        return [member.value for member in cls]


class Log(BaseModel):
    """Schema for reading a log entry."""

    id: int
    message: str
    severity: str
    timestamp: datetime
    user: Optional[str] = None

    model_config = {"from_attributes": True}


class LogList(BaseModel):
    result: List[Log]


class LogRequest(BaseModel):
    """Schema for creating a log entry through the API."""

    message: Optional[str] = Field(None, examples=["Backup finished"])
    severity: Optional[str] = Field(Severity.INFO.value, examples=["INFO"])
    user: Optional[str] = Field(None, description="Name of the acting user", examples=["Petra"])
