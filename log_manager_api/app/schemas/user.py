"""
Pydantic models for user data.

``UserRequest`` is the create payload as sent by clients.  Its fields
are all optional on purpose: completeness is a business rule checked
by ``UserValidationService.check_if_any_entries_are_null`` so that a
missing field yields the catalogue message instead of a generic
validation error.  ``User`` is both the persisted entity returned by
the repository and the API representation.

JSON keys follow the clients' camelCase (``favouriteColor``); Python
attributes stay snake_case.
"""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.errors import ParameterFormat


class Color(str, Enum):
    """Closed set of favourite colours a user may pick."""

    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    PURPLE = "purple"
    BLACK = "black"
    WHITE = "white"

    @classmethod
    def choices(cls) -> List[str]:
        return [member.value for member in cls]


class User(BaseModel):
    """A persisted (or about to be persisted) user."""

    id: Optional[int] = None
    name: str
    birthdate: date
    weight: float
    height: float
    favourite_color: str = Field(..., alias="favouriteColor")
    bmi: float

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class UserList(BaseModel):
    result: List[User]


class UserRequest(BaseModel):
    """Payload for creating a user on behalf of ``actor``."""

    actor: Optional[str] = Field(None, examples=["Petra"])
    name: Optional[str] = Field(None, examples=["Petra"])
    birthdate: Optional[str] = Field(None, description="ISO date", examples=["1999-12-13"])
    weight: Optional[float] = Field(None, gt=0, allow_inf_nan=False, description="Weight in kilograms", examples=[65.0])
    height: Optional[float] = Field(None, gt=0, allow_inf_nan=False, description="Height in meters", examples=[1.6])
    favourite_color: Optional[str] = Field(None, alias="favouriteColor", examples=["Red"])

    model_config = {"populate_by_name": True}

    def get_birthdate_as_date(self) -> date:
        try:
            return date.fromisoformat(self.birthdate)
        except (TypeError, ValueError) as exc:
            raise ParameterFormat(
                f"Failed to convert value '{self.birthdate}' of parameter 'birthdate': {exc}"
            ) from exc


class MessageResponse(BaseModel):
    """Confirmation text returned by mutating endpoints."""

    message: str
