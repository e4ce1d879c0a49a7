"""
Trip Schema - A single travel plan and its editing rules.
Dates are kept as ISO 8601 strings exactly as the form submits them.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


# Scalar form fields: stored (camelCase) name -> attribute name
SCALAR_FIELDS = {
    "startDate": "start_date",
    "endDate": "end_date",
    "destination": "destination",
}

# Free-text sub-lists edited one item at a time
LIST_FIELDS = ("activities", "expenses", "companions")

# Question shown when asking the user for a new list item
LIST_ITEM_PROMPTS = {
    "activities": "Enter the activity:",
    "expenses": "Enter the expense:",
    "companions": "Enter the travel companion name:",
}

DATE_ORDER_MESSAGE = "End date cannot be before the start date."


class Trip(BaseModel):
    """One travel plan: dates, destination and three free-text lists."""

    model_config = ConfigDict(populate_by_name=True)

    start_date: str = Field(
        default="",
        alias="startDate",
        description="Trip start date (YYYY-MM-DD)"
    )
    end_date: str = Field(
        default="",
        alias="endDate",
        description="Trip end date (YYYY-MM-DD)"
    )
    destination: str = Field(
        default="",
        description="Where the trip goes"
    )
    activities: list[str] = Field(
        default_factory=list,
        description="Planned activities"
    )
    expenses: list[str] = Field(
        default_factory=list,
        description="Expenses, unstructured text"
    )
    companions: list[str] = Field(
        default_factory=list,
        description="Names of travel companions"
    )

    @field_validator("start_date", "end_date", "destination", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        if v is None:
            return ""
        return v

    def to_storage_dict(self) -> dict:
        """Dump with the stored (camelCase) field names."""
        return self.model_dump(by_alias=True)

    def summary_line(self) -> str:
        """One-line listing, e.g. 'Rome (2024-05-01 - 2024-05-10)'."""
        return f"{self.destination} ({self.start_date} - {self.end_date})"


class DateOrderError(BaseModel):
    """Validation result: the end date precedes the start date."""
    kind: str = "date_order"
    message: str = DATE_ORDER_MESSAGE

    def __str__(self) -> str:
        return self.message


def validate_date_order(trip: Trip) -> Optional[DateOrderError]:
    """
    Check the only commit rule of a trip.

    Compares the raw strings, which orders ISO dates chronologically.
    Returns None when the trip may be committed.
    """
    if trip.end_date < trip.start_date:
        return DateOrderError()
    return None


def resolve_scalar_field(field_name: str) -> Optional[str]:
    """Map a stored or attribute field name to the attribute name."""
    if field_name in SCALAR_FIELDS:
        return SCALAR_FIELDS[field_name]
    if field_name in SCALAR_FIELDS.values():
        return field_name
    return None


class TripStoreError(Exception):
    """Base error for misuse of the trip store controller."""


class InvalidFieldError(TripStoreError, ValueError):
    """Field or list name is not part of a trip's editable fields."""

    def __init__(self, field_name: str, allowed):
        self.field_name = field_name
        super().__init__(
            f"Unknown field '{field_name}'. Expected one of: {', '.join(allowed)}"
        )


class TripIndexError(TripStoreError, IndexError):
    """Index does not point at a trip in the collection."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"No trip at index {index} (collection has {size})")


class NotEditingError(TripStoreError):
    """save_edit() called while no trip is being edited."""

    def __init__(self):
        super().__init__("No trip is being edited")
