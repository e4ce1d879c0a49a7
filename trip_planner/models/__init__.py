"""Data models for the trip planner."""
from .trip import (
    Trip,
    DateOrderError,
    validate_date_order,
    SCALAR_FIELDS,
    LIST_FIELDS,
    LIST_ITEM_PROMPTS,
    TripStoreError,
    InvalidFieldError,
    TripIndexError,
    NotEditingError,
)

__all__ = [
    "Trip",
    "DateOrderError",
    "validate_date_order",
    "SCALAR_FIELDS",
    "LIST_FIELDS",
    "LIST_ITEM_PROMPTS",
    "TripStoreError",
    "InvalidFieldError",
    "TripIndexError",
    "NotEditingError",
]
