"""Tests for the trip model and its commit rule."""
import pytest

from trip_planner.models.trip import (
    DATE_ORDER_MESSAGE,
    DateOrderError,
    Trip,
    resolve_scalar_field,
    validate_date_order,
)


class TestTrip:
    """Test Trip construction and serialization."""

    def test_empty_trip_defaults(self):
        """A new trip is blank with empty lists."""
        trip = Trip()

        assert trip.start_date == ""
        assert trip.end_date == ""
        assert trip.destination == ""
        assert trip.activities == []
        assert trip.expenses == []
        assert trip.companions == []

    def test_accepts_stored_names(self):
        """camelCase storage names populate the snake_case attributes."""
        trip = Trip(**{"startDate": "2024-05-01", "endDate": "2024-05-10", "destination": "Rome"})

        assert trip.start_date == "2024-05-01"
        assert trip.end_date == "2024-05-10"

    def test_storage_dict_uses_stored_names(self, rome):
        """Storage dump matches the persisted layout."""
        assert rome.to_storage_dict() == {
            "startDate": "2024-05-01",
            "endDate": "2024-05-10",
            "destination": "Rome",
            "activities": ["Colosseum tour"],
            "expenses": ["Hotel 400 EUR"],
            "companions": ["Ana"],
        }

    def test_none_scalars_become_empty(self):
        trip = Trip(start_date=None, destination=None)
        assert trip.start_date == ""
        assert trip.destination == ""

    def test_summary_line(self, rome):
        assert rome.summary_line() == "Rome (2024-05-01 - 2024-05-10)"

    def test_lists_are_not_shared(self):
        """Default lists are per instance."""
        first, second = Trip(), Trip()
        first.activities.append("Hike")
        assert second.activities == []


class TestDateOrder:
    """Test the end-after-start rule."""

    def test_end_before_start_rejected(self):
        error = validate_date_order(Trip(start_date="2024-05-10", end_date="2024-05-01"))

        assert isinstance(error, DateOrderError)
        assert error.message == DATE_ORDER_MESSAGE
        assert str(error) == DATE_ORDER_MESSAGE

    @pytest.mark.parametrize("start,end", [
        ("2024-05-01", "2024-05-10"),
        ("2024-05-01", "2024-05-01"),
        ("", ""),
        ("", "2024-05-01"),
    ])
    def test_accepted_orders(self, start, end):
        assert validate_date_order(Trip(start_date=start, end_date=end)) is None

    def test_missing_end_date_rejected(self):
        """An empty end date sorts before any start date."""
        assert validate_date_order(Trip(start_date="2024-05-01")) is not None


class TestFieldNames:
    """Test scalar field name resolution."""

    def test_resolves_both_spellings(self):
        assert resolve_scalar_field("startDate") == "start_date"
        assert resolve_scalar_field("end_date") == "end_date"
        assert resolve_scalar_field("destination") == "destination"

    def test_rejects_list_and_unknown_fields(self):
        assert resolve_scalar_field("activities") is None
        assert resolve_scalar_field("budget") is None
