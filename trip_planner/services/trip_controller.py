"""
Trip Store Controller - Owns the trip collection and the draft being edited.
Every committed change is written through to the trip repository.
"""
import logging
from typing import Optional

from .prompt import ConsolePrompt, LineInputProvider
from .storage import StorageError, TripRepository, get_trip_repository
from ..models.trip import (
    LIST_FIELDS,
    LIST_ITEM_PROMPTS,
    SCALAR_FIELDS,
    InvalidFieldError,
    NotEditingError,
    Trip,
    TripIndexError,
    resolve_scalar_field,
    validate_date_order,
)

logger = logging.getLogger(__name__)


class TripStoreController:
    """
    Manages trips for the form view.

    The controller (this class) is the only writer of:
    - the committed trip collection
    - the draft trip and which entry it is editing
    - the last validation error shown to the user

    Only add_trip, save_edit and delete_trip persist. Draft edits stay
    in memory until they are committed.
    """

    def __init__(
        self,
        repository: TripRepository,
        prompt: Optional[LineInputProvider] = None
    ):
        self.repository = repository
        self.prompt = prompt or ConsolePrompt()

        self._trips: list[Trip] = repository.load()
        self._draft = Trip()
        self.editing_index: Optional[int] = None
        self.last_error: Optional[str] = None

        logger.info(f"Loaded {len(self._trips)} trip(s)")

    @property
    def trips(self) -> list[Trip]:
        """Copy of the committed collection."""
        return [trip.model_copy(deep=True) for trip in self._trips]

    @property
    def draft(self) -> Trip:
        """Copy of the draft trip."""
        return self._draft.model_copy(deep=True)

    @property
    def mode(self) -> str:
        """'edit' while an entry is being edited, else 'add'."""
        return "edit" if self.editing_index is not None else "add"

    # Draft editing

    def update_draft_field(self, field_name: str, value: str) -> None:
        """Set startDate, endDate or destination on the draft."""
        attr = resolve_scalar_field(field_name)
        if attr is None:
            raise InvalidFieldError(field_name, SCALAR_FIELDS)
        setattr(self._draft, attr, value if value is not None else "")

    def add_list_item(self, list_name: str, value: Optional[str]) -> bool:
        """
        Append a value to one of the draft's lists.

        Empty or missing values are ignored.

        Returns:
            True if an item was added
        """
        items = self._draft_list(list_name)
        if not value:
            return False
        items.append(value)
        return True

    def remove_list_item(self, list_name: str, value: str) -> int:
        """
        Remove every occurrence of a value from one of the draft's lists.

        Removal is by value, so duplicates always go together.

        Returns:
            Number of items removed
        """
        items = self._draft_list(list_name)
        kept = [item for item in items if item != value]
        removed = len(items) - len(kept)
        setattr(self._draft, list_name, kept)
        return removed

    def prompt_list_item(self, list_name: str) -> bool:
        """Ask the user for a new list item and add it to the draft."""
        self._draft_list(list_name)
        value = self.prompt.ask(LIST_ITEM_PROMPTS[list_name])
        return self.add_list_item(list_name, value)

    # Commits

    def add_trip(self) -> bool:
        """
        Commit the draft as a new trip.

        Returns:
            True if committed, False if the dates were rejected
        """
        if not self._validate_draft():
            return False

        self._trips = [*self._trips, self._draft.model_copy(deep=True)]
        self._persist()
        logger.info(f"Added trip to '{self._draft.destination}' ({len(self._trips)} total)")

        self._reset_draft()
        return True

    def begin_edit(self, index: int) -> None:
        """Load the trip at index into the draft for editing."""
        self._check_index(index)
        self.editing_index = index
        self._draft = self._trips[index].model_copy(deep=True)

    def save_edit(self) -> bool:
        """
        Commit the draft over the trip being edited.

        Returns:
            True if committed, False if the dates were rejected
        """
        if self.editing_index is None:
            raise NotEditingError()
        if not self._validate_draft():
            return False

        index = self.editing_index
        updated = list(self._trips)
        updated[index] = self._draft.model_copy(deep=True)
        self._trips = updated
        self._persist()
        logger.info(f"Saved edit of trip {index}")

        self.editing_index = None
        self._reset_draft()
        return True

    def cancel_edit(self) -> None:
        """Leave edit mode and discard the draft."""
        self.editing_index = None
        self._reset_draft()

    def delete_trip(self, index: int) -> Trip:
        """
        Remove the trip at index. There is no undo.

        Returns:
            The removed trip
        """
        self._check_index(index)
        removed = self._trips[index]
        self._trips = [trip for i, trip in enumerate(self._trips) if i != index]
        self._persist()
        logger.info(f"Deleted trip {index} ('{removed.destination}')")

        if self.editing_index is not None:
            if self.editing_index == index:
                self.cancel_edit()
            elif self.editing_index > index:
                self.editing_index -= 1

        return removed

    def snapshot(self) -> dict:
        """State for the view layer."""
        return {
            "mode": self.mode,
            "editing_index": self.editing_index,
            "last_error": self.last_error,
            "draft": self._draft.to_storage_dict(),
            "trips": [
                {"index": i, "summary": trip.summary_line(), **trip.to_storage_dict()}
                for i, trip in enumerate(self._trips)
            ],
        }

    # Internals

    def _draft_list(self, list_name: str) -> list[str]:
        if list_name not in LIST_FIELDS:
            raise InvalidFieldError(list_name, LIST_FIELDS)
        return getattr(self._draft, list_name)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._trips):
            raise TripIndexError(index, len(self._trips))

    def _validate_draft(self) -> bool:
        error = validate_date_order(self._draft)
        if error is not None:
            self.last_error = error.message
            logger.info(f"Rejected trip: {error.message}")
            return False
        return True

    def _reset_draft(self) -> None:
        self._draft = Trip()
        self.last_error = None

    def _persist(self) -> None:
        # In-memory state stays authoritative when the write fails
        try:
            self.repository.save(self._trips)
        except (StorageError, OSError) as e:
            logger.error(f"Failed to persist {len(self._trips)} trip(s): {e}")


# Global trip controller
trip_controller: Optional[TripStoreController] = None


def get_trip_controller() -> TripStoreController:
    """Get or create the global trip controller."""
    global trip_controller
    if trip_controller is None:
        trip_controller = TripStoreController(get_trip_repository())
    return trip_controller


def reset_trip_controller() -> None:
    """Drop the global controller so the next call reloads from storage."""
    global trip_controller
    trip_controller = None
