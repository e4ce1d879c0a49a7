"""pytest fixtures - isolated storage for every test."""
import pytest

from trip_planner.models.trip import Trip
from trip_planner.services.prompt import ScriptedPrompt
from trip_planner.services.storage import MemoryKeyValueStore, TripRepository
from trip_planner.services.trip_controller import TripStoreController


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def repository(store):
    return TripRepository(store)


@pytest.fixture
def controller(repository):
    return TripStoreController(repository, prompt=ScriptedPrompt())


@pytest.fixture
def rome():
    return Trip(
        start_date="2024-05-01",
        end_date="2024-05-10",
        destination="Rome",
        activities=["Colosseum tour"],
        expenses=["Hotel 400 EUR"],
        companions=["Ana"],
    )
