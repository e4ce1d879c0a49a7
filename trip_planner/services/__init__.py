"""Services for the trip planner."""
from .storage import (
    TripRepository,
    MemoryKeyValueStore,
    JsonFileKeyValueStore,
    StorageError,
)
from .prompt import ConsolePrompt, ScriptedPrompt
from .trip_controller import TripStoreController, get_trip_controller

__all__ = [
    "TripRepository",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "StorageError",
    "ConsolePrompt",
    "ScriptedPrompt",
    "TripStoreController",
    "get_trip_controller",
]
