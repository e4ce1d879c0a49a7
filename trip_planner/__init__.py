"""Trip planner: create, edit and delete trips persisted to local storage."""

__version__ = "1.0.0"
