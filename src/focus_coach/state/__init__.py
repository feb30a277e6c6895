"""State package initialization."""

from focus_coach.state.store import FocusStateStore, InMemoryFocusStore

__all__ = [
    "FocusStateStore",
    "InMemoryFocusStore",
]
