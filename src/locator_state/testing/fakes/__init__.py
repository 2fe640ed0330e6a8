"""Testing fakes – in-memory doubles for the locator's collaborators."""
from locator_state.testing.fakes.navigation import InMemoryNavigationState
from locator_state.testing.fakes.renderers import RecordingRenderer
from locator_state.testing.fakes.search_service import FakeSearchService, PendingQuery

__all__ = [
    "FakeSearchService",
    "InMemoryNavigationState",
    "PendingQuery",
    "RecordingRenderer",
]
