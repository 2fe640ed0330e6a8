"""Application executor – query execution and loading state."""
from locator_state.application.executor.executor import ResultsListener, SearchExecutor
from locator_state.application.executor.phase import LoadingPhase

__all__ = ["LoadingPhase", "ResultsListener", "SearchExecutor"]
