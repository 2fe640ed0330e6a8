"""Application executor – SearchExecutor."""
from __future__ import annotations

from typing import Callable

from locator_state.application.executor.phase import LoadingPhase
from locator_state.application.search.result import VerticalResults
from locator_state.application.search.service import SearchService
from locator_state.observability.logging import current_query_seq, get_logger

__all__ = ["ResultsListener", "SearchExecutor"]

logger = get_logger(__name__)

ResultsListener = Callable[[VerticalResults], None]


class SearchExecutor:
    """Runs vertical queries and hands the freshest results to listeners.

    Every execution gets a sequence number.  Queries are never cancelled, so
    responses may arrive out of order; a response whose sequence number is
    below the last applied one is dropped and listeners never see it.

    Only the first load (:meth:`mount`) drives the loading phase.  Later
    executions leave the executor ``READY`` and are tracked by
    :attr:`in_flight` instead.  Errors from the search service are not caught
    here; they propagate to the caller.
    """

    def __init__(self, service: SearchService) -> None:
        self._service = service
        self._phase = LoadingPhase.IDLE
        self._seq = 0
        self._last_applied = 0
        self._in_flight = 0
        self._latest: VerticalResults | None = None
        self._listeners: list[ResultsListener] = []

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def phase(self) -> LoadingPhase:
        return self._phase

    @property
    def loading(self) -> bool:
        """True until the first query has completed."""
        return self._phase is not LoadingPhase.READY

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def last_issued_seq(self) -> int:
        return self._seq

    @property
    def last_applied_seq(self) -> int:
        return self._last_applied

    @property
    def latest(self) -> VerticalResults | None:
        return self._latest

    def subscribe(self, listener: ResultsListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def mount(self, vertical: str, query: str | None = None) -> VerticalResults | None:
        """Select *vertical*, seed the query and run the first, blocking load.

        The executor ends up ``READY`` even when the query fails, so the
        loading overlay cannot get stuck.
        """
        self._phase = LoadingPhase.LOADING
        self._service.set_vertical(vertical)
        if query:
            self._service.set_query(query)
        try:
            return await self.execute("mount")
        finally:
            self._phase = LoadingPhase.READY

    async def execute(self, reason: str = "refresh") -> VerticalResults | None:
        """Run one query; return its results, or ``None`` if they were stale."""
        self._seq += 1
        seq = self._seq
        token = current_query_seq.set(seq)
        self._in_flight += 1
        try:
            logger.info("vertical_query_started", reason=reason)
            results = await self._service.execute_vertical_query()
            if seq < self._last_applied:
                logger.info("vertical_query_discarded", last_applied_seq=self._last_applied)
                return None
            self._last_applied = seq
            self._latest = results
            logger.info("vertical_query_applied", result_count=results.result_count)
            for listener in list(self._listeners):
                listener(results)
            return results
        finally:
            self._in_flight -= 1
            current_query_seq.reset(token)
