"""Testing fakes – InMemoryNavigationState."""
from __future__ import annotations

from locator_state.application.navigation.state import QueryParams


class InMemoryNavigationState:
    """Navigation state backed by a list of pairs; records every push."""

    def __init__(self, params: QueryParams | None = None) -> None:
        self._params: QueryParams = list(params or [])
        self.pushed: list[QueryParams] = []

    def get_param(self, name: str) -> str | None:
        return next((v for k, v in self._params if k == name), None)

    def params(self) -> QueryParams:
        return list(self._params)

    def push(self, params: QueryParams) -> None:
        self._params = list(params)
        self.pushed.append(list(params))


__all__ = ["InMemoryNavigationState"]
