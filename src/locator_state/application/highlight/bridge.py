"""Application highlight – CrossViewHighlightBridge and renderer ports."""
from __future__ import annotations

import dataclasses
from typing import Callable, Protocol

from locator_state.application.highlight.palette import FacetColorMapper
from locator_state.application.highlight.state import ObservableCell
from locator_state.application.search.result import VerticalResults

__all__ = [
    "CardRenderer",
    "CrossViewHighlightBridge",
    "PinRenderer",
    "RenderCycle",
    "RenderProps",
]


@dataclasses.dataclass(frozen=True)
class RenderProps:
    """What a card or a pin needs to draw one location."""
    location_id: str
    highlight_color: str | None
    selected: bool = False


class CardRenderer(Protocol):
    def render_card(self, props: RenderProps) -> None: ...


class PinRenderer(Protocol):
    def render_pin(self, props: RenderProps) -> None: ...


@dataclasses.dataclass(frozen=True)
class RenderCycle:
    color: str | None
    props: tuple[RenderProps, ...]


class CrossViewHighlightBridge:
    """Feeds one highlight color to both the result cards and the map pins.

    The color is read from the mapper's single highlight cell and computed
    once per :meth:`render` call; cards and pins of that cycle receive the
    very same :class:`RenderProps`.  The bridge re-renders whenever the
    highlight, the selected location or the displayed results change.
    """

    def __init__(
        self,
        mapper: FacetColorMapper,
        card_renderer: CardRenderer,
        pin_renderer: PinRenderer,
        *,
        selection: ObservableCell[str | None] | None = None,
    ) -> None:
        self._mapper = mapper
        self._cards = card_renderer
        self._pins = pin_renderer
        self.selection: ObservableCell[str | None] = selection or ObservableCell(None)
        self._results: VerticalResults | None = None
        self._unsubscribers: list[Callable[[], None]] = [
            mapper.highlight.subscribe(lambda _: self.render()),
            self.selection.subscribe(lambda _: self.render()),
        ]

    @property
    def results(self) -> VerticalResults | None:
        return self._results

    def show(self, results: VerticalResults) -> RenderCycle:
        self._results = results
        return self.render()

    def render(self) -> RenderCycle:
        color = self._mapper.highlighted_color()
        selected_id = self.selection.get()
        ids = self._results.location_ids if self._results is not None else []
        props = tuple(
            RenderProps(location_id=i, highlight_color=color, selected=i == selected_id)
            for i in ids
        )
        for p in props:
            self._cards.render_card(p)
        for p in props:
            self._pins.render_pin(p)
        return RenderCycle(color=color, props=props)

    def close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
