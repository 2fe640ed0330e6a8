"""Application highlight – FacetColorMapper."""
from __future__ import annotations

import hashlib
from typing import Literal, Sequence

from locator_state.application.highlight.state import ObservableCell
from locator_state.observability.logging import get_logger

__all__ = ["DEFAULT_PALETTE", "FacetColorMapper"]

logger = get_logger(__name__)

DEFAULT_PALETTE: tuple[str, ...] = (
    "#027da5",
    "#e4572e",
    "#17bebb",
    "#ffc914",
    "#76b041",
    "#8e44ad",
    "#d35400",
    "#2e4057",
)


class FacetColorMapper:
    """Maps facet-option identities to palette colors and holds the highlight.

    ``strategy="length"`` indexes the palette by ``len(identity)``; equal
    lengths share a color.  ``strategy="hash"`` uses a SHA-1 of the identity
    instead.  Both are pure: the same identity always yields the same color.
    """

    def __init__(
        self,
        palette: Sequence[str] = DEFAULT_PALETTE,
        *,
        strategy: Literal["length", "hash"] = "length",
        highlight: ObservableCell[str | None] | None = None,
    ) -> None:
        if not palette:
            raise ValueError("palette must not be empty")
        if strategy not in ("length", "hash"):
            raise ValueError(f"unknown strategy {strategy!r}")
        self._palette = tuple(palette)
        self._strategy = strategy
        self.highlight: ObservableCell[str | None] = highlight or ObservableCell(None)

    @property
    def palette(self) -> tuple[str, ...]:
        return self._palette

    def color_for(self, identity: str) -> str:
        if self._strategy == "hash":
            digest = hashlib.sha1(identity.encode("utf-8")).hexdigest()
            index = int(digest, 16) % len(self._palette)
        else:
            index = len(identity) % len(self._palette)
        return self._palette[index]

    @property
    def highlighted(self) -> str | None:
        return self.highlight.get()

    def set_highlighted(self, identity: str) -> None:
        logger.debug("highlight_set", identity=identity)
        self.highlight.set(identity)

    def clear_highlight(self) -> None:
        logger.debug("highlight_cleared")
        self.highlight.set(None)

    def highlighted_color(self) -> str | None:
        identity = self.highlight.get()
        if identity is None:
            return None
        return self.color_for(identity)
