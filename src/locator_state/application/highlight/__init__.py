"""Application highlight – color mapping and cross-view highlight state."""
from locator_state.application.highlight.bridge import (
    CardRenderer,
    CrossViewHighlightBridge,
    PinRenderer,
    RenderCycle,
    RenderProps,
)
from locator_state.application.highlight.palette import DEFAULT_PALETTE, FacetColorMapper
from locator_state.application.highlight.state import ObservableCell

__all__ = [
    "DEFAULT_PALETTE",
    "CardRenderer",
    "CrossViewHighlightBridge",
    "FacetColorMapper",
    "ObservableCell",
    "PinRenderer",
    "RenderCycle",
    "RenderProps",
]
