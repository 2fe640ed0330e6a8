"""Application executor – LoadingPhase."""
from __future__ import annotations

import enum

__all__ = ["LoadingPhase"]


class LoadingPhase(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
