"""Config settings – raw value sources (process environment, ``.env`` file)."""
from __future__ import annotations

import abc
import os

from dotenv import dotenv_values


class SettingsSource(abc.ABC):
    """Port: raw ``LOCATOR_*`` strings from one place."""

    @abc.abstractmethod
    def read(self) -> dict[str, str]: ...


class EnvSource(SettingsSource):
    """The process environment; only ``<prefix>_*`` keys are returned."""

    def __init__(self, prefix: str = "LOCATOR") -> None:
        self._prefix = f"{prefix.upper()}_"

    def read(self) -> dict[str, str]:
        return {k: v for k, v in os.environ.items() if k.startswith(self._prefix)}


class DotenvSource(SettingsSource):
    """A ``.env`` file, parsed without touching ``os.environ``.

    A missing file reads as empty; keys declared without a value are skipped.
    """

    def __init__(self, env_file: str = ".env", prefix: str = "LOCATOR") -> None:
        self._env_file = env_file
        self._prefix = f"{prefix.upper()}_"

    def read(self) -> dict[str, str]:
        return {
            k: v
            for k, v in dotenv_values(self._env_file).items()
            if v is not None and k.startswith(self._prefix)
        }


__all__ = ["DotenvSource", "EnvSource", "SettingsSource"]
