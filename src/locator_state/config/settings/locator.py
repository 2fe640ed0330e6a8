"""Config settings – LocatorSettings."""
import dataclasses
from typing import ClassVar

from locator_state.kernel.errors import InvalidSettingValueError

ENVIRONMENTS = frozenset({"PROD", "SANDBOX"})


@dataclasses.dataclass
class LocatorSettings:
    """Static configuration of one locator page.

    Each field is read from ``LOCATOR_<FIELD>``, e.g. ``LOCATOR_API_KEY`` or
    ``LOCATOR_FACETS_ENABLED=true``.  ``api_key`` and ``experience_key`` have
    no default and must come from some source.
    """

    env_prefix: ClassVar[str] = "LOCATOR"

    api_key: str
    experience_key: str
    locale: str = "it"
    environment: str = "PROD"
    map_api_key: str = ""
    facets_enabled: bool = False
    vertical_key: str = "locations"
    map_zoom: int = 20
    placeholder: str = "Enter an address, zip code, or city and state"

    def __post_init__(self) -> None:
        self.environment = self.environment.upper()
        if self.environment not in ENVIRONMENTS:
            raise InvalidSettingValueError(
                "environment", self.environment, f"expected one of {sorted(ENVIRONMENTS)}"
            )
        if not 0 <= self.map_zoom <= 24:
            raise InvalidSettingValueError("map_zoom", self.map_zoom, "expected 0..24")
        if not self.vertical_key:
            raise InvalidSettingValueError("vertical_key", self.vertical_key, "must not be empty")

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls.env_prefix}_{field_name}".upper()

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in dataclasses.fields(cls)
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ]


__all__ = ["ENVIRONMENTS", "LocatorSettings"]
