"""Infrastructure errors – failures reported by the search or map services."""

from __future__ import annotations

from locator_state.kernel.errors.base import LocatorError


class ExternalServiceError(LocatorError):
    """A collaborator service answered with an error status."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(
            message or f"External service '{service}' error",
            detail={"service": service, "status_code": status_code},
        )
        self.service = service
        self.status_code = status_code


__all__ = ["ExternalServiceError"]
