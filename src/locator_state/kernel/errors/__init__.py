"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    LocatorError
    ├── DomainError               (domain.py)
    │   └── InvariantViolationError
    ├── ApplicationError          (application.py)
    │   ├── SearchExecutionError
    │   └── ConfigError
    │       ├── MissingRequiredSettingError
    │       └── InvalidSettingValueError
    └── ExternalServiceError      (infrastructure.py)
"""

from locator_state.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SearchExecutionError,
)
from locator_state.kernel.errors.base import LocatorError
from locator_state.kernel.errors.domain import DomainError, InvariantViolationError
from locator_state.kernel.errors.infrastructure import ExternalServiceError

__all__ = [
    "ApplicationError",
    "ConfigError",
    "DomainError",
    "ExternalServiceError",
    "InvalidSettingValueError",
    "InvariantViolationError",
    "LocatorError",
    "MissingRequiredSettingError",
    "SearchExecutionError",
]
