"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── UnsupportedAlgorithmError
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError     (application.py)
    │   ├── UnauthorizedError
    │   └── ConfigError
    │       ├── MissingRequiredSettingError
    │       └── InvalidSettingValueError
    └── InfrastructureError  (infrastructure.py)
        ├── EntropySourceUnavailableError
        └── SerializationError
"""

from passlab.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UnauthorizedError,
)
from passlab.kernel.errors.base import BaseError
from passlab.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
    UnsupportedAlgorithmError,
    ValidationError,
)
from passlab.kernel.errors.infrastructure import (
    EntropySourceUnavailableError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "ConflictError",
    "DomainError",
    "EntropySourceUnavailableError",
    "InfrastructureError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "NotFoundError",
    "SerializationError",
    "UnauthorizedError",
    "UnsupportedAlgorithmError",
    "ValidationError",
]
