"""Error handling: exception hierarchy."""

from libconfidence.errors.exceptions import (
    ConfigurationError,
    InputError,
    LibConfidenceError,
)

__all__ = [
    "LibConfidenceError",
    "ConfigurationError",
    "InputError",
]
