# core/__init__.py

"""
Core Configuration and Utilities Package

Provides application-wide configuration, logging, and exception handling:
- Environment-based configuration management
- Logging with optional file rotation
- Custom exceptions for validation, configuration and provider failures
"""

from .config import settings, Settings, get_settings
from .exceptions import (
    MediBridgeException,
    ValidationError,
    ConfigurationError,
    GlossaryError,
    ProviderError,
    ProviderTimeout,
    ProviderNetworkError,
    ProviderInvalidResponse,
)
from .logging_setup import configure_logging

__all__ = [
    "settings",
    "Settings",
    "get_settings",
    "configure_logging",
    "MediBridgeException",
    "ValidationError",
    "ConfigurationError",
    "GlossaryError",
    "ProviderError",
    "ProviderTimeout",
    "ProviderNetworkError",
    "ProviderInvalidResponse",
]
