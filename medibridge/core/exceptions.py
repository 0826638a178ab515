# core/exceptions.py

"""
Custom exceptions for MediBridge
Provider errors never leave the adapter layer; they are turned into
Failure outcomes. Validation and configuration errors reach the caller.
"""


class MediBridgeException(Exception):
    """Base exception for MediBridge application"""
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(MediBridgeException):
    """Input validation errors"""
    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message, "VALIDATION_ERROR")


class ConfigurationError(MediBridgeException):
    """Configuration and setup errors"""
    pass


class GlossaryError(ConfigurationError):
    """Malformed glossary data"""
    def __init__(self, message: str):
        super().__init__(message, "GLOSSARY_ERROR")


class ProviderError(MediBridgeException):
    """A single translation provider attempt failed"""
    error_code = "PROVIDER_ERROR"

    def __init__(self, message: str, provider: str = None):
        self.provider = provider
        super().__init__(message, self.error_code)


class ProviderTimeout(ProviderError):
    error_code = "PROVIDER_TIMEOUT"


class ProviderNetworkError(ProviderError):
    """Connection failure or non-2xx status"""
    error_code = "PROVIDER_NETWORK_ERROR"

    def __init__(self, message: str, provider: str = None, status_code: int = None):
        self.status_code = status_code
        super().__init__(message, provider)


class ProviderInvalidResponse(ProviderError):
    """Provider answered but the payload had the wrong shape"""
    error_code = "PROVIDER_INVALID_RESPONSE"
