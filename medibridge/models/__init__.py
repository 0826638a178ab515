# models/__init__.py

"""
MediBridge Models Package

Domain models for the translation pipeline:
- Validated translation requests and responses
- Provider descriptors and per-attempt outcomes
"""

from .translation import (
    EndpointKind,
    FailureReason,
    ProviderDescriptor,
    TranslationRequest,
    TranslationOutcome,
    TranslationResponse,
    Success,
    Failure,
)

__all__ = [
    "EndpointKind",
    "FailureReason",
    "ProviderDescriptor",
    "TranslationRequest",
    "TranslationOutcome",
    "TranslationResponse",
    "Success",
    "Failure",
]
