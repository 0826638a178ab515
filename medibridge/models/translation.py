# =============================================================================
# models/translation.py
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from ..core.exceptions import ValidationError


class EndpointKind(Enum):
    JSON_BODY = "json_body"
    QUERY_STRING = "query_string"
    HOSTED_MODEL = "hosted_model"


class FailureReason(Enum):
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class ProviderDescriptor:
    name: str
    endpoint_kind: EndpointKind
    priority: int = 0

    def to_dict(self):
        return {
            "name": self.name,
            "endpointKind": self.endpoint_kind.value,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class TranslationRequest:
    """A single validated translation call"""
    text: str
    target_language: str

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValidationError("Field 'text' is required and must be non-empty", field="text")
        if not isinstance(self.target_language, str) or not self.target_language.strip():
            raise ValidationError(
                "Field 'targetLanguage' is required and must be non-empty",
                field="targetLanguage",
            )
        object.__setattr__(self, "target_language", self.target_language.strip().lower())


@dataclass(frozen=True)
class Success:
    provider: str
    translated_text: str
    ok = True


@dataclass(frozen=True)
class Failure:
    provider: str
    reason: FailureReason
    detail: str = ""
    ok = False


TranslationOutcome = Union[Success, Failure]


@dataclass
class TranslationResponse:
    translated_text: str
    used_fallback: bool
    provider: Optional[str] = None
    attempts: List[TranslationOutcome] = field(default_factory=list)

    def to_payload(self):
        return {
            "translatedText": self.translated_text,
            "usedFallback": self.used_fallback,
            "provider": self.provider,
        }
