# =============================================================================
# services/translation/__init__.py
# =============================================================================

"""
Translation Services

Medical translation pipeline:
- Glossary substitution of domain terms
- Remote provider adapters with per-call timeouts
- Priority-ordered fallback with a glossary word-substitution last resort
"""

from .glossary import Glossary, DEFAULT_MEDICAL_GLOSSARY, load_glossary
from .providers import (
    DEFAULT_TIMEOUT_MS,
    ProviderAdapter,
    LibreTranslateProvider,
    MyMemoryProvider,
    HostedModelProvider,
    build_providers,
)
from .orchestrator import TranslationOrchestrator

__all__ = [
    "Glossary",
    "DEFAULT_MEDICAL_GLOSSARY",
    "load_glossary",
    "DEFAULT_TIMEOUT_MS",
    "ProviderAdapter",
    "LibreTranslateProvider",
    "MyMemoryProvider",
    "HostedModelProvider",
    "build_providers",
    "TranslationOrchestrator",
]
