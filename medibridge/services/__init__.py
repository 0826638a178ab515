# =============================================================================
# services/__init__.py
# =============================================================================
"""
MediBridge Services Package
- translation/: glossary substitution, provider adapters, fallback orchestration
"""

from .translation import TranslationOrchestrator, Glossary, build_providers, load_glossary

__all__ = [
    "TranslationOrchestrator",
    "Glossary",
    "build_providers",
    "load_glossary",
]
