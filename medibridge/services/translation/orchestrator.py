# =============================================================================
# services/translation/orchestrator.py
# =============================================================================

import logging
from typing import List, Sequence

from ...models.translation import TranslationRequest, TranslationResponse
from .glossary import Glossary
from .providers import DEFAULT_TIMEOUT_MS, ProviderAdapter

logger = logging.getLogger(__name__)


class TranslationOrchestrator:
    """
    Glossary pass, then providers in priority order, then word-level
    glossary fallback when every provider fails.
    """

    def __init__(self, glossary: Glossary, providers: Sequence[ProviderAdapter],
                 timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.glossary = glossary
        self.providers = tuple(providers)
        self.timeout_ms = timeout_ms

    def preprocess(self, text: str) -> str:
        """Case-fold, then substitute glossary terms"""
        return self.glossary.substitute(text.lower())

    def word_fallback(self, text: str) -> str:
        # Whole words only: multi-word glossary terms never match here
        words: List[str] = text.split()
        return " ".join(self.glossary.lookup(word) or word for word in words)

    async def orchestrate(self, request: TranslationRequest) -> TranslationResponse:
        prepared = self.preprocess(request.text)
        attempts = []

        for provider in self.providers:
            outcome = await provider.translate(prepared, request.target_language, self.timeout_ms)
            attempts.append(outcome)
            if outcome.ok:
                return TranslationResponse(
                    translated_text=outcome.translated_text,
                    used_fallback=False,
                    provider=provider.name,
                    attempts=attempts,
                )

        logger.warning(
            f"⚠️ All {len(self.providers)} providers failed for '{request.target_language}', "
            f"using glossary word fallback"
        )
        return TranslationResponse(
            translated_text=self.word_fallback(prepared),
            used_fallback=True,
            provider=None,
            attempts=attempts,
        )

    def degraded_text(self, text: str) -> str:
        """Best-effort speakable string when orchestration itself blew up"""
        try:
            return self.preprocess(text)
        except Exception:
            logger.exception("❌ Glossary pass failed while building degraded response")
            return text
