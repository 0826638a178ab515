# =============================================================================
# routers/translation_router.py
# =============================================================================

import logging
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ..models.translation import TranslationRequest
from ..services.translation.orchestrator import TranslationOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Translation"])


class TranslateRequestBody(BaseModel):
    # Both optional here so a missing field becomes a 400, not a 422
    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = None
    target_language: Optional[str] = Field(None, alias="targetLanguage")


def get_orchestrator(request: Request) -> TranslationOrchestrator:
    """Dependency injection for the orchestrator built at startup"""
    return request.app.state.orchestrator


@router.post("/translate")
async def translate(
    body: TranslateRequestBody,
    orchestrator: TranslationOrchestrator = Depends(get_orchestrator),
):
    """Translate recognised speech, falling back through providers and the glossary"""
    # Raises ValidationError -> 400 via the app exception handler
    request = TranslationRequest(text=body.text, target_language=body.target_language)

    try:
        result = await orchestrator.orchestrate(request)
    except Exception as e:
        logger.exception(f"❌ Translation pipeline fault: {e}")
        return {
            "error": "Translation failed, returning best-effort text",
            "fallback": orchestrator.degraded_text(request.text),
        }

    if result.used_fallback:
        logger.info(f"📖 Served glossary fallback for '{request.target_language}'")
    else:
        logger.info(f"✅ Translated via {result.provider} to '{request.target_language}'")
    return result.to_payload()


@router.get("/providers")
async def list_providers(orchestrator: TranslationOrchestrator = Depends(get_orchestrator)):
    """Configured providers in trial order"""
    return {"providers": [p.descriptor.to_dict() for p in orchestrator.providers]}
