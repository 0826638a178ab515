from .translation_router import router as translation_router, get_orchestrator

__all__ = ["translation_router", "get_orchestrator"]
