# main.py - MediBridge application factory
# Wires the glossary, provider chain and orchestrator once at startup

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import Settings, get_settings
from .core.exceptions import ValidationError
from .core.logging_setup import configure_logging
from .routers.translation_router import router as translation_router
from .services.translation import TranslationOrchestrator, build_providers, load_glossary

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or get_settings()
    configure_logging(app_settings)

    glossary = load_glossary(app_settings)
    providers = build_providers(app_settings)
    orchestrator = TranslationOrchestrator(
        glossary, providers, timeout_ms=app_settings.provider_timeout_ms
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"🚀 {app_settings.app_name} starting up...")
        logger.info(f"📖 Glossary terms: {len(glossary)}")
        logger.info(f"🌐 Providers: {[p.name for p in providers] or 'none (glossary only)'}")
        yield
        logger.info(f"👋 {app_settings.app_name} shutting down")

    app = FastAPI(
        title="MediBridge - Medical Translation API",
        description="Medical speech translation with glossary substitution and provider failover",
        version=app_settings.app_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.orchestrator = orchestrator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.info(f"🚫 Rejected request: {exc.message}")
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        logger.info(f"🚫 Malformed request body: {problems}")
        return JSONResponse(status_code=400, content={"error": f"Invalid request body: {problems}"})

    app.include_router(translation_router)

    @app.get("/")
    async def root():
        return {
            "message": "MediBridge - Medical Translation API",
            "version": app_settings.app_version,
            "endpoints": {
                "core": ["/api/translate"],
                "info": ["/api/providers", "/health"],
            },
        }

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "version": app_settings.app_version,
            "source_language": app_settings.source_language,
            "glossary_terms": len(orchestrator.glossary),
            "providers": [p.name for p in orchestrator.providers],
        }

    return app


app = create_app()


def run():
    import uvicorn

    app_settings = get_settings()
    uvicorn.run(
        "medibridge.main:app",
        host=app_settings.host,
        port=app_settings.port,
        reload=app_settings.reload,
    )


if __name__ == "__main__":
    run()
