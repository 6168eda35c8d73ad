from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dotenv import load_dotenv

from endpoints.document_endpoints import install_error_handlers, router as documents_router
from logging_config import setup_logging
from persistence import AsyncObjectStore, ObjectStore, open_object_store
from services import RetrieveService, StoreService
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(*, settings: Settings | None = None, object_store: ObjectStore | None = None) -> FastAPI:
    """
    Build the application. The backend is created here (or injected by the
    caller) and handed to each service; nothing else holds a global client.
    """
    load_dotenv("local.env")
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    backend = object_store if object_store is not None else open_object_store(settings)
    store = AsyncObjectStore(backend)

    app = FastAPI(title="JSON Document Store")
    app.state.settings = settings
    app.state.store_service = StoreService(store)
    app.state.retrieve_service = RetrieveService(store, max_concurrency=settings.retrieve_max_concurrency)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.debug_log_requests:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
            return response

    @app.get("/health")
    async def health():
        return JSONResponse({"status": "ok", "backend": store.name})

    install_error_handlers(app)
    app.include_router(documents_router)

    logger.info("Document store ready (backend=%s)", store.name)
    return app


app = create_app()
