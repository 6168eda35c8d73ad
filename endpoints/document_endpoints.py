from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from errors import DocumentStoreError, status_code_for
from services import RetrieveService, StoreService

router = APIRouter(tags=["documents"])
logger = logging.getLogger(__name__)


class StoreReceipt(BaseModel):
    e_tag: str
    url: str


class ErrorBody(BaseModel):
    error: str
    details: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorBody, "description": "Body is not valid JSON"},
    502: {"model": ErrorBody, "description": "Storage backend failure"},
}


def get_store_service(request: Request) -> StoreService:
    return request.app.state.store_service


def get_retrieve_service(request: Request) -> RetrieveService:
    return request.app.state.retrieve_service


@router.post("/store", response_model=StoreReceipt, responses=ERROR_RESPONSES)
async def store_document(request: Request, service: StoreService = Depends(get_store_service)) -> StoreReceipt:
    # Read the raw body so any JSON value (not just objects) is accepted as-is.
    raw = await request.body()
    record = await service.store(raw)
    return StoreReceipt(e_tag=record.integrity_tag, url=record.locator)


@router.get("/retrieve", responses=ERROR_RESPONSES)
async def retrieve_documents(service: RetrieveService = Depends(get_retrieve_service)) -> JSONResponse:
    documents = await service.retrieve_all()
    return JSONResponse(documents)


async def _document_store_error_handler(request: Request, exc: DocumentStoreError) -> JSONResponse:
    status = status_code_for(exc)
    logger.info("%s %s -> %s %s", request.method, request.url.path, status, exc.kind)
    body = ErrorBody(error=exc.kind, details=exc.details)
    return JSONResponse(body.model_dump(), status_code=status)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    body = ErrorBody(error="InternalError", details=f"{type(exc).__name__}: {exc}")
    return JSONResponse(body.model_dump(), status_code=500)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DocumentStoreError, _document_store_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
