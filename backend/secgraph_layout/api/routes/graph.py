"""Graph API - upload or post a graph, get it back sanitized and laid out."""

import os
from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse
from loguru import logger

from secgraph_layout.layout import layout_constants
from secgraph_layout.shared import GraphDecodeError, decode_graph
from secgraph_layout.shared.pipeline import process_graph

from ..schemas import ErrorResponse, LayoutConstantsResponse

MAX_UPLOAD_BYTES = int(os.environ.get("GRAPH_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

router = APIRouter()

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _too_large() -> JSONResponse:
    return _error(413, f"payload exceeds {MAX_UPLOAD_BYTES} bytes")


async def _read_body(request: Request) -> Optional[bytes]:
    """Request body, or None once it grows past MAX_UPLOAD_BYTES."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > MAX_UPLOAD_BYTES:
        return None
    chunks = bytearray()
    async for chunk in request.stream():
        chunks.extend(chunk)
        if len(chunks) > MAX_UPLOAD_BYTES:
            return None
    return bytes(chunks)


def _process_payload(raw: bytes):
    try:
        graph = decode_graph(raw)
    except GraphDecodeError as e:
        logger.warning("Rejected graph payload: {}", e)
        return _error(400, str(e))
    return process_graph(graph).to_payload()


@router.post("/upload", responses=_ERROR_RESPONSES)
async def upload_graph(json_file: Optional[UploadFile] = File(None, alias="jsonFile")):
    """Multipart upload (field jsonFile) -> sanitized graph with layout."""
    if json_file is None:
        return _error(400, "File not received")
    try:
        if json_file.size is not None and json_file.size > MAX_UPLOAD_BYTES:
            return _too_large()
        raw = await json_file.read(MAX_UPLOAD_BYTES + 1)
    except OSError as e:
        return _error(400, f"failed to open file: {e}")
    finally:
        await json_file.close()
    if len(raw) > MAX_UPLOAD_BYTES:
        return _too_large()
    return _process_payload(raw)


@router.post("/layout", responses=_ERROR_RESPONSES)
async def layout_graph(request: Request):
    """Raw JSON body -> sanitized graph with layout."""
    raw = await _read_body(request)
    if raw is None:
        return _too_large()
    return _process_payload(raw)


@router.get("/constants", response_model=LayoutConstantsResponse, response_model_by_alias=True)
async def get_layout_constants():
    return layout_constants()
