"""HTTP routes for uploading files and reading results."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, BackgroundTasks, File, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from repostwatch.history.exporter import ResultExporter
from repostwatch.history.registry import ItemRegistry
from repostwatch.logging.logger import Log
from repostwatch.processor.exceptions import (
    EmptyInputError,
    InputTooLargeError,
    ItemNotFoundError,
    UnsupportedInputError,
)
from repostwatch.processor.input_loader import InputLoader
from repostwatch.processor.models import UploadedItem
from repostwatch.processor.processor import Processor

router = APIRouter()

_INPUT_ERROR_STATUS: dict[type[Exception], int] = {
    UnsupportedInputError: 415,
    EmptyInputError: 400,
    InputTooLargeError: 413,
}


def _registry(request: Request) -> ItemRegistry:
    return request.app.state.registry


def _processor(request: Request) -> Processor:
    return request.app.state.processor


def _exporter(request: Request) -> ResultExporter:
    return request.app.state.exporter


async def _accept_upload(request: Request, file: UploadFile) -> UploadedItem:
    """Validate the upload and register a waiting item.

    At most one byte past the size limit is read, so an oversize upload is
    rejected without buffering it. Nothing is registered when validation fails.
    """
    input_loader: InputLoader = request.app.state.input_loader
    data = await file.read(input_loader.max_upload_bytes + 1)
    media_type = file.content_type or ""
    try:
        input_loader.validate(media_type, data)
    except (UnsupportedInputError, EmptyInputError, InputTooLargeError) as exc:
        Log.warning(f"Rejected upload {file.filename}: {exc}")
        raise HTTPException(status_code=_INPUT_ERROR_STATUS[type(exc)], detail=str(exc)) from exc
    item = _registry(request).create(file.filename or "upload", media_type, data)
    Log.info(f"Accepted upload {item.filename}", item_id=item.id, size=len(data))
    return item


@router.get("/healthz")
async def healthz() -> dict[str, bool]:
    return {"ok": True}


@router.post("/items", status_code=202)
async def create_item(
    request: Request,
    background_tasks: BackgroundTasks,
    file: UploadFile = File(...),
) -> JSONResponse:
    item = await _accept_upload(request, file)
    background_tasks.add_task(_processor(request).process, item)
    return JSONResponse(status_code=202, content=_exporter(request).item_to_dict(item))


@router.post("/analyze")
async def analyze(request: Request, file: UploadFile = File(...)) -> dict[str, Any]:
    item = await _accept_upload(request, file)
    await _processor(request).process(item)
    return _exporter(request).item_to_dict(item)


@router.get("/items")
async def list_items(request: Request) -> list[dict[str, Any]]:
    exporter = _exporter(request)
    return [exporter.item_to_dict(item) for item in _registry(request).items()]


@router.get("/items/{item_id}")
async def get_item(request: Request, item_id: str) -> dict[str, Any]:
    try:
        item = _registry(request).get(item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _exporter(request).item_to_dict(item)


@router.get("/history")
async def history(request: Request) -> list[dict[str, Any]]:
    exporter = _exporter(request)
    return [exporter.item_to_dict(item) for item in _registry(request).history()]


@router.delete("/history")
async def clear_history(request: Request) -> dict[str, int]:
    return {"removed": _registry(request).clear_history()}


@router.get("/history/export")
async def export_history(request: Request) -> Response:
    document = _exporter(request).export(_registry(request).history())
    filename = f"detection-history-{datetime.now(timezone.utc).date().isoformat()}.json"
    return Response(
        content=document.encode("utf-8"),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
