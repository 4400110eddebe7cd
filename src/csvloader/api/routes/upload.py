"""CSV upload endpoint."""

from __future__ import annotations

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from csvloader.ingest.pipeline import IngestionPipeline
from csvloader.models.outcomes import FailureKind, IngestionOutcome, RowProcessingError

router = APIRouter(tags=["upload"])


def _status_code(outcome: IngestionOutcome) -> int:
    failure = outcome.failure
    if isinstance(failure, RowProcessingError) and failure.cause.kind == FailureKind.PERSISTENCE_FAILURE:
        return 500
    return 400


@router.post("/upload")
async def upload_file(request: Request, file: UploadFile = File(...)) -> dict:
    """Validate the uploaded CSV and insert its rows."""
    pipeline: IngestionPipeline = request.app.state.pipeline
    # pipeline I/O is blocking
    outcome = await run_in_threadpool(pipeline.ingest, file.file, file.filename)
    if not outcome.ok:
        raise HTTPException(status_code=_status_code(outcome), detail={
            "kind": str(outcome.failure.kind),
            "line": outcome.line,
            "message": f"Error processing file: {outcome.message}",
        })
    return {
        "status": "ok",
        "message": outcome.message,
        "records_persisted": outcome.records_persisted,
    }
