"""
Upload endpoint: import an audit CSV into the in-memory dataset.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from darpan.data.schemas import ImportResult
from darpan.data.store import DataStore
from darpan.api.dependencies import get_store
from darpan.api.response_models import ImportResponse

router = APIRouter(prefix="/api", tags=["upload"])


@router.post("/import", response_model=ImportResponse)
async def import_csv(file: UploadFile = File(...), store: DataStore = Depends(get_store)):
    """Parse an exported audit sheet and append its rows.

    A file with no usable rows (or one that is not UTF-8) leaves the dataset unchanged.
    """
    if not file.filename:
        raise HTTPException(400, "Missing filename")
    if not file.filename.lower().endswith(".csv"):
        raise HTTPException(400, f"Only .csv files are accepted (got '{file.filename}')")

    content = await file.read()
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        print(f"  Warning: could not decode {file.filename}: {exc}")
        result = ImportResult()
    else:
        result = store.import_text(text)

    return ImportResponse(
        status="imported" if result.count else "empty",
        count=result.count,
        message=result.message,
        rows=store.row_count(),
    )
