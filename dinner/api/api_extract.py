"""Relay of uploaded recipe photos/PDFs to the external recipe extraction webhook."""
import logging
import mimetypes

import httpx
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from dinner.infra import paths
from dinner.utilities.config import EXTRACTION_WEBHOOK_URL, EXTRACTION_TIMEOUT_SECONDS
from dinner.utilities.validators import ExtractionInput

router = APIRouter()
logger = logging.getLogger(__name__)

WEBHOOK_URL = EXTRACTION_WEBHOOK_URL
UPLOADS_PREFIX = "data/uploads/"


def _make_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=EXTRACTION_TIMEOUT_SECONDS)


def _resolve_upload(path: str):
    """Map a 'data/uploads/<folder>/<file>' path onto the uploads directory."""
    if not path.startswith(UPLOADS_PREFIX):
        raise HTTPException(status_code=400, detail="Path must point into data/uploads/")
    base = paths.UPLOADS_DIR.resolve()
    target = (base / path[len(UPLOADS_PREFIX):]).resolve()
    if base not in target.parents:
        raise HTTPException(status_code=400, detail="Path must point into data/uploads/")
    if not target.is_file():
        raise HTTPException(status_code=404, detail="File not found")
    return target


@router.post("/api/extract")
async def extract_recipe(payload: ExtractionInput):
    if not WEBHOOK_URL:
        raise HTTPException(status_code=503, detail="Recipe extraction service is not configured")
    target = _resolve_upload(payload.path)
    mimetype = mimetypes.guess_type(target.name)[0] or "application/octet-stream"
    logger.info("Relaying %s to extraction service", target.name)

    try:
        async with _make_client() as client:
            response = await client.post(
                WEBHOOK_URL,
                files={"file": (target.name, target.read_bytes(), mimetype)},
                data={"path": payload.path},
            )
    except httpx.HTTPError as e:
        logger.error("Extraction service unreachable: %s", e)
        raise HTTPException(status_code=502, detail="Recipe extraction service unreachable")

    if response.status_code != 200:
        return JSONResponse(status_code=response.status_code, content={"error": response.text})
    try:
        return response.json()
    except ValueError:
        raise HTTPException(status_code=502, detail="Recipe extraction service returned invalid JSON")
