import logging
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse

from dinner.infra import paths
from dinner.utilities.config import MAX_UPLOAD_BYTES, MAX_UPLOAD_FILES
from dinner.utilities.constants import ALLOWED_UPLOAD_TYPES, PDF_MIME_TYPE, UPLOAD_FOLDERS

router = APIRouter()
logger = logging.getLogger(__name__)

INVALID_TYPE_ERROR = 'Invalid file type. Only images (JPEG, PNG, GIF, WebP) and PDFs are allowed.'


def ensure_upload_dirs():
    for folder in UPLOAD_FOLDERS:
        (paths.UPLOADS_DIR / folder).mkdir(parents=True, exist_ok=True)


def _error(message: str, status_code: int = 400):
    return JSONResponse(status_code=status_code, content={"error": message})


def _folder_for(content_type: str) -> str:
    return 'pdfs' if content_type == PDF_MIME_TYPE else 'images'


def _saved_name(original: str) -> str:
    # <stem>-<ms timestamp><ext>
    name = Path(original).name
    stem, ext = Path(name).stem, Path(name).suffix
    return f"{stem}-{int(time.time() * 1000)}{ext}"


async def _read_checked(upload: UploadFile):
    """Return (content, error message)."""
    if upload.content_type not in ALLOWED_UPLOAD_TYPES:
        return None, INVALID_TYPE_ERROR
    content = await upload.read()
    if len(content) > MAX_UPLOAD_BYTES:
        return None, f"File too large. Maximum size is {MAX_UPLOAD_BYTES // (1024 * 1024)}MB."
    return content, None


def _store(upload: UploadFile, content: bytes) -> dict:
    ensure_upload_dirs()
    folder = _folder_for(upload.content_type)
    saved = _saved_name(upload.filename or 'upload')
    with open(paths.UPLOADS_DIR / folder / saved, "wb") as f:
        f.write(content)
    logger.info("Stored upload %s as %s/%s", upload.filename, folder, saved)
    return {
        "originalName": upload.filename,
        "savedName": saved,
        "path": f"data/uploads/{folder}/{saved}",
        "size": len(content),
        "mimetype": upload.content_type,
    }


@router.post("/api/upload")
async def upload_file(file: Optional[UploadFile] = File(None)):
    if file is None or not file.filename:
        return _error('No file uploaded')
    content, error = await _read_checked(file)
    if error:
        return _error(error)
    return {"success": True, "message": "File uploaded successfully", "file": _store(file, content)}


@router.post("/api/upload/multiple")
async def upload_files(files: Optional[List[UploadFile]] = File(None)):
    files = [f for f in (files or []) if f.filename]
    if not files:
        return _error('No files uploaded')
    if len(files) > MAX_UPLOAD_FILES:
        return _error(f'Too many files. Maximum is {MAX_UPLOAD_FILES}.')
    checked = []
    for f in files:
        content, error = await _read_checked(f)
        if error:
            return _error(error)
        checked.append((f, content))
    stored = [_store(f, content) for f, content in checked]
    return {
        "success": True,
        "message": f"{len(stored)} file(s) uploaded successfully",
        "files": stored,
    }


def _list_folder(folder: str) -> List[dict]:
    directory = paths.UPLOADS_DIR / folder
    if not directory.exists():
        return []
    entries = []
    for p in sorted(directory.iterdir()):
        if p.name.startswith('.') or not p.is_file():
            continue
        stats = p.stat()
        entries.append({
            "name": p.name,
            "path": f"data/uploads/{folder}/{p.name}",
            "size": stats.st_size,
            "uploaded": datetime.fromtimestamp(stats.st_mtime).isoformat(),
        })
    return entries


@router.get("/api/uploads")
def list_uploads():
    try:
        return {"images": _list_folder('images'), "pdfs": _list_folder('pdfs')}
    except OSError as e:
        logger.error("Error reading uploads: %s", e)
        return {"images": [], "pdfs": []}


@router.delete("/api/uploads/{folder}/{filename}")
def delete_upload(folder: str, filename: str):
    if folder not in UPLOAD_FOLDERS:
        return _error('Invalid folder')
    if Path(filename).name != filename:
        return _error('Invalid filename')
    target = paths.UPLOADS_DIR / folder / filename
    if not target.is_file():
        return _error('File not found', 404)
    try:
        target.unlink()
    except OSError as e:
        logger.error("Failed to delete %s: %s", target, e)
        return _error('Failed to delete file', 500)
    return {"success": True, "message": "File deleted"}
