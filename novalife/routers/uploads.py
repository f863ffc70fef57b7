from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response
from novalife.storage.store import BlobStore, get_store

router = APIRouter()

CACHE_FOREVER = "public, max-age=31536000, immutable"

@router.get("/uploads/{path:path}")
def serve_upload(path: str, store: BlobStore = Depends(get_store)):
    """Stream back an uploaded file. Only the last path segment names the file."""
    file_name = path.rstrip("/").rsplit("/", 1)[-1]
    stored = store.get_file(file_name) if file_name else None
    if stored is None:
        return PlainTextResponse("File not found", status_code=404)

    return Response(
        content=stored.body,
        media_type=stored.content_type,
        headers={"Cache-Control": CACHE_FOREVER},
    )
