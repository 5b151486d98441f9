import logging
import re
import uuid
from typing import Any, Callable, Optional

from fastapi import UploadFile, HTTPException, status
from starlette.concurrency import run_in_threadpool

from roadrunners.core.config import settings
from roadrunners.core.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)

ALLOWED_TYPES = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "application/pdf": "pdf",
}
DEFAULT_FOLDER = "misc"
_FOLDER_PATTERN = re.compile(r"[^a-z0-9_-]+")


class StorageService:
    """Private object storage for permit documents (a Supabase Storage bucket).

    Uploads are single attempts: a failure is reported to the caller as is.
    """

    def __init__(
        self,
        client_factory: Callable[[], Any] = get_supabase_client,
        bucket: Optional[str] = None,
        max_size: Optional[int] = None,
    ):
        self._client_factory = client_factory
        self.bucket = bucket or settings.PERMITS_BUCKET
        self.max_size = max_size or settings.MAX_UPLOAD_BYTES

    def _bucket(self):
        return self._client_factory().storage.from_(self.bucket)

    # Creates the private bucket if it does not exist yet
    async def ensure_bucket(self) -> None:
        storage = self._client_factory().storage
        buckets = await run_in_threadpool(storage.list_buckets)
        if any(getattr(b, "name", None) == self.bucket for b in buckets or []):
            logger.info(f"Bucket {self.bucket} already exists")
            return
        await run_in_threadpool(
            storage.create_bucket,
            self.bucket,
            options={
                "public": False,
                "file_size_limit": self.max_size,
                "allowed_mime_types": sorted({"image/jpeg", "image/png", "application/pdf"}),
            },
        )
        logger.info(f"Created storage bucket: {self.bucket}")

    @staticmethod
    def sanitize_folder(folder: Optional[str]) -> str:
        cleaned = _FOLDER_PATTERN.sub("-", (folder or "").strip().lower()).strip("-")
        return cleaned or DEFAULT_FOLDER

    # Validates and uploads a document, returning its storage path
    async def upload_document(self, file: UploadFile, folder: Optional[str] = None) -> str:
        if file is None or not file.filename:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

        content_type = (file.content_type or "").lower()
        if content_type not in ALLOWED_TYPES:
            logger.warning(f"Rejected upload {file.filename} with type {content_type}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid file type: {content_type or 'unknown'}. Allowed: JPEG, PNG, PDF"
            )

        # One byte past the limit is enough to tell an oversized file apart
        contents = await file.read(self.max_size + 1)
        size = len(contents)
        if size == 0:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty")
        if size > self.max_size:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"File too large (limit {self.max_size} bytes)"
            )

        path = f"{self.sanitize_folder(folder)}/{uuid.uuid4()}.{ALLOWED_TYPES[content_type]}"

        try:
            await run_in_threadpool(self._bucket().upload, path, contents, {"content-type": content_type})
        except Exception as e:
            logger.error(f"Supabase upload error for {path}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Upload failed"
            )

        logger.info(f"Uploaded {size} bytes ({content_type}) to {path}")
        return path

    # Generates a time-limited signed URL for a stored object
    async def create_signed_url(self, path: str, expires_in: Optional[int] = None) -> str:
        expires_in = expires_in or settings.SIGNED_URL_EXPIRES_SECONDS
        try:
            res = await run_in_threadpool(self._bucket().create_signed_url, path, expires_in)
        except Exception as e:
            logger.error(f"Supabase signed URL error for {path}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to generate document URL"
            )

        signed_url = None
        if isinstance(res, dict):
            signed_url = res.get("signedURL") or res.get("signedUrl")
        if not signed_url:
            logger.error(f"No signed URL returned for path: {path}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to generate document URL"
            )
        return signed_url


# Singleton instance
_SERVICE: Optional[StorageService] = None


def get_storage_service() -> StorageService:
    global _SERVICE
    if _SERVICE is None:
        _SERVICE = StorageService()
    return _SERVICE
