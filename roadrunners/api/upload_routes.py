from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import Optional

from roadrunners.services.storage_service import StorageService, get_storage_service

router = APIRouter(tags=["Uploads"])


# Stores an identity document in the private bucket and returns its path
@router.post("/upload")
async def upload_document(
    file: Optional[UploadFile] = File(None),
    folder: Optional[str] = Form(None),
    storage: StorageService = Depends(get_storage_service),
):
    path = await storage.upload_document(file, folder)
    return {"path": path}
