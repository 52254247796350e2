# Upload Router
# Authenticated image uploads (avatars, logos, screenshots) to object storage

import logging

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from database.models import User
from auth.decorators import require_permission
from auth.roles import Permission
from core import storage_service
from core.errors import InternalError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads", tags=["Uploads"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: UploadFile = File(None),
    folder: str = Form(storage_service.DEFAULT_FOLDER),
    current_user: User = Depends(require_permission(Permission.UPLOAD_FILES)),
):
    """Store the uploaded file and return {url, object_key}."""
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")

    contents = await file.read()
    if not contents:
        raise ValidationError("No file uploaded")

    try:
        return storage_service.upload_file(
            file_bytes=contents,
            original_filename=file.filename,
            content_type=file.content_type,
            folder=folder,
        )
    except (BotoCoreError, ClientError) as e:
        logger.error("Upload by %s failed: %s", current_user.id, e)
        raise InternalError("Failed to upload file")
