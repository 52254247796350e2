# Object Storage Service for user uploads
# Any S3-compatible endpoint (MinIO in docker, S3 in production)

import logging
import uuid
from datetime import datetime

import boto3
from botocore.client import Config
from botocore.exceptions import ClientError

from config.app_config import (
    STORAGE_ENDPOINT,
    STORAGE_PUBLIC_ENDPOINT,
    STORAGE_ACCESS_KEY,
    STORAGE_SECRET_KEY,
    STORAGE_BUCKET,
    STORAGE_REGION,
    UPLOAD_URL_EXPIRY,
)

logger = logging.getLogger(__name__)

DEFAULT_FOLDER = "inverso/uploads"


def _get_client(endpoint: str = STORAGE_ENDPOINT):
    return boto3.client(
        "s3",
        endpoint_url=endpoint,
        aws_access_key_id=STORAGE_ACCESS_KEY,
        aws_secret_access_key=STORAGE_SECRET_KEY,
        config=Config(signature_version="s3v4"),
        region_name=STORAGE_REGION,
    )


def _get_public_client():
    """
    Client used only for presigning, so URLs carry the hostname the browser
    can reach (localhost in dev, the public domain in production).
    """
    return _get_client(STORAGE_PUBLIC_ENDPOINT)


def ensure_bucket_exists(client) -> None:
    try:
        client.head_bucket(Bucket=STORAGE_BUCKET)
    except ClientError as e:
        if e.response["Error"]["Code"] in ("404", "NoSuchBucket"):
            client.create_bucket(Bucket=STORAGE_BUCKET)
            logger.info("Storage bucket '%s' created", STORAGE_BUCKET)
        else:
            raise


def build_object_key(folder: str, original_filename: str) -> str:
    folder = (folder or DEFAULT_FOLDER).strip("/") or DEFAULT_FOLDER
    safe_name = (original_filename or "upload").replace(" ", "_").replace("/", "_")
    unique_id = str(uuid.uuid4())[:8]
    timestamp = datetime.utcnow().strftime("%Y%m%d")
    return f"{folder}/{timestamp}-{unique_id}-{safe_name}"


def upload_file(
    file_bytes: bytes,
    original_filename: str,
    content_type: str,
    folder: str = DEFAULT_FOLDER,
) -> dict:
    """
    Upload an image (avatar, logo, screenshot) and return a display URL.

    Returns a dict with:
      - url: presigned GET URL valid for UPLOAD_URL_EXPIRY seconds
      - object_key: the key stored in the bucket
    """
    client = _get_client()
    ensure_bucket_exists(client)

    object_key = build_object_key(folder, original_filename)
    client.put_object(
        Bucket=STORAGE_BUCKET,
        Key=object_key,
        Body=file_bytes,
        ContentType=content_type or "application/octet-stream",
    )

    url = _get_public_client().generate_presigned_url(
        "get_object",
        Params={"Bucket": STORAGE_BUCKET, "Key": object_key},
        ExpiresIn=UPLOAD_URL_EXPIRY,
    )
    logger.info("Uploaded %s (%d bytes)", object_key, len(file_bytes))
    return {
        "url": url,
        "object_key": object_key,
    }
