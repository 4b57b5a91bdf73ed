import logging
from datetime import datetime, timezone
from typing import Iterable, List, Tuple

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..core.config import StorageConfig
from ..core.errors import StorageRequestError

logger = logging.getLogger(__name__)

PRESIGN_EXPIRES = 3600
PUBLIC_READ = "public-read"


def s3_client(cfg: StorageConfig):
    """
    Build a fresh S3 client for a single call. Nothing is cached between calls.
    """
    return boto3.client(
        "s3",
        region_name=cfg.region,
        aws_access_key_id=cfg.access_key,
        aws_secret_access_key=cfg.secret_key,
        endpoint_url=cfg.endpoint_url or f"https://s3.{cfg.region}.amazonaws.com",  # force regional endpoint
        config=Config(
            signature_version="s3v4",
            s3={"addressing_style": "virtual"}
        ),
    )

def now_utc(): return datetime.now(timezone.utc)

def gen_key(filename: str) -> str:
    ts = int(now_utc().timestamp())
    return f"{ts}_{filename}"

def _fail(step: str, e: Exception) -> StorageRequestError:
    logger.warning("%s: %s", step, e)
    return StorageRequestError(f"{step}: {e}")


def presign_post(cfg: StorageConfig, filename: str, content_type: str) -> dict:
    """
    Issue a presigned PUT for a new timestamp-prefixed key.
    No object exists until the caller uploads with the returned URL.
    """
    key = gen_key(filename)
    s3 = s3_client(cfg)
    try:
        url = s3.generate_presigned_url(
            ClientMethod="put_object",
            Params={"Bucket": cfg.bucket, "Key": key, "ContentType": content_type},
            ExpiresIn=PRESIGN_EXPIRES,
        )
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to create presigned request", e)

    return {
        "url": url,
        "fields": {"key": key, "Content-Type": content_type},
        "fileUrl": cfg.public_url(key),
        "key": key,
    }


def list_files(cfg: StorageConfig) -> List[dict]:
    """
    Single list_objects_v2 request; anything past the first page is not returned.
    Ordered newest first by comparing the lastModified strings.
    """
    s3 = s3_client(cfg)
    try:
        res = s3.list_objects_v2(Bucket=cfg.bucket)
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to list objects", e)

    files = []
    for obj in res.get("Contents") or []:
        key = obj.get("Key")
        if not key:
            continue
        modified = obj.get("LastModified")
        files.append({
            "key": key,
            "size": obj.get("Size") or 0,
            "lastModified": modified.isoformat() if modified else "Unknown",
            "url": cfg.public_url(key),
        })

    files.sort(key=lambda f: f["lastModified"], reverse=True)
    return files


def delete_file(cfg: StorageConfig, key: str) -> None:
    s3 = s3_client(cfg)
    try:
        s3.delete_object(Bucket=cfg.bucket, Key=key)
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to delete object", e)
    logger.info("deleted %s", key)


def rename_file(cfg: StorageConfig, old_key: str, new_key: str) -> None:
    """
    Copy to the new key (always public-read), then delete the old key.

    Not atomic: if the delete fails the copy is kept and both keys exist.
    """
    s3 = s3_client(cfg)
    try:
        s3.copy_object(
            Bucket=cfg.bucket,
            CopySource=f"{cfg.bucket}/{old_key}",
            Key=new_key,
            ACL=PUBLIC_READ,
        )
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to copy object", e)

    try:
        s3.delete_object(Bucket=cfg.bucket, Key=old_key)
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to delete old object", e)
    logger.info("renamed %s -> %s", old_key, new_key)


def set_public_read(cfg: StorageConfig, key: str) -> None:
    s3 = s3_client(cfg)
    try:
        s3.put_object_acl(Bucket=cfg.bucket, Key=key, ACL=PUBLIC_READ)
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to set object ACL", e)


def initiate_multipart(cfg: StorageConfig, filename: str, content_type: str) -> Tuple[str, str]:
    key = gen_key(filename)
    s3 = s3_client(cfg)
    try:
        res = s3.create_multipart_upload(Bucket=cfg.bucket, Key=key, ContentType=content_type)
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to initiate multipart upload", e)

    upload_id = res.get("UploadId")
    if not upload_id:
        raise StorageRequestError("Failed to initiate multipart upload: no UploadId in response")
    logger.info("multipart upload %s started for %s", upload_id, key)
    return upload_id, key


def presign_part(cfg: StorageConfig, upload_id: str, part_number: int, key: str) -> str:
    s3 = s3_client(cfg)
    try:
        return s3.generate_presigned_url(
            ClientMethod="upload_part",
            Params={
                "Bucket": cfg.bucket,
                "Key": key,
                "UploadId": upload_id,
                "PartNumber": part_number,
            },
            ExpiresIn=PRESIGN_EXPIRES,
        )
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to create presigned URL for part", e)


def complete_multipart(
    cfg: StorageConfig,
    upload_id: str,
    key: str,
    parts: Iterable[Tuple[int, str]],
) -> str:
    """
    Finalize the upload with the parts exactly as given, then make it public-read.

    Part order and contiguity are left to S3 to check. If the ACL step fails
    the object stays completed but private.
    """
    completed = [{"PartNumber": n, "ETag": etag} for n, etag in parts]
    s3 = s3_client(cfg)
    try:
        s3.complete_multipart_upload(
            Bucket=cfg.bucket,
            Key=key,
            UploadId=upload_id,
            MultipartUpload={"Parts": completed},
        )
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to complete multipart upload", e)

    try:
        s3.put_object_acl(Bucket=cfg.bucket, Key=key, ACL=PUBLIC_READ)
    except (BotoCoreError, ClientError) as e:
        raise _fail("Failed to set object ACL", e)

    logger.info("multipart upload %s completed for %s (%d parts)", upload_id, key, len(completed))
    return cfg.public_url(key)
