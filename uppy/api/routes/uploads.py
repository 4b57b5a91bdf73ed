from fastapi import APIRouter, Depends, HTTPException
from ...core.config import StorageConfig, settings
from ...core.errors import GatewayError
from ...schemas.uploads import (
    MultipartCompleteBody,
    MultipartCompleteResponse,
    MultipartInitBody,
    MultipartInitResponse,
    PartPresignBody,
    PartPresignResponse,
    PresignBody,
    PresignResponse,
    UploadLimits,
)
from ...services import aws
from ..deps import get_storage_config

router = APIRouter(prefix="/uploads", tags=["uploads"])

@router.get("/limits", response_model=UploadLimits)
def upload_limits():
    return UploadLimits(
        multipartThreshold=settings.MULTIPART_THRESHOLD_BYTES,
        partSize=settings.PART_SIZE_BYTES,
        expiresIn=aws.PRESIGN_EXPIRES,
    )

@router.post("/presign", response_model=PresignResponse)
def presign_upload(body: PresignBody, cfg: StorageConfig = Depends(get_storage_config)):
    try:
        grant = aws.presign_post(cfg, body.filename, body.contentType)
    except GatewayError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return PresignResponse(**grant)

@router.post("/multipart/initiate", response_model=MultipartInitResponse)
def initiate_multipart(body: MultipartInitBody, cfg: StorageConfig = Depends(get_storage_config)):
    try:
        upload_id, key = aws.initiate_multipart(cfg, body.filename, body.contentType)
    except GatewayError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return MultipartInitResponse(uploadId=upload_id, key=key)

@router.post("/multipart/presign-part", response_model=PartPresignResponse)
def presign_part(body: PartPresignBody, cfg: StorageConfig = Depends(get_storage_config)):
    try:
        url = aws.presign_part(cfg, body.uploadId, body.partNumber, body.key)
    except GatewayError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return PartPresignResponse(url=url)

@router.post("/multipart/complete", response_model=MultipartCompleteResponse)
def complete_multipart(body: MultipartCompleteBody, cfg: StorageConfig = Depends(get_storage_config)):
    parts = [(p.partNumber, p.etag) for p in body.parts]
    try:
        file_url = aws.complete_multipart(cfg, body.uploadId, body.key, parts)
    except GatewayError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return MultipartCompleteResponse(fileUrl=file_url)
