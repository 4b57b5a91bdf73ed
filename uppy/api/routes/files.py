from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from ...core.config import StorageConfig
from ...core.errors import GatewayError
from ...schemas.common import OkResponse
from ...schemas.files import AclBody, FileRecord, RenameBody
from ...services import aws
from ..deps import get_storage_config

router = APIRouter(prefix="/files", tags=["files"])

@router.get("", response_model=List[FileRecord])
def list_files(cfg: StorageConfig = Depends(get_storage_config)):
    try:
        return aws.list_files(cfg)
    except GatewayError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.delete("", response_model=OkResponse)
def delete_file(key: str = Query(..., min_length=1), cfg: StorageConfig = Depends(get_storage_config)):
    try:
        aws.delete_file(cfg, key)
    except GatewayError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return OkResponse()

@router.post("/rename", response_model=OkResponse)
def rename_file(body: RenameBody, cfg: StorageConfig = Depends(get_storage_config)):
    try:
        aws.rename_file(cfg, body.oldKey, body.newKey)
    except GatewayError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return OkResponse()

@router.post("/acl", response_model=OkResponse)
def set_object_acl(body: AclBody, cfg: StorageConfig = Depends(get_storage_config)):
    try:
        aws.set_public_read(cfg, body.key)
    except GatewayError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return OkResponse()
