from fastapi import APIRouter, Depends
from ...core.config import StorageConfig, app_version
from ...schemas.common import OkResponse
from ...schemas.files import AppInfo, ClipboardBody
from ..deps import get_storage_config

router = APIRouter(tags=["app"])

@router.get("/app/info", response_model=AppInfo)
def get_app_info(cfg: StorageConfig = Depends(get_storage_config)):
    return AppInfo(version=app_version(), bucket=cfg.bucket)

@router.post("/clipboard", response_model=OkResponse)
def copy_to_clipboard(body: ClipboardBody):
    # the desktop shell owns the clipboard; nothing to do here
    return OkResponse()
