from fastapi import HTTPException
from ..core.config import StorageConfig, settings
from ..core.errors import MissingConfigError

def get_storage_config() -> StorageConfig:
    # resolved per request so a missing value is reported on the call, before any S3 traffic
    try:
        return StorageConfig.from_settings(settings)
    except MissingConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
