from importlib.metadata import PackageNotFoundError, version
from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings
from typing import List, Optional

from .errors import MissingConfigError

DIST_NAME = "uppy-backend"

class Settings(BaseSettings):
    AWS_ACCESS_KEY_ID: str | None = None
    AWS_SECRET_ACCESS_KEY: str | None = None
    AWS_REGION: str | None = None
    AWS_BUCKET: str | None = None
    AWS_ENDPOINT_URL: str | None = None

    FRONTEND_ORIGINS: List[str] = [
        "tauri://localhost",
        "http://tauri.localhost",
        "http://localhost:1420",
    ]

    LOG_LEVEL: str = "INFO"

    # sizing hints for the uploader UI
    MULTIPART_THRESHOLD_BYTES: int = 5 * 1024 * 1024
    PART_SIZE_BYTES: int = 5 * 1024 * 1024

    class Config:
        env_file = ".env"

settings = Settings()


class StorageConfig(BaseModel):
    """
    Resolved, immutable S3 configuration handed to every storage operation.
    """
    model_config = ConfigDict(frozen=True)

    access_key: str
    secret_key: str
    region: str
    bucket: str
    endpoint_url: Optional[str] = None

    @classmethod
    def from_settings(cls, s: Settings) -> "StorageConfig":
        # checked in this order so the first missing value is the one reported
        required = [
            ("AWS_ACCESS_KEY_ID", s.AWS_ACCESS_KEY_ID),
            ("AWS_SECRET_ACCESS_KEY", s.AWS_SECRET_ACCESS_KEY),
            ("AWS_REGION", s.AWS_REGION),
            ("AWS_BUCKET", s.AWS_BUCKET),
        ]
        for name, value in required:
            if not value:
                raise MissingConfigError(name)

        return cls(
            access_key=s.AWS_ACCESS_KEY_ID,
            secret_key=s.AWS_SECRET_ACCESS_KEY,
            region=s.AWS_REGION,
            bucket=s.AWS_BUCKET,
            endpoint_url=s.AWS_ENDPOINT_URL,
        )

    def public_url(self, key: str) -> str:
        return f"https://s3.{self.region}.amazonaws.com/{self.bucket}/{key}"


def app_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        # running from a source checkout
        return "0.0.0"
