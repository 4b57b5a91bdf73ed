from pydantic import BaseModel
from .common import NonEmptyStr

class FileRecord(BaseModel):
    key: str
    size: int = 0
    lastModified: str = "Unknown"
    url: str

class RenameBody(BaseModel):
    oldKey: NonEmptyStr
    newKey: NonEmptyStr

class AclBody(BaseModel):
    key: NonEmptyStr

class AppInfo(BaseModel):
    version: str
    bucket: str

class ClipboardBody(BaseModel):
    text: str
