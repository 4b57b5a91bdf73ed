from typing import Dict, List
from pydantic import BaseModel, Field
from .common import NonEmptyStr

class PresignBody(BaseModel):
    filename: NonEmptyStr
    contentType: str

class PresignResponse(BaseModel):
    url: str
    fields: Dict[str, str]
    fileUrl: str
    key: str

class UploadLimits(BaseModel):
    multipartThreshold: int
    partSize: int
    expiresIn: int

class MultipartInitBody(BaseModel):
    filename: NonEmptyStr
    contentType: str

class MultipartInitResponse(BaseModel):
    uploadId: str
    key: str

class PartPresignBody(BaseModel):
    uploadId: NonEmptyStr
    partNumber: int = Field(ge=1, le=10_000)
    key: NonEmptyStr

class PartPresignResponse(BaseModel):
    url: str

class CompletedPart(BaseModel):
    partNumber: int = Field(ge=1)
    etag: str

class MultipartCompleteBody(BaseModel):
    uploadId: NonEmptyStr
    key: NonEmptyStr
    # kept in the order the caller sent them
    parts: List[CompletedPart]

class MultipartCompleteResponse(BaseModel):
    fileUrl: str
