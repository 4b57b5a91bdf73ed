"""Shared fixtures: an in-memory stand-in for the boto3 S3 client."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from botocore.exceptions import ClientError

from uppy.core.config import StorageConfig


class FakeS3:
    """Records every call and keeps objects in a dict keyed by object key."""

    def __init__(self, bucket):
        self.bucket = bucket
        self.objects = {}
        self.acls = {}
        self.calls = []
        self.fail = {}
        self.upload_id = "upload-123"

    def _record(self, op, **kwargs):
        self.calls.append((op, kwargs))
        if op in self.fail:
            raise ClientError(
                {"Error": {"Code": self.fail[op], "Message": "simulated"}}, op
            )

    def generate_presigned_url(self, ClientMethod, Params, ExpiresIn):
        self._record("generate_presigned_url", ClientMethod=ClientMethod, Params=Params, ExpiresIn=ExpiresIn)
        return f"https://{self.bucket}.s3.example.com/{Params['Key']}?method={ClientMethod}"

    def list_objects_v2(self, Bucket):
        self._record("ListObjectsV2", Bucket=Bucket)
        return {"Contents": [dict(Key=k, **meta) for k, meta in self.objects.items()]}

    def delete_object(self, Bucket, Key):
        self._record("DeleteObject", Bucket=Bucket, Key=Key)
        self.objects.pop(Key, None)

    def copy_object(self, Bucket, CopySource, Key, ACL):
        self._record("CopyObject", Bucket=Bucket, CopySource=CopySource, Key=Key, ACL=ACL)
        src = CopySource.split("/", 1)[1]
        self.objects[Key] = dict(self.objects[src])
        self.acls[Key] = ACL

    def put_object_acl(self, Bucket, Key, ACL):
        self._record("PutObjectAcl", Bucket=Bucket, Key=Key, ACL=ACL)
        self.acls[Key] = ACL

    def create_multipart_upload(self, Bucket, Key, ContentType):
        self._record("CreateMultipartUpload", Bucket=Bucket, Key=Key, ContentType=ContentType)
        return {"UploadId": self.upload_id, "Key": Key}

    def complete_multipart_upload(self, Bucket, Key, UploadId, MultipartUpload):
        self._record(
            "CompleteMultipartUpload",
            Bucket=Bucket, Key=Key, UploadId=UploadId, MultipartUpload=MultipartUpload,
        )
        self.objects[Key] = {"Size": 0, "LastModified": datetime.now(timezone.utc)}

    def ops(self):
        return [op for op, _ in self.calls]


@pytest.fixture
def cfg():
    return StorageConfig(
        access_key="AKIDEXAMPLE",
        secret_key="secret",
        region="eu-west-1",
        bucket="uppy-test",
    )


@pytest.fixture
def fake_s3(cfg):
    fake = FakeS3(cfg.bucket)
    with patch("uppy.services.aws.s3_client", return_value=fake) as factory:
        fake.factory = factory
        yield fake
