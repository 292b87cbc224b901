"""Workbook sources implementing IFileStore: local disk and S3."""

from __future__ import annotations

from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from safetyaward.core.exceptions import TableReadError

S3_SCHEME = "s3://"


def split_s3_uri(uri: str) -> tuple[str, str]:
    """Split ``s3://bucket/key`` into (bucket, key)."""
    if not uri.startswith(S3_SCHEME):
        raise ValueError(f"Not an S3 URI: {uri!r}")
    bucket, _, key = uri[len(S3_SCHEME):].partition("/")
    if not bucket or not key:
        raise ValueError(f"S3 URI needs a bucket and a key: {uri!r}")
    return bucket, key


class LocalFileStore:
    """IFileStore reading from the local filesystem."""

    def __init__(self, root: str | Path = ".") -> None:
        self._root = Path(root)

    def read(self, path: str) -> bytes:
        try:
            return (self._root / path).read_bytes()
        except OSError as exc:
            raise TableReadError(f"Failed to read {path!r}: {exc}") from exc


class S3FileStore:
    """IFileStore backed by an S3 bucket."""

    def __init__(self, bucket: str, region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def read(self, path: str) -> bytes:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=path)
            return resp["Body"].read()
        except (ClientError, BotoCoreError) as exc:
            raise TableReadError(f"S3 read failed for s3://{self._bucket}/{path}: {exc}") from exc
