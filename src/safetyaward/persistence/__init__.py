"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from safetyaward.core.config import AppSettings
from safetyaward.core.exceptions import TableReadError
from safetyaward.core.protocols import IFileStore
from safetyaward.persistence.dynamodb_backend import DynamoDBEmployeeStore
from safetyaward.persistence.file_store import S3_SCHEME, LocalFileStore, S3FileStore, split_s3_uri


def create_employee_store(settings: AppSettings | None = None) -> DynamoDBEmployeeStore:
    """Create the DynamoDB employee store from application settings."""
    if settings is None:
        settings = AppSettings()

    return DynamoDBEmployeeStore(
        table_name=settings.dynamodb.full_table_name,
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
    )


def create_file_store(location: str,
                      settings: AppSettings | None = None) -> tuple[IFileStore, str]:
    """Create the file store for a workbook location.

    Returns:
        Tuple of (file_store, path within that store).
    """
    if settings is None:
        settings = AppSettings()

    if location.startswith(S3_SCHEME):
        try:
            bucket, key = split_s3_uri(location)
        except ValueError as exc:
            raise TableReadError(str(exc)) from exc
        store = S3FileStore(
            bucket=bucket,
            region=settings.ingest.s3_region,
            endpoint_url=settings.ingest.s3_endpoint_url,
        )
        return store, key

    return LocalFileStore(), location
