"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class IngestConfig(BaseSettings):
    """Source workbook configuration."""

    model_config = {"env_prefix": "SAFETYAWARD_INGEST_", "env_file": ".env", "extra": "ignore"}

    workbook: str = "data.xlsx"  # local path or s3://bucket/key
    sheet: str = "DataSheet"
    s3_region: str = "us-east-1"
    s3_endpoint_url: str | None = None  # LocalStack override


class DynamoDBConfig(BaseSettings):
    """DynamoDB employee table configuration."""

    model_config = {"env_prefix": "SAFETYAWARD_DYNAMO_", "env_file": ".env", "extra": "ignore"}

    table_name: str = "employees"
    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override

    @property
    def full_table_name(self) -> str:
        return f"{self.table_name}{self.table_suffix}"


class LoggingConfig(BaseSettings):
    """Log output configuration."""

    model_config = {"env_prefix": "SAFETYAWARD_LOG_", "env_file": ".env", "extra": "ignore"}

    file: str = "out.log"
    to_file: bool = True
    json_output: bool = False


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SAFETYAWARD_", "env_file": ".env", "extra": "ignore"}

    log_level: str = "INFO"
    mode: Literal["terminated", "active"] = "terminated"
    dry_run: bool = False

    ingest: IngestConfig = Field(default_factory=IngestConfig)
    dynamodb: DynamoDBConfig = Field(default_factory=DynamoDBConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
