"""Storage configuration schema."""
from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Stemcell database configuration."""

    db_path: str = Field(":memory:", description="SQLite database path")
    enable_wal: bool = Field(True, description="Enable Write-Ahead Logging")
