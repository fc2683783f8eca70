"""Main application configuration schema."""

from pydantic import BaseModel, Field, field_validator

from .cpi_schema import CloudConfig, CpiConfig
from .director_schema import DirectorConfig
from .logging_schema import LoggingConfig
from .storage_schema import StorageConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    director: DirectorConfig = Field(default_factory=DirectorConfig)
    default_cloud: CloudConfig = Field(default_factory=CloudConfig)
    cpi: CpiConfig = Field(default_factory=CpiConfig)
    environment: str = Field("development", description="Environment")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment."""
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v

