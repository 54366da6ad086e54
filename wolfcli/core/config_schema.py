"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has wrong types or unknown fields, a clear ValidationError is raised at
startup instead of a cryptic KeyError deep in application code.

Every field carries a default so the client runs without any config files.

Each top-level class corresponds to one file in config/settings/:
    ApplicationSchema  → application.yaml
    LoggingSchema      → logging.yaml
"""

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ApiSchema(_StrictBase):
    endpoint: str = "https://api.wolframalpha.com/v2/query"
    output: str = "json"
    # None disables the client-side deadline
    request_timeout: float | None = None


class QueryDefaultsSchema(_StrictBase):
    podstate: str = "Step-by-step solution"
    totaltimeout: int = Field(default=30, ge=0, le=255)
    podtimeout: int = Field(default=30, ge=0, le=255)
    formattimeout: int = Field(default=30, ge=0, le=255)
    parsetimeout: int = Field(default=30, ge=0, le=255)
    scantimeout: int = Field(default=30, ge=0, le=255)
    reinterpret: bool = True


class ApplicationSchema(_StrictBase):
    name: str = "wolfq"
    version: str = "0.1.0"
    description: str = "Wolfram|Alpha query client"
    api: ApiSchema = Field(default_factory=ApiSchema)
    defaults: QueryDefaultsSchema = Field(default_factory=QueryDefaultsSchema)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool = True


class FileHandlerSchema(_StrictBase):
    enabled: bool = False
    path: str = "logs/system.jsonl"
    max_bytes: int = 5242880
    backup_count: int = 3


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema = Field(default_factory=ConsoleHandlerSchema)
    file: FileHandlerSchema = Field(default_factory=FileHandlerSchema)


class LoggingSchema(_StrictBase):
    level: str = "WARNING"
    format: str = "console"
    handlers: HandlersSchema = Field(default_factory=HandlersSchema)
