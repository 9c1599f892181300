from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

BackendName = Literal["memory", "local"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StorageSettings(BaseModel):
    backend: BackendName = "memory"
    base_path: str = "./storage"
    allow_delete: bool = True
    log_level: LogLevel = "INFO"

    model_config = ConfigDict(extra="forbid")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
