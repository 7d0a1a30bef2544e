# core/config_schema.py

from pydantic import BaseModel, Field, field_validator
from pathlib import Path

from core.paths import STRUCT_LOG_DIR, STRUCT_LOG_FILE_NAME, STRUCT_LOG_ARCHIVE_NAME


class LoggingConfig(BaseModel):
    enabled: bool = False
    log_dir: Path = STRUCT_LOG_DIR
    file_name: str = STRUCT_LOG_FILE_NAME
    archive_dir_name: str = STRUCT_LOG_ARCHIVE_NAME
    max_bytes: int = Field(5 * 1024 * 1024, gt=0)  # 5 MB before rotation
    redact_answers: bool = True

    @field_validator("file_name", "archive_dir_name")
    def plain_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        if "/" in v or "\\" in v:
            raise ValueError(f"'{v}' must be a plain name, not a path")
        return v

    @property
    def log_file(self) -> Path:
        return self.log_dir / self.file_name

    @property
    def archive_dir(self) -> Path:
        return self.log_dir / self.archive_dir_name

    def ensure_dirs(self):
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.archive_dir.mkdir(parents=True, exist_ok=True)


class PrompterConfig(BaseModel):
    logging: LoggingConfig = LoggingConfig()
