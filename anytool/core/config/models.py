"""配置模型（Pydantic）"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from anytool.core.constants import (
    ANYTOOL_DIR,
    DEFAULT_DATACENTER_ID,
    DEFAULT_WORKER_ID,
    LOG_DIR,
    LOG_ENCODING,
    LOG_FILE,
    LOG_LEVEL,
    LOG_RETENTION,
    LOG_ROTATION,
    MAX_DATACENTER_ID,
    MAX_WORKER_ID,
)


class WorkerSection(BaseModel):
    worker_id: int = Field(default=DEFAULT_WORKER_ID, ge=0, le=MAX_WORKER_ID, description="机器 ID")
    datacenter_id: int = Field(
        default=DEFAULT_DATACENTER_ID, ge=0, le=MAX_DATACENTER_ID, description="数据中心 ID"
    )


class LoggerSection(BaseModel):
    dirpath: str = f"{ANYTOOL_DIR}/{LOG_DIR}"
    filename: str = LOG_FILE
    level: str = LOG_LEVEL
    rotation: str = LOG_ROTATION
    retention: str = LOG_RETENTION
    encoding: str = LOG_ENCODING


class ConfigMeta(BaseModel):
    workspace_dir: Path
    config_file_path: Optional[Path] = None
    source: Literal["user", "project", "default"] = "default"


class Config(BaseModel):
    model_config = ConfigDict(extra="allow")

    worker: WorkerSection = Field(default_factory=WorkerSection)
    logger: LoggerSection = Field(default_factory=LoggerSection)
    meta: ConfigMeta

    @property
    def worker_id(self) -> int:
        return self.worker.worker_id

    @property
    def datacenter_id(self) -> int:
        return self.worker.datacenter_id

    @property
    def workspace_dir(self) -> Path:
        return self.meta.workspace_dir

    @property
    def config_file_path(self) -> Optional[Path]:
        return self.meta.config_file_path

    @property
    def source(self) -> str:
        return self.meta.source
