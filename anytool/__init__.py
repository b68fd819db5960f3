"""
Anytool - 分布式 ID 生成器

提供 Snowflake 风格的 64 位有序唯一 ID
"""

from anytool.core.errors import (
    ClockMovedBackwardsError,
    ConfigError,
    IdGenError,
    InvalidSnowflakeIdError,
    InvalidWorkerArgumentError,
)
from anytool.core.idgen import IdWorker, SystemTimeSource, TimeSource, decode_id

__all__ = [
    "ClockMovedBackwardsError",
    "ConfigError",
    "IdGenError",
    "IdWorker",
    "InvalidSnowflakeIdError",
    "InvalidWorkerArgumentError",
    "SystemTimeSource",
    "TimeSource",
    "decode_id",
]
