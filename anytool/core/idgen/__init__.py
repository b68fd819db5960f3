"""ID 生成模块

包含 IdWorker、时间源抽象以及 ID 位布局的编码解码
"""

from anytool.core.idgen.id_worker import IdWorker
from anytool.core.idgen.layout import (
    SnowflakeId,
    compose_id,
    datacenter_id_of,
    decode_id,
    expiry_datetime,
    expiry_timestamp,
    sequence_of,
    timestamp_of,
    worker_id_of,
)
from anytool.core.idgen.time_source import SystemTimeSource, TimeSource

__all__ = [
    "IdWorker",
    "SnowflakeId",
    "SystemTimeSource",
    "TimeSource",
    "compose_id",
    "datacenter_id_of",
    "decode_id",
    "expiry_datetime",
    "expiry_timestamp",
    "sequence_of",
    "timestamp_of",
    "worker_id_of",
]
