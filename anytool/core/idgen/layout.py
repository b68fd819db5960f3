"""ID 位布局

负责把 (时间戳差值, 数据中心 ID, 机器 ID, 序列号) 打包为 64 位整数，以及反向解析

位布局（高位到低位）:
    0 - 0000000000 0000000000 0000000000 0000000000 0 - 00000 - 00000 - 000000000000
    1 位符号位，恒为 0
    41 位时间戳差值（当前毫秒 - 纪元），约可使用 69 年
    5 位数据中心 ID
    5 位机器 ID
    12 位毫秒内序列号
"""

from datetime import datetime, timezone
from dataclasses import dataclass

from anytool.core.constants import (
    DATACENTER_ID_SHIFT,
    DEFAULT_EPOCH,
    MAX_DATACENTER_ID,
    MAX_ID,
    MAX_WORKER_ID,
    SEQUENCE_MASK,
    TIMESTAMP_LEFT_SHIFT,
    TIMESTAMP_MASK,
    WORKER_ID_SHIFT,
)
from anytool.core.errors import InvalidSnowflakeIdError


@dataclass(frozen=True)
class SnowflakeId:
    """解析后的 ID 各字段"""

    timestamp_delta: int
    datacenter_id: int
    worker_id: int
    sequence: int
    epoch: int = DEFAULT_EPOCH

    @property
    def timestamp(self) -> int:
        """生成时的绝对时间戳（毫秒）"""
        return self.timestamp_delta + self.epoch

    @property
    def created_at(self) -> datetime:
        """生成时间（UTC）"""
        return _millis_to_datetime(self.timestamp)

    def to_id(self) -> int:
        """重新编码为 64 位整数"""
        return compose_id(
            self.timestamp_delta, self.datacenter_id, self.worker_id, self.sequence
        )


def compose_id(timestamp_delta: int, datacenter_id: int, worker_id: int, sequence: int) -> int:
    """按位布局打包 ID

    调用方负责保证各字段在范围内，热路径上不做校验
    """
    return (
        (timestamp_delta << TIMESTAMP_LEFT_SHIFT)
        | (datacenter_id << DATACENTER_ID_SHIFT)
        | (worker_id << WORKER_ID_SHIFT)
        | sequence
    )


def _check_id(snowflake_id: int) -> None:
    if isinstance(snowflake_id, bool) or not isinstance(snowflake_id, int):
        raise InvalidSnowflakeIdError(snowflake_id)
    if snowflake_id < 0 or snowflake_id > MAX_ID:
        raise InvalidSnowflakeIdError(snowflake_id)


def decode_id(snowflake_id: int, epoch: int = DEFAULT_EPOCH) -> SnowflakeId:
    """解析 ID

    Args:
        snowflake_id: 待解析的 ID
        epoch: 生成该 ID 时使用的纪元

    Returns:
        SnowflakeId: 解析结果

    Raises:
        InvalidSnowflakeIdError: ID 为负数或超出 63 位
    """
    _check_id(snowflake_id)
    return SnowflakeId(
        timestamp_delta=(snowflake_id >> TIMESTAMP_LEFT_SHIFT) & TIMESTAMP_MASK,
        datacenter_id=(snowflake_id >> DATACENTER_ID_SHIFT) & MAX_DATACENTER_ID,
        worker_id=(snowflake_id >> WORKER_ID_SHIFT) & MAX_WORKER_ID,
        sequence=snowflake_id & SEQUENCE_MASK,
        epoch=epoch,
    )


def worker_id_of(snowflake_id: int) -> int:
    return (snowflake_id >> WORKER_ID_SHIFT) & MAX_WORKER_ID


def datacenter_id_of(snowflake_id: int) -> int:
    return (snowflake_id >> DATACENTER_ID_SHIFT) & MAX_DATACENTER_ID


def sequence_of(snowflake_id: int) -> int:
    return snowflake_id & SEQUENCE_MASK


def timestamp_of(snowflake_id: int, epoch: int = DEFAULT_EPOCH) -> int:
    """提取绝对时间戳（毫秒）"""
    return ((snowflake_id >> TIMESTAMP_LEFT_SHIFT) & TIMESTAMP_MASK) + epoch


def expiry_timestamp(epoch: int = DEFAULT_EPOCH) -> int:
    """41 位时间戳字段能表示的最后一毫秒

    超过该时间后生成的 ID 会溢出到符号位，生成器本身不做检查
    """
    return epoch + TIMESTAMP_MASK


def expiry_datetime(epoch: int = DEFAULT_EPOCH) -> datetime:
    return _millis_to_datetime(expiry_timestamp(epoch))


def _millis_to_datetime(millis: int) -> datetime:
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
