"""IdWorker 实现

单节点的 ID 生成状态机：读取时间源、处理同毫秒序列递增与溢出、检测时钟回拨，
并在同一把锁内完成共享状态的修改
"""

import threading
from typing import List, Optional

from anytool.core.constants import (
    DEFAULT_EPOCH,
    MAX_DATACENTER_ID,
    MAX_WORKER_ID,
    SEQUENCE_MASK,
)
from anytool.core.errors import ClockMovedBackwardsError, InvalidWorkerArgumentError
from anytool.core.idgen.layout import SnowflakeId, compose_id, decode_id
from anytool.core.idgen.time_source import SystemTimeSource, TimeSource
from anytool.core.utils.logger import logger


def _validate_node_id(field: str, value: int, max_value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidWorkerArgumentError(field, value, max_value)
    if value < 0 or value > max_value:
        raise InvalidWorkerArgumentError(field, value, max_value)
    return value


def _validate_epoch(epoch: int) -> int:
    if isinstance(epoch, bool) or not isinstance(epoch, int) or epoch < 0:
        raise InvalidWorkerArgumentError("epoch", epoch)
    return epoch


class IdWorker:
    """分布式 ID 生成器

    每个实例绑定一个 (datacenter_id, worker_id)，同一实例上并发调用 next_id 是线程安全的，
    返回的 ID 严格递增。两个实例只要节点标识不同，生成的 ID 集合就不相交
    """

    def __init__(
        self,
        worker_id: int,
        datacenter_id: int,
        *,
        time_source: Optional[TimeSource] = None,
        epoch: int = DEFAULT_EPOCH,
    ):
        """初始化生成器

        Args:
            worker_id: 机器 ID，范围 [0, 31]
            datacenter_id: 数据中心 ID，范围 [0, 31]
            time_source: 时间源，None 则读取系统时钟
            epoch: 起始纪元（毫秒），仅供测试覆盖

        Raises:
            InvalidWorkerArgumentError: worker_id 或 datacenter_id 越界，或 epoch 不是非负整数
        """
        self._worker_id = _validate_node_id("worker_id", worker_id, MAX_WORKER_ID)
        self._datacenter_id = _validate_node_id(
            "datacenter_id", datacenter_id, MAX_DATACENTER_ID
        )
        self._epoch = _validate_epoch(epoch)
        self._time_source = time_source if time_source is not None else SystemTimeSource()

        # 以下两个字段只在 _lock 内修改
        self._sequence = 0
        self._last_timestamp = -1
        self._lock = threading.Lock()

        logger.info(
            f"IdWorker 已创建: datacenter_id={self._datacenter_id}, "
            f"worker_id={self._worker_id}, epoch={self._epoch}"
        )

    @property
    def worker_id(self) -> int:
        return self._worker_id

    @property
    def datacenter_id(self) -> int:
        return self._datacenter_id

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def time_source(self) -> TimeSource:
        return self._time_source

    def next_id(self) -> int:
        """获得下一个 ID

        Returns:
            int: 64 位正整数 ID

        Raises:
            ClockMovedBackwardsError: 当前时间小于上次生成 ID 的时间，状态不变
        """
        with self._lock:
            timestamp = self._time_source.now_millis()

            if timestamp < self._last_timestamp:
                error = ClockMovedBackwardsError(self._last_timestamp, timestamp)
                logger.warning(f"{error}，上次时间戳 {self._last_timestamp}，当前 {timestamp}")
                raise error

            if timestamp == self._last_timestamp:
                sequence = (self._sequence + 1) & SEQUENCE_MASK
                if sequence == 0:
                    # 毫秒内序列溢出，阻塞到下一个毫秒
                    logger.debug(f"毫秒 {timestamp} 内序列已耗尽，等待下一毫秒")
                    timestamp = self._til_next_millis(self._last_timestamp)
            else:
                sequence = 0

            self._sequence = sequence
            self._last_timestamp = timestamp
            return compose_id(
                timestamp - self._epoch, self._datacenter_id, self._worker_id, sequence
            )

    def next_ids(self, count: int) -> List[int]:
        """连续生成 count 个 ID"""
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidWorkerArgumentError("count", count)
        return [self.next_id() for _ in range(count)]

    def decode(self, snowflake_id: int) -> SnowflakeId:
        """按本实例的纪元解析 ID"""
        return decode_id(snowflake_id, self._epoch)

    def _til_next_millis(self, last_timestamp: int) -> int:
        """自旋直到时间源返回大于 last_timestamp 的时间戳"""
        timestamp = self._time_source.now_millis()
        while timestamp <= last_timestamp:
            timestamp = self._time_source.now_millis()
        return timestamp

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdWorker):
            return NotImplemented
        return (
            self._worker_id == other._worker_id
            and self._datacenter_id == other._datacenter_id
        )

    def __hash__(self) -> int:
        return hash((self._worker_id, self._datacenter_id))

    def __repr__(self) -> str:
        return (
            f"IdWorker(worker_id={self._worker_id}, "
            f"datacenter_id={self._datacenter_id})"
        )
