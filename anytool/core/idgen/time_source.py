import time
from abc import ABC, abstractmethod


class TimeSource(ABC):
    """时间源抽象接口

    提供以毫秒为单位的当前墙上时间，IdWorker 只通过该接口读取时钟，
    测试中可以替换为脚本化的时钟来覆盖同毫秒、跨毫秒、序列耗尽和时钟回拨等场景

    实现必须线程安全，且不能阻塞
    """

    @abstractmethod
    def now_millis(self) -> int:
        """返回自 Unix 纪元以来的毫秒数"""
        pass


class SystemTimeSource(TimeSource):
    """读取系统时钟的默认时间源"""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemTimeSource()"
