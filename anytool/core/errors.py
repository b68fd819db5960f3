"""ID 生成相关错误定义"""

from typing import Optional


class IdGenError(Exception):
    """ID 生成基础错误类"""

    def __init__(self, message: str, details: str = ""):
        """初始化错误

        Args:
            message: 错误消息
            details: 错误详情
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """返回错误字符串"""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidWorkerArgumentError(IdGenError, ValueError):
    """构造参数非法

    worker_id 或 datacenter_id 超出 [0, max_value] 时抛出
    """

    def __init__(self, field: str, value: object, max_value: Optional[int] = None):
        """初始化参数错误

        Args:
            field: 越界的参数名
            value: 传入的值
            max_value: 允许的最大值，None 表示没有上限
        """
        self.field = field
        self.value = value
        self.max_value = max_value
        if max_value is None:
            message = f"{field} 取值无效"
        else:
            message = f"{field} 不能大于 {max_value} 或小于 0"
        super().__init__(message=message, details=f"当前值 {value!r}")


class ClockMovedBackwardsError(IdGenError):
    """系统时钟回拨

    当前时间小于上一次生成 ID 的时间时抛出，本次调用不修改任何状态
    """

    def __init__(self, last_timestamp: int, current_timestamp: int):
        """初始化时钟回拨错误

        Args:
            last_timestamp: 上次生成 ID 的时间戳（毫秒）
            current_timestamp: 本次读取到的时间戳（毫秒）
        """
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
        self.drift_ms = last_timestamp - current_timestamp
        super().__init__(
            message="系统时钟发生回拨",
            details=f"拒绝在 {self.drift_ms} 毫秒内生成 ID",
        )


class InvalidSnowflakeIdError(IdGenError, ValueError):
    """无法解析的 ID

    负数或超出 63 位的整数不是本生成器产生的 ID
    """

    def __init__(self, snowflake_id: object):
        self.snowflake_id = snowflake_id
        super().__init__(message="无效的 ID", details=f"{snowflake_id!r} 不在 [0, 2^63) 范围内")


class ConfigError(IdGenError):
    """配置错误

    当配置文件加载或校验失败时抛出
    """

    pass
