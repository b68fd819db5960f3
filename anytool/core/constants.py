"""项目常量定义

统一管理 ID 位布局、纪元以及默认配置值
"""

# ============================================================================
# 路径和文件名常量
# ============================================================================

# 工作区目录名
ANYTOOL_DIR = ".anytool"

# 配置文件
CONFIG_FILE = "config.yaml"

# 日志目录
LOG_DIR = "logs"

# ============================================================================
# 日志配置常量
# ============================================================================

LOG_LEVEL = "INFO"
LOG_FILE = "anytool.log"
LOG_ROTATION = "10 MB"
LOG_RETENTION = "14 days"
LOG_COMPRESSION = "tar.gz"
LOG_ENCODING = "utf-8"

# 日志格式
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "{thread.name}:{thread.id} | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# ============================================================================
# ID 位布局常量
#
# 0 - 41 位时间戳差值 - 5 位数据中心 ID - 5 位机器 ID - 12 位序列号
# ============================================================================

# 起始纪元（毫秒），生成的 ID 中存储的是 当前时间 - 纪元
DEFAULT_EPOCH = 1546272000

# 各字段所占位数
SEQUENCE_BITS = 12
WORKER_ID_BITS = 5
DATACENTER_ID_BITS = 5
TIMESTAMP_BITS = 41

# 掩码，同时也是各字段允许的最大值
SEQUENCE_MASK = -1 ^ (-1 << SEQUENCE_BITS)  # 4095
MAX_WORKER_ID = -1 ^ (-1 << WORKER_ID_BITS)  # 31
MAX_DATACENTER_ID = -1 ^ (-1 << DATACENTER_ID_BITS)  # 31
TIMESTAMP_MASK = -1 ^ (-1 << TIMESTAMP_BITS)

# 左移位数
WORKER_ID_SHIFT = SEQUENCE_BITS  # 12
DATACENTER_ID_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS  # 17
TIMESTAMP_LEFT_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS + DATACENTER_ID_BITS  # 22

# 返回值必须落在有符号 64 位正数范围内
MAX_ID = (1 << 63) - 1

# ============================================================================
# 配置管理常量
# ============================================================================

WORKSPACE_SEARCH_MAX_DEPTH = 3

DEFAULT_WORKER_ID = 0
DEFAULT_DATACENTER_ID = 0

# 环境变量覆盖
ENV_WORKER_ID = "ANYTOOL_WORKER_ID"
ENV_DATACENTER_ID = "ANYTOOL_DATACENTER_ID"
