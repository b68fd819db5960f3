"""配置模块

包含配置文件查找、加载与节点 ID 解析
"""

from anytool.core.config.config_manager import (
    ConfigManager,
    apply_env_overrides,
    find_config_files,
    get_id_worker,
    get_user_config_dir,
    load_config_from_file,
    parse_worker_config,
    resolve_workspace_dir,
)
from anytool.core.config.models import Config, ConfigMeta, LoggerSection, WorkerSection

__all__ = [
    "Config",
    "ConfigManager",
    "ConfigMeta",
    "LoggerSection",
    "WorkerSection",
    "apply_env_overrides",
    "find_config_files",
    "get_id_worker",
    "get_user_config_dir",
    "load_config_from_file",
    "parse_worker_config",
    "resolve_workspace_dir",
]
