"""init 命令实现

初始化 .anytool/config.yaml 配置文件
"""

import sys

import yaml

from anytool.core.config.config_manager import find_config_files
from anytool.core.constants import (
    ANYTOOL_DIR,
    CONFIG_FILE,
    DEFAULT_DATACENTER_ID,
    DEFAULT_WORKER_ID,
    LOG_DIR,
    LOG_ENCODING,
    LOG_FILE,
    LOG_LEVEL,
    LOG_RETENTION,
    LOG_ROTATION,
)


def init_command(args) -> None:
    """初始化配置文件命令

    Args:
        args: argparse 参数对象
    """
    _, project_config, workspace_dir = find_config_files()

    if project_config and project_config.exists():
        print(f"错误: 配置文件已存在: {project_config}", file=sys.stderr)
        print("如果确实要重新初始化，请先删除现有配置文件", file=sys.stderr)
        sys.exit(1)

    anytool_dir = workspace_dir / ANYTOOL_DIR
    anytool_dir.mkdir(exist_ok=True)

    default_config = {
        "worker": {
            "worker_id": DEFAULT_WORKER_ID,
            "datacenter_id": DEFAULT_DATACENTER_ID,
        },
        "logger": {
            "dirpath": f"{ANYTOOL_DIR}/{LOG_DIR}",
            "filename": LOG_FILE,
            "level": LOG_LEVEL,
            "rotation": LOG_ROTATION,
            "retention": LOG_RETENTION,
            "encoding": LOG_ENCODING,
        },
    }

    config_file = anytool_dir / CONFIG_FILE
    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(default_config, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    print(f"配置文件已创建: {config_file}")
    print("请为每个节点设置不同的 worker_id / datacenter_id")
