"""next 命令实现

按配置或命令行参数创建 IdWorker 并输出 ID，每行一个
"""

from typing import Optional

from anytool.core.config.config_manager import ConfigManager
from anytool.core.idgen import IdWorker


def _resolve_worker(worker_id: Optional[int], datacenter_id: Optional[int]) -> IdWorker:
    """命令行未指定节点 ID 时使用配置中的值"""
    manager = ConfigManager.get_instance()
    if worker_id is None and datacenter_id is None:
        return manager.get_id_worker()

    config = manager.get_config()
    return IdWorker(
        config.worker_id if worker_id is None else worker_id,
        config.datacenter_id if datacenter_id is None else datacenter_id,
    )


def next_command(args) -> None:
    """生成 ID 命令

    Args:
        args: argparse 参数对象，包含 count, worker_id, datacenter_id
    """
    worker = _resolve_worker(
        getattr(args, "worker_id", None), getattr(args, "datacenter_id", None)
    )
    for snowflake_id in worker.next_ids(getattr(args, "count", 1)):
        print(snowflake_id)
