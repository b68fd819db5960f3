"""配置管理模块

负责查找和加载配置文件，支持从项目目录或用户目录读取 worker_id / datacenter_id，
环境变量优先级最高
"""

import os
import threading
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from anytool.core.config.models import Config, ConfigMeta, WorkerSection
from anytool.core.constants import (
    ANYTOOL_DIR,
    CONFIG_FILE,
    ENV_DATACENTER_ID,
    ENV_WORKER_ID,
    WORKSPACE_SEARCH_MAX_DEPTH,
)
from anytool.core.errors import ConfigError
from anytool.core.idgen import IdWorker
from anytool.core.utils.logger import init_logger, logger


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """深度合并两个配置字典

    合并策略：
    - 字典：递归合并
    - 其他类型：override 覆盖 base

    Args:
        base: 基础配置字典，用户配置
        override: 覆盖配置字典，项目配置

    Returns:
        Dict[str, Any]: 合并后的配置字典
    """
    result = base.copy()

    for key, override_value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(override_value, dict):
            result[key] = _deep_merge(result[key], override_value)
        else:
            result[key] = override_value

    return result


def resolve_workspace_dir() -> Path:
    """解析工作区目录

    从当前目录向上查找含有 .anytool 目录的路径，最多向上查找 3 级，
    用户目录本身不算工作区。找不到时返回当前执行路径

    Returns:
        Path: 工作区目录路径
    """
    initial_cwd = Path.cwd().resolve()
    current_dir = initial_cwd
    user_home = Path.home().resolve()

    for _ in range(WORKSPACE_SEARCH_MAX_DEPTH):
        anytool_dir = current_dir / ANYTOOL_DIR
        if anytool_dir.is_dir() and current_dir != user_home:
            return current_dir
        if current_dir.parent == current_dir:
            break
        current_dir = current_dir.parent

    return initial_cwd


def get_user_config_dir() -> Path:
    """获取用户配置目录

    Returns:
        Path: 用户配置目录路径 (~/.anytool)
    """
    return Path.home() / ANYTOOL_DIR


def find_config_files() -> tuple[Optional[Path], Optional[Path], Path]:
    """查找配置文件

    Returns:
        tuple[Optional[Path], Optional[Path], Path]:
            (用户配置路径, 项目配置路径, 工作区目录)
    """
    user_config_path = get_user_config_dir() / CONFIG_FILE
    if not user_config_path.is_file():
        user_config_path = None

    workspace_dir = resolve_workspace_dir()
    project_config_path = workspace_dir / ANYTOOL_DIR / CONFIG_FILE
    if not project_config_path.is_file():
        project_config_path = None

    # 用户目录下运行时两者指向同一个文件
    if project_config_path is not None and project_config_path == user_config_path:
        project_config_path = None

    return user_config_path, project_config_path, workspace_dir


def load_config_from_file(config_path: Path) -> dict:
    """从 YAML 文件加载配置

    Args:
        config_path: 配置文件路径

    Returns:
        dict: 配置字典

    Raises:
        FileNotFoundError: 如果文件不存在
        ConfigError: 如果 YAML 解析失败或顶层不是映射
    """
    if not config_path.exists():
        raise FileNotFoundError(f"配置文件不存在: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"配置文件解析失败: {config_path}", str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(f"配置文件格式错误: {config_path}", "顶层必须是映射")
    return data


def _env_int(environ: Mapping[str, str], name: str) -> Optional[int]:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ConfigError(f"环境变量 {name} 必须是整数", f"当前值 {raw!r}") from e


def apply_env_overrides(
    config_data: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """用 ANYTOOL_WORKER_ID / ANYTOOL_DATACENTER_ID 覆盖配置

    Args:
        config_data: 配置字典，不会被修改
        environ: 环境变量，默认 os.environ

    Returns:
        Dict[str, Any]: 覆盖后的配置字典
    """
    environ = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}

    worker_id = _env_int(environ, ENV_WORKER_ID)
    if worker_id is not None:
        overrides["worker_id"] = worker_id
    datacenter_id = _env_int(environ, ENV_DATACENTER_ID)
    if datacenter_id is not None:
        overrides["datacenter_id"] = datacenter_id

    if not overrides:
        return config_data
    return _deep_merge(config_data, {"worker": overrides})


def parse_worker_config(config_data: dict) -> WorkerSection:
    """解析节点配置

    Args:
        config_data: 配置字典

    Returns:
        WorkerSection: 节点配置

    Raises:
        ConfigError: worker 段不是映射或取值越界
    """
    worker_section = config_data.get("worker") or {}
    if not isinstance(worker_section, dict):
        raise ConfigError("worker 配置必须是映射", f"当前值 {worker_section!r}")
    try:
        return WorkerSection(**worker_section)
    except ValidationError as e:
        raise ConfigError("worker 配置无效", str(e)) from e


class ConfigManager:
    """全局配置管理器单例

    懒加载配置，并持有进程内共享的 IdWorker
    """

    _instance: Optional["ConfigManager"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        """初始化配置管理器"""
        self.config: Optional[Config] = None
        self._initialized: bool = False
        self._id_worker: Optional[IdWorker] = None
        # load 与 get_id_worker 会嵌套加锁
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """获取单例实例

        Returns:
            ConfigManager: 单例实例
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def _load_config(self) -> Config:
        """内部方法：加载配置

        配置加载和合并逻辑：
        1. 先加载用户目录配置 (~/.anytool/config.yaml) 作为基础
        2. 再加载项目目录配置并与用户配置合并，项目配置优先
        3. 环境变量覆盖节点 ID
        4. 文件不可读时记录警告并跳过，取值越界则直接抛出

        Returns:
            Config: 配置对象

        Raises:
            ConfigError: 节点 ID 越界或环境变量不是整数
        """
        user_config_path, project_config_path, workspace_dir = find_config_files()

        config_data: Dict[str, Any] = {}
        config_file_path = None
        source = "default"

        if user_config_path:
            try:
                config_data = load_config_from_file(user_config_path)
                config_file_path = user_config_path
                source = "user"
            except (OSError, ConfigError) as e:
                logger.warning(f"加载用户配置文件失败: {e}")

        if project_config_path:
            try:
                project_config_data = load_config_from_file(project_config_path)
                config_data = _deep_merge(config_data, project_config_data)
                config_file_path = project_config_path
                source = "project"
            except (OSError, ConfigError) as e:
                logger.warning(f"加载项目配置文件失败: {e}，使用用户配置")

        config_data = apply_env_overrides(config_data)
        worker = parse_worker_config(config_data)

        try:
            return Config(
                worker=worker,
                logger=config_data.get("logger") or {},
                meta=ConfigMeta(
                    workspace_dir=workspace_dir,
                    config_file_path=config_file_path,
                    source=source,
                ),
            )
        except ValidationError as e:
            raise ConfigError("配置无效", str(e)) from e

    def _configure_logging(self, config: Config) -> None:
        if config.source == "default":
            return
        log_dir = Path(config.logger.dirpath).expanduser()
        if not log_dir.is_absolute():
            log_dir = config.workspace_dir / log_dir
        init_logger(
            level=config.logger.level,
            log_dir=log_dir,
            log_file=config.logger.filename,
            rotation=config.logger.rotation,
            retention=config.logger.retention,
            encoding=config.logger.encoding,
            force=True,
        )

    def _load_locked(self) -> Config:
        """在 _lock 内加载配置

        节点标识未变化时保留已有的 IdWorker，否则新实例会从 sequence=0 重新开始，
        在同一毫秒内返回重复的 ID
        """
        config = self._load_config()
        self._configure_logging(config)
        self.config = config
        self._initialized = True

        worker = self._id_worker
        if worker is not None and (worker.worker_id, worker.datacenter_id) != (
            config.worker_id,
            config.datacenter_id,
        ):
            logger.warning(
                f"节点标识已变化: ({worker.datacenter_id}, {worker.worker_id}) -> "
                f"({config.datacenter_id}, {config.worker_id})，重新创建 IdWorker"
            )
            self._id_worker = None
        return config

    def load(self) -> Config:
        """显式加载配置

        Returns:
            Config: 配置对象
        """
        with self._lock:
            config = self._load_locked()
        logger.info(
            f"配置加载完成，来源: {config.source}，"
            f"datacenter_id={config.datacenter_id}, worker_id={config.worker_id}"
        )
        return config

    def get_config(self) -> Config:
        """获取配置对象，如果未加载则自动加载

        Returns:
            Config: 配置对象
        """
        with self._lock:
            if not self._initialized or self.config is None:
                self.load()
            return self.config

    def get_id_worker(self) -> IdWorker:
        """获取进程内共享的 IdWorker，首次调用时按配置创建

        Returns:
            IdWorker: 共享的生成器实例
        """
        with self._lock:
            config = self.get_config()
            if self._id_worker is None:
                self._id_worker = IdWorker(config.worker_id, config.datacenter_id)
            return self._id_worker


def get_id_worker() -> IdWorker:
    """获取全局 IdWorker"""
    return ConfigManager.get_instance().get_id_worker()
