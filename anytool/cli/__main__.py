"""CLI 包入口点

使 anytool.cli 可以作为模块运行：
    python -m anytool.cli next -n 10
    python -m anytool.cli decode 7519377937485168640
    python -m anytool.cli init
"""

import argparse
import sys
from typing import List, Optional

from anytool.cli.commands.decode import decode_command
from anytool.cli.commands.init import init_command
from anytool.cli.commands.next import next_command
from anytool.core.constants import MAX_DATACENTER_ID, MAX_WORKER_ID


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"必须是正整数: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """构建命令行解析器"""
    parser = argparse.ArgumentParser(
        prog="anytool",
        description="Anytool CLI，Snowflake 风格的分布式 ID 生成器",
    )

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    # next 命令
    next_parser = subparsers.add_parser("next", help="生成 ID")
    next_parser.add_argument(
        "-n", "--count",
        type=_positive_int,
        default=1,
        help="生成数量，默认为 1",
    )
    next_parser.add_argument(
        "--worker-id",
        type=int,
        help=f"机器 ID (0~{MAX_WORKER_ID})，默认读取配置",
    )
    next_parser.add_argument(
        "--datacenter-id",
        type=int,
        help=f"数据中心 ID (0~{MAX_DATACENTER_ID})，默认读取配置",
    )
    next_parser.set_defaults(func=next_command)

    # decode 命令
    decode_parser = subparsers.add_parser("decode", help="解析 ID")
    decode_parser.add_argument("ids", nargs="+", type=int, metavar="id", help="待解析的 ID")
    decode_parser.set_defaults(func=decode_command)

    # init 命令
    init_parser = subparsers.add_parser("init", help="初始化配置文件")
    init_parser.set_defaults(func=init_command)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """主入口函数，解析命令行参数并执行相应命令"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except Exception as e:
        print(f"错误: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
