"""decode 命令实现"""

import sys

from rich.console import Console
from rich.table import Table

from anytool.core.idgen import decode_id


def decode_command(args) -> None:
    """解析 ID 命令

    Args:
        args: argparse 参数对象，包含 ids
    """
    table = Table(title="ID 解析结果")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("时间戳(ms)", justify="right")
    table.add_column("时间(UTC)")
    table.add_column("数据中心", justify="right")
    table.add_column("机器", justify="right")
    table.add_column("序列", justify="right")

    for snowflake_id in args.ids:
        decoded = decode_id(snowflake_id)
        table.add_row(
            str(snowflake_id),
            str(decoded.timestamp),
            decoded.created_at.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3],
            str(decoded.datacenter_id),
            str(decoded.worker_id),
            str(decoded.sequence),
        )

    Console(file=sys.stdout).print(table)
