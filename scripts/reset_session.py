#!/usr/bin/env python3
"""
会话重置脚本

查看或清除 session_file 中保存的 session id（session_backend=file 时，
相当于页面上的 "Start new session"）。browser 模式下会话保存在各浏览器的 URL 中，
不经过此文件。服务端的提交记录不受影响。

使用方法:
    python scripts/reset_session.py [--show] [--force]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# 添加项目根目录到路径
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from sectorform.app import create_session_store  # noqa: E402
from sectorform.config import load_settings  # noqa: E402
from sectorform.infra.exceptions import SectorFormException  # noqa: E402


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="查看或清除本地保存的表单会话",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
    python scripts/reset_session.py          # 交互式清除
    python scripts/reset_session.py --force  # 跳过确认直接清除
    python scripts/reset_session.py --show   # 仅显示当前会话
        """
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="跳过确认提示，直接清除"
    )
    parser.add_argument(
        "--show", "-s",
        action="store_true",
        help="仅显示当前会话，不执行清除"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="yaml 配置文件路径（默认 config/sectorform.yaml）"
    )

    args = parser.parse_args(argv)

    try:
        settings = load_settings(config_path=args.config)
        store = create_session_store(settings)
        session_id = store.get()
    except SectorFormException as e:
        print(f"❌ {e.message}")
        return 2

    print(f"会话文件: {store.path}")
    print(f"当前会话: {session_id if session_id is not None else '(无)'}")

    if args.show:
        return 0
    if session_id is None:
        print("没有需要清除的会话。")
        return 0

    if not args.force:
        response = input("确定要清除当前会话吗? [y/N]: ").strip().lower()
        if response not in ('y', 'yes'):
            print("已取消操作。")
            return 1

    try:
        store.clear()
    except SectorFormException as e:
        print(f"❌ {e.message}")
        return 2
    print("✅ 会话已清除")
    return 0


if __name__ == "__main__":
    sys.exit(main())
