"""打印账本中汉字的次数与笔记本位置。"""

from __future__ import annotations

import argparse

from kanji_notebook.config import NotebookConfig
from kanji_notebook.core.errors import LedgerError
from kanji_notebook.report import format_report
from kanji_notebook.storage.json_store import JsonStore


def main() -> None:
    config = NotebookConfig()
    parser = argparse.ArgumentParser(description="查看汉字账本")
    parser.add_argument("kanji", nargs="*", help="只显示这些汉字（默认全部）")
    parser.add_argument("--path", default=config.storage_path, help="账本文件路径")
    args = parser.parse_args()

    try:
        ledger = JsonStore(args.path).load()
    except LedgerError as exc:
        raise SystemExit(f"Critical error: {exc}") from exc
    if ledger is None:
        raise SystemExit(f"账本不存在：{args.path}")

    kanjis = [char for text in args.kanji for char in text]
    for line in format_report(ledger, kanjis):
        print(line)


if __name__ == "__main__":
    main()
