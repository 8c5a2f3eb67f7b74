"""全局配置与默认参数。"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class NotebookConfig:
    """程序可调参数集合。

    注意：每行汉字数与每页行数不在这里，它们属于账本本身，创建后不可修改。
    """

    # 存储后端：json 或 memory
    storage_backend: str = "json"
    # 账本文件路径（相对当前工作目录的 data.json）
    storage_path: str = field(default_factory=lambda: str(Path("data.json")))
    # JSON 缩进，保证文件可读
    json_indent: int = 2
    # 汉字原样写入，而不是 \uXXXX 转义
    json_ensure_ascii: bool = False
    # 首次运行时的提问文字
    prompt_kanji_per_row: str = "Enter number of kanji that can fit in one line of your notebook: "
    prompt_rows_per_page: str = "Enter number of rows that can fit in one page of your notebook: "
    # 主循环提示
    prompt_kanji: str = "Enter kanji: "
