"""JSON 文件持久化存储实现。"""

from __future__ import annotations

import json
import os
import tempfile
import warnings
from pathlib import Path

from ..core.errors import StorageCorruptedError, StorageWriteError
from ..models.ledger import Ledger


class JsonStore:
    """把账本保存为一个可读的 JSON 文件。

    写入时先写同目录下的临时文件，再整体替换目标文件，
    中途崩溃也不会截断已有的账本。
    """

    def __init__(self, path: str | Path, indent: int = 2, ensure_ascii: bool = False) -> None:
        self.path = Path(path)
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Ledger | None:
        """读取账本；文件不存在返回 None，内容损坏直接报错，不回退到新账本。"""

        if not self.path.exists():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
            payload = json.loads(text)
            return Ledger.from_payload(payload)
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            # json.JSONDecodeError 也是 ValueError
            raise StorageCorruptedError(f"Reading error: {self.path}: {exc}") from exc

    def save(self, ledger: Ledger) -> None:
        text = json.dumps(ledger.to_payload(), ensure_ascii=self.ensure_ascii, indent=self.indent)
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except (OSError, ValueError) as exc:
            # UnicodeEncodeError 是 ValueError
            if tmp_name is not None:
                self._discard(tmp_name)
            raise StorageWriteError(f"Failed to save data: {self.path}: {exc}") from exc

    def _discard(self, tmp_name: str) -> None:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            return
        except OSError as exc:
            warnings.warn(
                f"无法删除临时文件 {tmp_name}：{exc}",
                RuntimeWarning,
            )
