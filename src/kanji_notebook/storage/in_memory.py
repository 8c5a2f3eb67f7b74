"""内存级存储实现。"""

from __future__ import annotations

from typing import Any, Dict

from ..models.ledger import Ledger


class InMemoryStore:
    """只存一份载荷快照，load 时重新构造账本，与文件存储行为一致。"""

    def __init__(self) -> None:
        self.payload: Dict[str, Any] | None = None

    def load(self) -> Ledger | None:
        if self.payload is None:
            return None
        return Ledger.from_payload(self.payload)

    def save(self, ledger: Ledger) -> None:
        self.payload = ledger.to_payload()
