"""账本模型与 JSON 载荷转换。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .entry import KanjiEntry
from .position import NotebookPosition, position

PAYLOAD_KEYS = ("items", "current_id", "kanji_per_row", "rows_per_page")


def _require_int(value: Any, name: str, minimum: int) -> int:
    # bool 是 int 的子类，这里显式排除
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass
class Ledger:
    """整个账本：所有条目、下一个行号，以及两项笔记本规格。

    kanji_per_row 与 rows_per_page 在创建时确定，之后不再修改。
    """

    kanji_per_row: int
    rows_per_page: int
    current_id: int = 0
    items: Dict[str, KanjiEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _require_int(self.kanji_per_row, "kanji_per_row", 1)
        _require_int(self.rows_per_page, "rows_per_page", 1)
        _require_int(self.current_id, "current_id", 0)

    def allocate_slot(self) -> int:
        slot_id = self.current_id
        self.current_id += 1
        return slot_id

    def starts_new_row(self, occasions: int) -> bool:
        """第 k+1、2k+1…… 次出现时开新行。

        k 为 1 时每次出现都开新行。
        """

        return (occasions - 1) % self.kanji_per_row == 0

    def position_of(self, slot_id: int) -> NotebookPosition:
        return position(slot_id, self.rows_per_page)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "items": {
                kanji: {"ids": list(entry.ids), "occasions": entry.occasions}
                for kanji, entry in self.items.items()
            },
            "current_id": self.current_id,
            "kanji_per_row": self.kanji_per_row,
            "rows_per_page": self.rows_per_page,
        }

    @classmethod
    def from_payload(cls, payload: Any) -> "Ledger":
        """从 JSON 载荷重建账本，结构不符时抛出 ValueError。"""

        if not isinstance(payload, dict):
            raise ValueError("ledger payload must be an object")
        missing = [key for key in PAYLOAD_KEYS if key not in payload]
        if missing:
            raise ValueError(f"ledger payload is missing keys: {', '.join(missing)}")
        ledger = cls(
            kanji_per_row=payload["kanji_per_row"],
            rows_per_page=payload["rows_per_page"],
            current_id=payload["current_id"],
        )
        raw_items = payload["items"]
        if not isinstance(raw_items, dict):
            raise ValueError("items must be an object")
        seen_ids = set()
        for kanji, raw_entry in raw_items.items():
            entry = cls._entry_from_payload(kanji, raw_entry, ledger.current_id)
            duplicates = seen_ids.intersection(entry.ids)
            if duplicates:
                raise ValueError(f"ids of {kanji} are already used: {sorted(duplicates)}")
            seen_ids.update(entry.ids)
            ledger.items[kanji] = entry
        return ledger

    @staticmethod
    def _entry_from_payload(kanji: str, raw_entry: Any, current_id: int) -> KanjiEntry:
        if len(kanji) != 1:
            raise ValueError(f"item key must be a single character, got {kanji!r}")
        if not isinstance(raw_entry, dict):
            raise ValueError(f"entry for {kanji} must be an object")
        raw_ids = raw_entry.get("ids")
        if not isinstance(raw_ids, list) or not raw_ids:
            raise ValueError(f"entry for {kanji} must have a non-empty ids list")
        ids = [_require_int(value, f"ids of {kanji}", 0) for value in raw_ids]
        if any(left >= right for left, right in zip(ids, ids[1:])):
            raise ValueError(f"ids of {kanji} must be strictly increasing")
        if ids[-1] >= current_id:
            raise ValueError(f"ids of {kanji} must be below current_id {current_id}")
        occasions = _require_int(raw_entry.get("occasions"), f"occasions of {kanji}", len(ids))
        return KanjiEntry(ids=ids, occasions=occasions)
