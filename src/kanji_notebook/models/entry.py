"""汉字条目模型。"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class KanjiEntry:
    """单个汉字的记录。

    说明：ids 只增不减，最后一个是“当前所在行”。
    """

    ids: List[int] = field(default_factory=list)
    occasions: int = 1

    @classmethod
    def first(cls, slot_id: int) -> "KanjiEntry":
        return cls(ids=[slot_id], occasions=1)

    @property
    def current_slot(self) -> int:
        return self.ids[-1]
