"""账本服务：加载、记录、落盘。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from ..config import NotebookConfig
from ..models.entry import KanjiEntry
from ..models.ledger import Ledger
from ..models.position import NotebookPosition
from ..storage import InMemoryStore, JsonStore, create_store
from .errors import LedgerNotLoadedError
from .text_utils import normalize_kanji, parse_positive_int


@dataclass
class RecordResult:
    """一次记录的结果。"""

    kanji: str
    found: bool
    occasion: int
    slot_id: int
    position: NotebookPosition
    # 本次新开的行（没有开新行则为 None）
    new_slot_id: int | None = None
    new_position: NotebookPosition | None = None

    def messages(self) -> List[str]:
        if not self.found:
            return [
                f"Kanji {self.kanji} not found",
                f"Putting kanji {self.kanji} on the id #{self.slot_id} ({self.position})",
            ]
        lines = [
            f"Found kanji {self.kanji} with id #{self.slot_id} ({self.position})",
            f"Writing occasion #{self.occasion} for the kanji {self.kanji}",
        ]
        if self.new_slot_id is not None:
            lines.append(
                f"No space left for the id #{self.slot_id}, "
                f"creating new id #{self.new_slot_id} ({self.new_position})"
            )
        return lines


class LedgerService:
    """单账本的读-改-写服务。

    open 之前处于未加载状态，成功 open 之后一直可用。
    """

    def __init__(
        self,
        config: NotebookConfig | None = None,
        store: InMemoryStore | JsonStore | None = None,
    ) -> None:
        self.config = config or NotebookConfig()
        self.store = store if store is not None else create_store(self.config)
        self._ledger: Ledger | None = None

    @property
    def ledger(self) -> Ledger:
        if self._ledger is None:
            raise LedgerNotLoadedError("ledger has not been opened")
        return self._ledger

    @property
    def is_active(self) -> bool:
        return self._ledger is not None

    def open(self, read_line: Callable[[str], str] = input) -> Ledger:
        """加载已有账本；文件不存在时询问笔记本规格并新建。"""

        ledger = self.store.load()
        if ledger is not None:
            print("Database loaded successfully")
            self._ledger = ledger
            return ledger
        print("Failed to load data, creating new database")
        kanji_per_row = parse_positive_int(
            read_line(self.config.prompt_kanji_per_row), "kanji_per_row"
        )
        rows_per_page = parse_positive_int(
            read_line(self.config.prompt_rows_per_page), "rows_per_page"
        )
        self._ledger = Ledger(kanji_per_row=kanji_per_row, rows_per_page=rows_per_page)
        self.persist()
        return self._ledger

    def record(self, kanji: str) -> RecordResult:
        """记录一次出现并立即落盘。"""

        kanji = normalize_kanji(kanji)
        ledger = self.ledger
        entry = ledger.items.get(kanji)
        if entry is None:
            slot_id = ledger.allocate_slot()
            ledger.items[kanji] = KanjiEntry.first(slot_id)
            result = RecordResult(
                kanji=kanji,
                found=False,
                occasion=1,
                slot_id=slot_id,
                position=ledger.position_of(slot_id),
            )
        else:
            slot_id = entry.current_slot
            entry.occasions += 1
            result = RecordResult(
                kanji=kanji,
                found=True,
                occasion=entry.occasions,
                slot_id=slot_id,
                position=ledger.position_of(slot_id),
            )
            if ledger.starts_new_row(entry.occasions):
                new_slot_id = ledger.allocate_slot()
                entry.ids.append(new_slot_id)
                result.new_slot_id = new_slot_id
                result.new_position = ledger.position_of(new_slot_id)
        for line in result.messages():
            print(line)
        self.persist()
        return result

    def persist(self) -> None:
        self.store.save(self.ledger)

    def lookup(self, kanji: str) -> KanjiEntry | None:
        return self.ledger.items.get(kanji)

    def positions(self, kanji: str) -> List[NotebookPosition]:
        entry = self.lookup(kanji)
        if entry is None:
            return []
        return [self.ledger.position_of(slot_id) for slot_id in entry.ids]
