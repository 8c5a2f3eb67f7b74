"""笔记本坐标（页、行）。"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotebookPosition:
    """由行号推导出的位置，从 1 开始计数，不落盘。"""

    page: int
    row: int

    def __str__(self) -> str:
        return f"page #{self.page}, line #{self.row}"


def position(slot_id: int, rows_per_page: int) -> NotebookPosition:
    """把全局行号换算成（页、行）。"""

    if rows_per_page <= 0:
        raise ValueError(f"rows_per_page must be positive, got {rows_per_page}")
    if slot_id < 0:
        raise ValueError(f"slot_id must be non-negative, got {slot_id}")
    page, row = divmod(slot_id, rows_per_page)
    return NotebookPosition(page=page + 1, row=row + 1)
