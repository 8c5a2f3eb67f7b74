"""账本的只读汇总输出。"""

from __future__ import annotations

from typing import Iterable, List

from .models.ledger import Ledger


def format_report(ledger: Ledger, kanjis: Iterable[str] | None = None) -> List[str]:
    """按首次出现顺序列出每个汉字的次数和所在位置。"""

    lines = [
        f"{ledger.kanji_per_row} kanji per line, {ledger.rows_per_page} lines per page, "
        f"{ledger.current_id} lines used"
    ]
    selected = list(kanjis) if kanjis else sorted(ledger.items, key=lambda k: ledger.items[k].ids[0])
    for kanji in selected:
        entry = ledger.items.get(kanji)
        if entry is None:
            lines.append(f"- {kanji}: not found")
            continue
        places = "; ".join(str(ledger.position_of(slot_id)) for slot_id in entry.ids)
        lines.append(f"- {kanji}: {entry.occasions} occasions ({places})")
    return lines
