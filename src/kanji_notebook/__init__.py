"""Kanji Notebook：记录每个汉字出现次数及其在纸质笔记本中的位置。"""

from .config import NotebookConfig
from .core.errors import (
    ConfigurationError,
    InvalidInputError,
    LedgerError,
    LedgerNotLoadedError,
    StorageCorruptedError,
    StorageWriteError,
)
from .core.ledger_service import LedgerService, RecordResult
from .models.entry import KanjiEntry
from .models.ledger import Ledger
from .models.position import NotebookPosition, position

__all__ = [
    "ConfigurationError",
    "InvalidInputError",
    "KanjiEntry",
    "Ledger",
    "LedgerError",
    "LedgerNotLoadedError",
    "LedgerService",
    "NotebookConfig",
    "NotebookPosition",
    "RecordResult",
    "StorageCorruptedError",
    "StorageWriteError",
    "position",
]
