"""存储层。"""

from __future__ import annotations

from ..config import NotebookConfig
from .in_memory import InMemoryStore
from .json_store import JsonStore


def create_store(config: NotebookConfig) -> InMemoryStore | JsonStore:
    if config.storage_backend == "json":
        return JsonStore(
            config.storage_path,
            indent=config.json_indent,
            ensure_ascii=config.json_ensure_ascii,
        )
    return InMemoryStore()


__all__ = ["InMemoryStore", "JsonStore", "create_store"]
