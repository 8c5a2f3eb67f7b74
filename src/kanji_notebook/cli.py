"""交互式命令行入口。"""

from __future__ import annotations

from typing import Callable

from .config import NotebookConfig
from .core.errors import InvalidInputError, LedgerError
from .core.ledger_service import LedgerService


def run(service: LedgerService, read_line: Callable[[str], str] = input) -> None:
    """主循环：读一个字、记录、落盘，直到输入结束。"""

    while True:
        try:
            line = read_line(service.config.prompt_kanji)
        except EOFError:
            return
        except UnicodeDecodeError:
            print("Invalid input")
            continue
        try:
            service.record(line)
        except InvalidInputError:
            print("Invalid input")


def main(config: NotebookConfig | None = None, read_line: Callable[[str], str] = input) -> None:
    service = LedgerService(config)
    try:
        service.open(read_line)
        run(service, read_line)
    except KeyboardInterrupt:
        print()
    except EOFError:
        raise SystemExit("Critical error: input ended before the notebook was configured")
    except LedgerError as exc:
        raise SystemExit(f"Critical error: {exc}") from exc


if __name__ == "__main__":
    main()
