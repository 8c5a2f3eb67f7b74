import json
import os
from pathlib import Path

import pytest

from kanji_notebook.cli import main
from kanji_notebook.config import NotebookConfig


def _lines(*answers):
    pending = list(answers)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    read_line.prompts = prompts
    return read_line


def _config(tmp_path: Path) -> NotebookConfig:
    return NotebookConfig(storage_path=str(tmp_path / "data.json"))


def test_first_run_creates_ledger_file(tmp_path: Path):
    read_line = _lines("4", "10")
    main(_config(tmp_path), read_line)
    payload = json.loads((tmp_path / "data.json").read_text(encoding="utf-8"))
    assert payload == {"items": {}, "current_id": 0, "kanji_per_row": 4, "rows_per_page": 10}
    assert read_line.prompts[:3] == [
        "Enter number of kanji that can fit in one line of your notebook: ",
        "Enter number of rows that can fit in one page of your notebook: ",
        "Enter kanji: ",
    ]


def test_session_records_and_rejects(tmp_path: Path, capsys):
    main(_config(tmp_path), _lines("3", "5", "漢", "AB", "", " 漢 ", "字"))
    out = capsys.readouterr().out
    assert out.count("Invalid input") == 2
    assert "Writing occasion #2 for the kanji 漢" in out
    payload = json.loads((tmp_path / "data.json").read_text(encoding="utf-8"))
    assert payload["items"] == {
        "漢": {"ids": [0], "occasions": 2},
        "字": {"ids": [1], "occasions": 1},
    }
    assert payload["current_id"] == 2


def test_state_survives_restart(tmp_path: Path, capsys):
    main(_config(tmp_path), _lines("2", "5", "日", "日"))
    main(_config(tmp_path), _lines("日"))
    out = capsys.readouterr().out
    assert "Database loaded successfully" in out
    assert "No space left for the id #0, creating new id #1 (page #1, line #2)" in out
    payload = json.loads((tmp_path / "data.json").read_text(encoding="utf-8"))
    assert payload["items"]["日"] == {"ids": [0, 1], "occasions": 3}


def test_non_numeric_layout_exits(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        main(_config(tmp_path), _lines("many"))
    assert "kanji_per_row" in str(excinfo.value)
    assert not (tmp_path / "data.json").exists()


def test_corrupted_ledger_exits_without_overwriting(tmp_path: Path):
    path = tmp_path / "data.json"
    path.write_text("{broken", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(_config(tmp_path), _lines("漢"))
    assert path.read_text(encoding="utf-8") == "{broken"


def test_input_ending_during_setup_exits(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(_config(tmp_path), _lines("3"))


def test_undecodable_input_is_invalid(tmp_path: Path, capsys):
    answers = ["3", "5", None, "\udcff", "漢"]

    def read_line(prompt):
        if not answers:
            raise EOFError
        answer = answers.pop(0)
        if answer is None:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        return answer

    main(_config(tmp_path), read_line)
    assert capsys.readouterr().out.count("Invalid input") == 2
    payload = json.loads((tmp_path / "data.json").read_text(encoding="utf-8"))
    assert payload["items"] == {"漢": {"ids": [0], "occasions": 1}}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["data.json"]


def test_write_failure_during_session_exits(tmp_path: Path, monkeypatch):
    main(_config(tmp_path), _lines("3", "5"))
    before = (tmp_path / "data.json").read_text(encoding="utf-8")

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", broken_replace)
    with pytest.raises(SystemExit) as excinfo:
        main(_config(tmp_path), _lines("漢"))
    assert "Critical error" in str(excinfo.value)
    assert (tmp_path / "data.json").read_text(encoding="utf-8") == before
