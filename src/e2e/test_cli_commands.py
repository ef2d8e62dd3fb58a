import json
import pytest
from wordswap import Engine, EditStatus
from wordswap.__main__ import main, run_command

def test_run_command_dispatch():
    eng = Engine("Meeting on Monday at 3pm")
    assert run_command(eng, ":select 4 tomorrow").status is EditStatus.APPLIED
    assert eng.text == "Meeting tomorrow at 3pm"
    assert run_command(eng, ":undo").status is EditStatus.UNDONE
    assert run_command(eng, ":redo").status is EditStatus.REDONE
    assert run_command(eng, ":delete 0").status is EditStatus.DELETED
    assert run_command(eng, "see you there").status is EditStatus.APPENDED
    assert eng.text == "tomorrow at 3pm see you there"
    assert run_command(eng, ":reset Hi") is None
    assert eng.text == "Hi"

def test_run_command_bad_index_is_target_not_found():
    eng = Engine("Hi there")
    assert run_command(eng, ":select x Bye").status is EditStatus.TARGET_NOT_FOUND
    assert run_command(eng, ":delete nope").status is EditStatus.TARGET_NOT_FOUND
    assert eng.text == "Hi there"

def test_main_repl_json(monkeypatch, capsys):
    lines = iter([":select 8 online", ""])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))
    assert main(["--text", "Meet me at the Studio", "--json"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    row = json.loads(out[-1])
    assert row["status"] == "applied"
    assert row["text"] == "Meet me online"
    assert row["view"]["cursor"] == 1

def test_main_reads_file(tmp_path, monkeypatch, capsys):
    f = tmp_path / "doc.txt"
    f.write_text("Lunch at noon\n", encoding="utf-8")
    monkeypatch.setattr("builtins.input", lambda _prompt="": "")
    assert main(["--file", str(f)]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "Lunch at noon"
