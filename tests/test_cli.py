import pytest

from codejudge import cli
from codejudge.features.execution.schemas import ExecutionResult


class _StubClient:
    def __init__(self, result):
        self.result = result
        self.calls = []

    async def execute_code(self, language, code):
        self.calls.append((language, code))
        return self.result


def test_cli_prints_output_and_exits_zero(tmp_path, monkeypatch, capsys):
    source = tmp_path / "main.py"
    source.write_text("print(5)", encoding="utf-8")
    stub = _StubClient(ExecutionResult(success=True, output="5"))
    monkeypatch.setattr(cli, "Judge0Client", lambda settings: stub)

    code = cli.main([str(source), "--language", "python"])

    assert code == 0
    assert stub.calls == [("python", "print(5)")]
    assert capsys.readouterr().out.strip() == "5"


def test_cli_reports_error_and_exits_one(tmp_path, monkeypatch, capsys):
    source = tmp_path / "Main.java"
    source.write_text("class Main {", encoding="utf-8")
    stub = _StubClient(ExecutionResult(success=False, output="", error="Compilation error"))
    monkeypatch.setattr(cli, "Judge0Client", lambda settings: stub)

    code = cli.main([str(source), "--language", "java"])

    assert code == 1
    assert "Compilation error" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    code = cli.main([str(tmp_path / "nope.py")])
    assert code == 1
    assert "Cannot read" in capsys.readouterr().err


def test_cli_rejects_unknown_language(tmp_path):
    with pytest.raises(SystemExit):
        cli.main([str(tmp_path / "x.rb"), "--language", "ruby"])
