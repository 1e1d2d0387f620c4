import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from simplelang import simplelang_cli
from simplelang.simplelang_lexer import Token

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
VALID_SOURCE = "int x;\nx = 1 + 2;"
INVALID_SOURCE = "int x;\nx 1;"


def test_run_simplelang_string_input_prints_ok(
    capsys: pytest.CaptureFixture[str],
) -> None:
    result = simplelang_cli.run_simplelang(source=VALID_SOURCE, is_string=True)
    assert result.ok
    assert capsys.readouterr().out.strip() == "OK"


def test_run_simplelang_reports_error_on_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    result = simplelang_cli.run_simplelang(source=INVALID_SOURCE, is_string=True)
    assert not result.ok
    captured = capsys.readouterr()
    assert captured.out == ""
    assert (
        captured.err.strip() == "Syntax Error at line 2: Expected '=' in assignment"
    )


def test_run_simplelang_file_input(tmp_path: Path) -> None:
    file_path = tmp_path / "input.sl"
    file_path.write_text(VALID_SOURCE)
    assert simplelang_cli.run_simplelang(source=str(file_path)).ok


def test_run_simplelang_rejects_other_extensions(tmp_path: Path) -> None:
    file_path = tmp_path / "input.txt"
    file_path.write_text(VALID_SOURCE)
    with pytest.raises(ValueError, match="Only .sl files"):
        simplelang_cli.run_simplelang(source=str(file_path))


def test_run_simplelang_requires_input() -> None:
    with pytest.raises(ValueError, match="No source"):
        simplelang_cli.run_simplelang()


def test_run_simplelang_strict_options() -> None:
    source = "if (a) { x = ; ;"
    assert (
        simplelang_cli.run_simplelang(source=source, is_string=True).message
        == "Invalid statement"
    )
    assert (
        simplelang_cli.run_simplelang(
            source=source, is_string=True, strict_operands=True
        ).message
        == "Expected operand in expression"
    )
    assert (
        simplelang_cli.run_simplelang(
            source="if (a) {", is_string=True, strict_blocks=True
        ).message
        == "Expected '}'"
    )


def test_load_tokens_pairs_and_objects(tmp_path: Path) -> None:
    path = tmp_path / "tokens.json"
    path.write_text(
        json.dumps([["int", 1], {"kind": "IDENT", "line": 1}, ["SEMICOLON", 1]])
    )
    assert simplelang_cli.load_tokens(str(path)) == [
        Token("INT", 1),
        Token("IDENT", 1),
        Token("SEMICOLON", 1),
    ]


@pytest.mark.parametrize(
    "payload,match",
    [
        ({"kind": "INT"}, "JSON list"),
        ([["INT"]], "must be"),
        ([["INT", "one"]], "invalid kind or line"),
        ([["INT", True]], "invalid kind or line"),
        ([["WHILE", 1]], "Unknown token kind"),
        ([["INT", 0]], "lines start at 1"),
        ([["INT", -3]], "lines start at 1"),
        ([{"kind": "INT"}], "invalid kind or line"),
    ],
)
def test_load_tokens_rejects_bad_files(
    tmp_path: Path, payload: object, match: str
) -> None:
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps(payload))
    with pytest.raises(ValueError, match=match):
        simplelang_cli.load_tokens(str(path))


def test_run_simplelang_token_file(tmp_path: Path) -> None:
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps([["INT", 1], ["SEMICOLON", 1], ["EOF", 2]]))
    result = simplelang_cli.run_simplelang(tokens_file=str(path))
    assert (result.message, result.line) == ("Expected identifier in declaration", 1)


def run_main(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["simplelang", *argv])
    with pytest.raises(SystemExit) as e:
        simplelang_cli.main()
    return int(e.value.code or 0)


def test_main_exit_codes(monkeypatch: pytest.MonkeyPatch) -> None:
    assert run_main(monkeypatch, "-s", VALID_SOURCE) == 0
    assert run_main(monkeypatch, "-s", INVALID_SOURCE) == 1


def test_main_rejects_deep_nesting(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    source = "if (a) { " * 1000 + " }" * 1000
    assert run_main(monkeypatch, "-s", source) == 1
    assert "Nesting too deep" in capsys.readouterr().err


def test_main_without_input_is_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    assert run_main(monkeypatch) == 2


def test_main_reports_lexer_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert run_main(monkeypatch, "-s", "x = 1 @ 2;") == 1
    assert "Unexpected character '@'" in capsys.readouterr().err


def test_main_reports_missing_file(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert run_main(monkeypatch, "missing.sl") == 1
    assert "simplelang: error:" in capsys.readouterr().err


def test_main_passes_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_run(**kwargs: object) -> object:
        seen.update(kwargs)
        return type("R", (), {"ok": True})()

    monkeypatch.setattr(simplelang_cli, "run_simplelang", fake_run)
    code = run_main(
        monkeypatch, "-j", "t.json", "--strict-blocks", "--strict-operands", "--verbose"
    )
    assert code == 0
    assert seen == {
        "source": None,
        "is_string": False,
        "tokens_file": "t.json",
        "strict_blocks": True,
        "strict_operands": True,
    }


def test_cli_subprocess(tmp_path: Path) -> None:
    file_path = tmp_path / "prog.sl"
    file_path.write_text("for (int i; i < 3; i = i + 1;) {\n  x = i;\n}\n")
    proc = subprocess.run(
        [sys.executable, "-m", "simplelang.simplelang_cli", str(file_path)],
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(SRC_DIR)},
    )
    assert proc.returncode == 0
    assert proc.stdout.strip() == "OK"


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])  # type: ignore[misc]
@given(st.text(alphabet="intboolfx =+-<>&|;(){}\n0123456789", max_size=60))  # type: ignore[misc]
def test_run_simplelang_random_input_does_not_crash(source: str) -> None:
    try:
        simplelang_cli.run_simplelang(source=source, is_string=True)
    except SyntaxError as e:
        assert "Unexpected character" in str(e)
