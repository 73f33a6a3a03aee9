import json
import logging
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from cringe import cringe_cli
from cringe.cringe_errors import LexError, ParseError


def test_render_ast() -> None:
    assert cringe_cli.render("1 + 2 * 3") == "(+ 1 (* 2 3))"


def test_render_tokens() -> None:
    out = cringe_cli.render('likho "hi" 2', mode="tokens")
    assert out.splitlines() == ["LIKHO likho", 'STRING "hi" hi', "NUMBER 2 2.0", "EOF"]


def test_render_tokens_does_not_parse() -> None:
    out = cringe_cli.render("rakho x = 1;", mode="tokens")
    assert out.splitlines()[0] == "RAKHO rakho"


def test_render_json() -> None:
    data = json.loads(cringe_cli.render("-khali", mode="json"))
    assert data == {
        "kind": "unary",
        "operator": "-",
        "line": 1,
        "right": {"kind": "literal", "type": "nil", "value": None},
    }


def test_render_unknown_mode() -> None:
    with pytest.raises(ValueError):
        cringe_cli.render("1", mode="xml")


def test_render_propagates_core_errors() -> None:
    with pytest.raises(LexError):
        cringe_cli.render("@")
    with pytest.raises(ParseError):
        cringe_cli.render("(1")


def test_run_cringe_string_input_prints(capsys: pytest.CaptureFixture[str]) -> None:
    cringe_cli.run_cringe("(1 + 2) / 3", is_string=True)
    assert capsys.readouterr().out.strip() == "(/ (group (+ 1 2)) 3)"


def test_run_cringe_file_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    file_path = tmp_path / "input.cringe"
    file_path.write_text("// comment\nsahi != ghalat\n", encoding="utf-8")
    cringe_cli.run_cringe(str(file_path))
    assert capsys.readouterr().out.strip() == "(!= sahi ghalat)"


def test_run_cringe_rejects_other_suffix() -> None:
    with pytest.raises(ValueError, match="Only .cringe files"):
        cringe_cli.run_cringe("program.txt")


def test_main_string_source(capsys: pytest.CaptureFixture[str]) -> None:
    assert cringe_cli.main(["-s", "1 - 2 - 3"]) == 0
    assert capsys.readouterr().out.strip() == "(- (- 1 2) 3)"


def test_main_tokens_mode(capsys: pytest.CaptureFixture[str]) -> None:
    assert cringe_cli.main(["-s", "1 +", "-m", "tokens"]) == 0
    assert capsys.readouterr().out.splitlines() == ["NUMBER 1 1.0", "PLUS +", "EOF"]


def test_main_lex_error_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cringe_cli.main(["-s", "1\n@"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: [line 2] Error:")


def test_main_parse_error_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cringe_cli.main(["-s", "(1 + 2"]) == 1
    assert "Expect ')' after expression." in capsys.readouterr().err


def test_main_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "nope.cringe"
    assert cringe_cli.main([str(missing)]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_bad_suffix_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc:
        cringe_cli.main(["script.py"])
    assert exc.value.code == 2


def test_main_without_source_starts_repl() -> None:
    with patch("cringe.cringe_repl.start_repl") as start:
        assert cringe_cli.main([]) == 0
    start.assert_called_once_with(mode="ast", verbose=False)


def test_main_repl_flag_passes_mode_and_verbose() -> None:
    with patch("cringe.cringe_repl.start_repl") as start:
        assert cringe_cli.main(["--repl", "-m", "json", "--verbose"]) == 0
    start.assert_called_once_with(mode="json", verbose=True)


def test_mode_from_environment(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("CRINGE_MODE", "tokens")
    assert cringe_cli.main(["-s", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["NUMBER 1 1.0", "EOF"]


def test_flag_overrides_environment(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("CRINGE_MODE", "tokens")
    assert cringe_cli.main(["-s", "1", "-m", "ast"]) == 0
    assert capsys.readouterr().out.strip() == "1"


def test_unknown_environment_mode_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRINGE_MODE", "yaml")
    assert cringe_cli.default_mode() == "ast"


def test_configure_logging_levels(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRINGE_LOG_LEVEL", "info")
    cringe_cli.configure_logging()
    assert logging.getLogger("cringe").level == logging.INFO

    cringe_cli.configure_logging(verbose=True)
    assert logging.getLogger("cringe").level == logging.DEBUG

    monkeypatch.setenv("CRINGE_LOG_LEVEL", "chatty")
    cringe_cli.configure_logging()
    assert logging.getLogger("cringe").level == logging.WARNING


def test_module_entrypoint(tmp_path: Path) -> None:
    src = tmp_path / "expr.cringe"
    src.write_text("1 + 2 * 3", encoding="utf-8")
    proc = subprocess.run(
        [sys.executable, "-m", "cringe.cringe_cli", str(src)],
        text=True,
        capture_output=True,
        timeout=30,
        cwd=Path(__file__).resolve().parents[1] / "src",
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "(+ 1 (* 2 3))"


def test_main_too_deep_grouping_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cringe_cli.main(["-s", "(" * 150 + "1" + ")" * 150]) == 1
    assert "Expression nests too deeply." in capsys.readouterr().err


def test_main_long_sum_prints(capsys: pytest.CaptureFixture[str]) -> None:
    assert cringe_cli.main(["-s", " + ".join(["1"] * 2000)]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("(+ " * 1999 + "1 1)")
    assert out.count(")") == 1999


def test_render_json_too_deep_is_value_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def too_deep(*args: object, **kwargs: object) -> str:
        raise RecursionError

    monkeypatch.setattr(json, "dumps", too_deep)
    with pytest.raises(ValueError, match="too deep to encode as JSON"):
        cringe_cli.render("1 + 2", mode="json")
    assert cringe_cli.main(["-s", "1 + 2", "-m", "json"]) == 1


def test_main_undecodable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "bad.cringe"
    src.write_bytes(b"\xff\xfe1 + 2")
    assert cringe_cli.main([str(src)]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRINGE_LOG_LEVEL", "error")
    assert cringe_cli.log_level() == logging.ERROR
    assert cringe_cli.log_level(verbose=True) == logging.DEBUG
    monkeypatch.setenv("CRINGE_LOG_LEVEL", "chatty")
    assert cringe_cli.log_level() == logging.WARNING
