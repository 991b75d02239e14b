"""Tests for the command line (cli/app.py, cli/operations.py, cli/catalog.py).

Every test calls ``main(argv)`` or ``cli()`` directly; stdout carries
results, stderr carries listings and diagnostics.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime

import pytest

from primkit.cli import exit_codes
from primkit.cli.app import cli, main, render_result
from primkit.cli.operations import all_operations, find_operation, normalize_name
from primkit.core.array import array_has
from primkit.core.math import add, subtract
from primkit.exceptions import InvalidArgumentError, UnknownOperationError


# ---------------------------------------------------------------------------
# Operation registry
# ---------------------------------------------------------------------------

class TestOperations:
    def test_names_are_dashed(self) -> None:
        for op in all_operations():
            assert "_" not in op.name
            assert op.name == normalize_name(op.name)

    def test_higher_order_helpers_are_left_out(self) -> None:
        names = {op.name for op in all_operations()}
        assert not names & {"array-to", "string-to", "number-to"}

    def test_covers_every_domain(self) -> None:
        domains = {op.domain for op in all_operations()}
        assert domains == {"array", "string", "number", "math"}

    def test_arithmetic_is_listed(self) -> None:
        funcs = {op.func for op in all_operations()}
        assert {add, subtract} <= funcs

    def test_families(self) -> None:
        families = {op.family for op in all_operations()}
        assert families == {"is", "has", "to", "math"}

    def test_names_are_unique(self) -> None:
        names = [op.name for op in all_operations()]
        assert len(names) == len(set(names))

    def test_summary_is_first_docstring_line(self) -> None:
        op = find_operation("array-has")
        assert op.summary
        assert "\n" not in op.summary


class TestFindOperation:
    @pytest.mark.parametrize("name", ["array-has", "array_has", "Array-Has", " array-has "])
    def test_name_forms(self, name: str) -> None:
        assert find_operation(name).func is array_has

    def test_unknown_in_known_domain(self) -> None:
        with pytest.raises(UnknownOperationError) as exc_info:
            find_operation("string-is-nope")
        hint = exc_info.value.hint or ""
        assert "string-is-email" in hint
        assert "primkit list" in hint

    def test_unknown_domain(self) -> None:
        with pytest.raises(UnknownOperationError) as exc_info:
            find_operation("bogus")
        assert "No such domain." in (exc_info.value.hint or "")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class TestRenderResult:
    @pytest.mark.parametrize(
        ("result", "expected"),
        [
            (True, "true"),
            (False, "false"),
            (None, "null"),
            ("text", "text"),
            (3.5, "3.5"),
            ([1, "a"], '[1, "a"]'),
            ({"k": "ü"}, '{"k": "ü"}'),
        ],
    )
    def test_values(self, result: object, expected: str) -> None:
        assert render_result(result) == expected

    def test_set(self) -> None:
        assert render_result({2}) == "[2]"

    def test_datetime(self) -> None:
        assert render_result(datetime(2024, 1, 15)) == '"2024-01-15T00:00:00"'


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestRunOperation:
    def test_text_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["string-is-email", "a@b.co"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "true"

    def test_json_value_and_arg(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "array-has", "[1, 2, 3]", "2"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "true"

    def test_text_arg_stays_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "array-has", '["a", 1]', "string"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "true"

    def test_regex_condition(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--regex", "string-has", "hello", "l+"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "true"

    def test_conversion_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["number-to-fixed", "3.14159", "3"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "3.142"

    def test_list_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["string-to-array", "a|b", "|"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == '["a", "b"]'

    def test_math(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "add", "2", "3"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "5"

    def test_value_without_json_flag_is_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["number-is", "3"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "false"


class TestQuietMode:
    def test_true_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--quiet", "--json", "number-is-odd", "-3"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == ""

    def test_false_result(self) -> None:
        assert main(["-q", "--json", "number-is-odd", "4"]) == exit_codes.FALSE_RESULT

    def test_null_result(self) -> None:
        assert main(["-q", "string-to-json", "null"]) == exit_codes.FALSE_RESULT

    def test_other_results_succeed(self) -> None:
        assert main(["-q", "number-to-int", "abc"]) == exit_codes.SUCCESS


class TestArgumentErrors:
    def test_missing_value(self) -> None:
        with pytest.raises(InvalidArgumentError, match="needs a VALUE"):
            main(["string-is-email"])

    def test_bad_json_value(self) -> None:
        with pytest.raises(InvalidArgumentError, match="not valid JSON") as exc_info:
            main(["--json", "array-is", "[1,"])
        assert exc_info.value.hint

    def test_bad_regex(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid regular expression"):
            main(["--regex", "string-has", "abc", "("])

    def test_too_many_arguments(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Wrong arguments") as exc_info:
            main(["string-is-email", "a@b.co", "extra"])
        assert "string-is-email(" in (exc_info.value.hint or "")

    def test_unknown_operation(self) -> None:
        with pytest.raises(UnknownOperationError):
            main(["string-is-nope", "x"])


class TestDiagnostics:
    def test_parser_failure_is_logged(
        self,
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        assert main(["string-to-boolean", "maybe"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "null"
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert messages == ["Invalid boolean string: 'maybe'"]

    def test_verbose_enables_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        main(["--verbose", "string-is", "x"])
        assert logging.getLogger("primkit").level == logging.DEBUG
        assert any("Running string-is" in r.getMessage() for r in caplog.records)

    def test_default_level_is_warning(self) -> None:
        main(["string-is", "x"])
        assert logging.getLogger("primkit").level == logging.WARNING


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

class TestList:
    def test_lists_operations_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["list"]) == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "string-is-email" in captured.err

    def test_list_is_case_insensitive(self) -> None:
        assert main(["LIST"]) == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "argv", ["primkit", "string-is", "x"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_known_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["primkit", "string-is-nope", "x"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Unknown operation" in err
        assert "Hint" in err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from primkit.cli import app as app_module

        def interrupted() -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", interrupted)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from primkit.cli import app as app_module

        def broken() -> int:
            raise RuntimeError("boom")

        monkeypatch.setattr(app_module, "main", broken)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
