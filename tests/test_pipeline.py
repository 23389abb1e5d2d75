"""
End-to-end tests for aqa.run: source text in, Value or stage-tagged error out.

Author: xwest
"""

import logging
import os
import sys

import pytest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import aqa
from aqa import (
    AqaError, ErrorStage, Value,
    ScannerError, ScannerErrorKind, ParseError, ParseErrorKind,
    InterpreterError, InterpreterErrorKind, Token,
)


class TestRun:

    @pytest.mark.parametrize("source,expected", [
        ("0", 0),
        ("7", 7),
        ("  42  ", 42),
        ("\t1000\t", 1000),
        ("9223372036854775807", 2 ** 63 - 1),
    ])
    def test_integer_literal(self, source, expected):
        assert aqa.run(source) == Value.integer(expected)

    def test_expression(self):
        assert aqa.run("(1+2)*3") == Value.integer(9)

    def test_text_concatenation(self):
        assert aqa.run("'Hello, ' + 'world'") == Value.text("Hello, world")

    def test_boolean_result(self):
        assert aqa.run("NOT (2.5 * 2.0 = 5.0)") == Value.boolean(False)

    @pytest.mark.parametrize("source,error_class,stage,kind", [
        ("'abc", ScannerError, ErrorStage.SCANNER, ScannerErrorKind.UNEXPECTED_EOF),
        ("3 ? 4", ScannerError, ErrorStage.SCANNER, ScannerErrorKind.UNEXPECTED_CHAR),
        ("(1+2", ParseError, ErrorStage.PARSER, ParseErrorKind.EXPECTED_RIGHT_PAREN),
        ("", ParseError, ErrorStage.PARSER, ParseErrorKind.UNEXPECTED_TOKEN),
        ("1 + 'a'", InterpreterError, ErrorStage.INTERPRETER, InterpreterErrorKind.MISMATCHED_TYPE),
        ("2 > 3.5", InterpreterError, ErrorStage.INTERPRETER, InterpreterErrorKind.MISMATCHED_TYPE),
    ])
    def test_errors_are_stage_tagged(self, source, error_class, stage, kind):
        with pytest.raises(AqaError) as excinfo:
            aqa.run(source)

        assert isinstance(excinfo.value, error_class)
        assert excinfo.value.stage == stage
        assert excinfo.value.kind == kind

    def test_scanner_error_stops_before_parsing(self):
        # The unterminated literal is reported even though the parse would fail first
        with pytest.raises(ScannerError) as excinfo:
            aqa.run(") 'abc")

        assert excinfo.value.position == aqa.Position(1, 3)

    def test_error_display(self):
        with pytest.raises(AqaError) as excinfo:
            aqa.run("'abc")

        assert str(excinfo.value) == "at line 1, column 1: Unexpected EOF"

    def test_diagnostic_render(self):
        with pytest.raises(AqaError) as excinfo:
            aqa.run("(1+2")

        rendered = excinfo.value.diagnostic.render()
        assert rendered.startswith("error[P002]: at line 1, column 5: Expected Right Parenthesis")
        assert "help: Add a closing parenthesis ')'." in rendered

    def test_stages_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="aqa"):
            aqa.run("1 + 2", filename="sum.txt")

        messages = [record.getMessage() for record in caplog.records]
        assert any("tokens" in message and "ADD" in message for message in messages)
        assert any("tree (+ 1 2)" in message for message in messages)
        assert any("value Integer(3)" in message for message in messages)

    def test_long_sum_with_trace(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="aqa"):
            assert aqa.run(" + ".join(["1"] * 5000)) == Value.integer(5000)

        assert any("value Integer(5000)" in record.getMessage() for record in caplog.records)

    def test_deep_nesting_is_a_parse_error(self):
        with pytest.raises(AqaError) as excinfo:
            aqa.run("(" * 500 + "1" + ")" * 500)

        assert excinfo.value.stage == ErrorStage.PARSER
        assert excinfo.value.kind == ParseErrorKind.NESTING_TOO_DEEP

    def test_token_trace_is_skipped_without_debug(self, caplog, monkeypatch):
        def fail(token):
            raise AssertionError("token rendered without DEBUG logging")

        monkeypatch.setattr(Token, "__str__", fail)
        with caplog.at_level(logging.WARNING, logger="aqa"):
            assert aqa.run("1 + 2") == Value.integer(3)

    def test_run_file(self, tmp_path):
        path = tmp_path / "program.txt"
        path.write_text("'x' + 'y'\n", encoding="utf-8")

        assert aqa.run_file(str(path)) == Value.text("xy")
