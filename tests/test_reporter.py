"""Tests for diagnostic collection and display."""

import io

from pylox.report import TextSpan
from pylox.report.reporter import (
    CompileError,
    Diagnostic,
    LogLevel,
    LoxRuntimeError,
    Reporter,
    Severity,
)


def make_reporter(level: LogLevel = LogLevel.ERROR) -> tuple[Reporter, io.StringIO]:
    stream = io.StringIO()
    return Reporter(level, stream), stream


def test_fresh_reporter_has_no_errors():
    reporter, _ = make_reporter()

    assert not reporter.had_error
    assert reporter.diagnostics == []
    assert reporter.return_code == 0


def test_compile_diagnostic_format():
    reporter, stream = make_reporter()

    reporter.report(3, "Unexpected character: $")
    reporter.report_with_context(4, "Expected expression.", " at end")
    reporter.report_with_context(5, "Expected expression.", " at '+'")
    reporter.print_diagnostics()

    assert stream.getvalue().splitlines() == [
        "[line 3] Error: Unexpected character: $",
        "[line 4] Error at end: Expected expression.",
        "[line 5] Error at '+': Expected expression.",
    ]
    assert reporter.had_error
    assert reporter.return_code == 65


def test_compile_error_uses_end_line():
    reporter, _ = make_reporter()

    reporter.report_compile_error(CompileError("Unterminated string.", TextSpan(1, 1, 3, 4)))
    reporter.report_compile_error(CompileError("Expected expression.", TextSpan(2, 1, 2, 2), " at ')'"))

    assert reporter.diagnostics == [
        Diagnostic(3, "Unterminated string."),
        Diagnostic(2, "Expected expression.", " at ')'"),
    ]


def test_runtime_diagnostic_format():
    reporter, stream = make_reporter()

    reporter.report_runtime_error(LoxRuntimeError("Operands must be numbers.", TextSpan(2, 3, 2, 4)))
    reporter.print_diagnostics()

    assert stream.getvalue() == "Operands must be numbers.\n[line 2]\n"
    assert reporter.diagnostics[0].severity == Severity.RUNTIME
    assert reporter.return_code == 70


def test_runtime_error_outranks_compile_error():
    reporter, _ = make_reporter()

    reporter.report(1, "Unexpected character: @")
    reporter.report_runtime_error(LoxRuntimeError("Operand must be a number.", TextSpan(1, 1, 1, 2)))

    assert reporter.return_code == 70


def test_fatal_error_prints_immediately():
    reporter, stream = make_reporter()

    try:
        raise ValueError("boom")
    except ValueError as e:
        reporter.report_fatal_error(e)

    output = stream.getvalue()
    assert "[fatal error]: ValueError('boom')" in output
    assert "Traceback" in output
    assert reporter.return_code == 70


def test_top_level_error():
    reporter, stream = make_reporter()

    reporter.report_error("unable to read `x.lox`", "io")
    reporter.print_diagnostics()

    assert stream.getvalue() == "[io error] unable to read `x.lox`\n"
    assert reporter.return_code == 1


def test_diagnostics_are_flushed_once():
    reporter, stream = make_reporter()

    reporter.report(1, "first")
    reporter.print_diagnostics()
    reporter.report(2, "second")
    reporter.print_diagnostics()
    reporter.print_diagnostics()

    assert stream.getvalue().splitlines() == ["[line 1] Error: first", "[line 2] Error: second"]


def test_silent_reporter_records_but_prints_nothing():
    reporter, stream = make_reporter(LogLevel.SILENT)

    reporter.report(1, "quiet")
    reporter.print_diagnostics()
    reporter.log("also quiet")

    assert stream.getvalue() == ""
    assert reporter.had_error
    assert reporter.return_code == 65


def test_log_only_when_verbose():
    quiet, quiet_stream = make_reporter(LogLevel.ERROR)
    loud, loud_stream = make_reporter(LogLevel.VERBOSE)

    quiet.log("lexed 4 tokens")
    loud.log("lexed 4 tokens")

    assert quiet_stream.getvalue() == ""
    assert loud_stream.getvalue() == "[info] lexed 4 tokens\n"
    assert not loud.had_error
