'''Provides all the classes used to handle errors.'''

__all__ = [
    'CompileError',
    'LoxRuntimeError',
    'Severity',
    'Diagnostic',
    'Reporter',
    'LogLevel'
]

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import List, Optional, TextIO
import sys
import traceback

from . import TextSpan

@dataclass
class CompileError(Exception):
    '''
    Indicates a lexical or syntactic error in user source text.

    Attributes
    ----------
    message: str
        The error message.
    span: TextSpan
        The text span of the erroneous source text.
    context: str
        The local context displayed between `Error` and the message: eg.
        ` at end` or ` at 'foo'`.  Empty if there is no context.
    '''

    message: str
    span: TextSpan
    context: str = ''

@dataclass
class LoxRuntimeError(Exception):
    '''
    Indicates an error that occurred while evaluating an expression.

    Attributes
    ----------
    message: str
        The error message.
    span: TextSpan
        The text span of the operator that failed.
    '''

    message: str
    span: TextSpan

class Severity(Enum):
    '''Enumerates the classes of diagnostic the reporter can record.'''

    COMPILE = auto()
    RUNTIME = auto()
    FATAL = auto()
    OTHER = auto()

@dataclass
class Diagnostic:
    '''
    A single recorded diagnostic.

    Attributes
    ----------
    line: int
        The source line the diagnostic refers to.  Zero if the diagnostic does
        not refer to a place in user source text.
    message: str
        The diagnostic message.
    context: Optional[str]
        The optional local context of the diagnostic.
    severity: Severity
        The class of the diagnostic.
    '''

    line: int
    message: str
    context: Optional[str] = None
    severity: Severity = Severity.COMPILE

    def __str__(self) -> str:
        match self.severity:
            case Severity.COMPILE:
                return f'[line {self.line}] Error{self.context or ""}: {self.message}'
            case Severity.RUNTIME:
                return f'{self.message}\n[line {self.line}]'
            case Severity.FATAL:
                return f'[fatal error]: {self.message}'
            case _:
                return f'[{self.context} error] {self.message}'

class LogLevel(IntEnum):
    '''Enumerates the different possible reporter log levels.'''

    SILENT = auto()
    ERROR = auto()
    WARN = auto()
    VERBOSE = auto()

class Reporter:
    '''
    Responsible for collecting and displaying all the diagnostics produced
    during a single run of the interpreter.  Diagnostics are recorded as they
    are reported and written to the output stream when they are flushed.
    '''

    # The reporter's log level.
    log_level: LogLevel

    # The stream diagnostics are written to.
    stream: TextIO

    # The diagnostics recorded so far, in the order they were reported.
    diagnostics: List[Diagnostic]

    # The number of diagnostics that have already been written out.
    _flushed: int

    def __init__(self, log_level: LogLevel = LogLevel.ERROR, stream: Optional[TextIO] = None):
        '''
        Params
        ------
        log_level: LogLevel
            The reporter's log level.
        stream: Optional[TextIO]
            The stream to write diagnostics to: defaults to standard error.
        '''

        self.log_level = log_level
        self.stream = stream if stream else sys.stderr
        self.diagnostics = []
        self._flushed = 0

    def report(self, line: int, message: str):
        '''
        Reports a lexical or syntax error with no local context.

        Params
        ------
        line: int
            The line the error occurred on.
        message: str
            The error message.
        '''

        self.diagnostics.append(Diagnostic(line, message))

    def report_with_context(self, line: int, message: str, context: str):
        '''
        Reports a lexical or syntax error with a local context.

        Params
        ------
        line: int
            The line the error occurred on.
        message: str
            The error message.
        context: str
            The local context, eg. ` at end`.
        '''

        self.diagnostics.append(Diagnostic(line, message, context))

    def report_compile_error(self, cerr: CompileError):
        '''
        Reports a compile error raised by the lexer or parser.

        Params
        ------
        cerr: CompileError
            The compile error to report.
        '''

        if cerr.context:
            self.report_with_context(cerr.span.end_line, cerr.message, cerr.context)
        else:
            self.report(cerr.span.end_line, cerr.message)

    def report_runtime_error(self, rerr: LoxRuntimeError):
        '''
        Reports an error that aborted evaluation.

        Params
        ------
        rerr: LoxRuntimeError
            The runtime error to report.
        '''

        self.diagnostics.append(Diagnostic(rerr.span.end_line, rerr.message, severity=Severity.RUNTIME))

    def report_fatal_error(self, ferr: Exception):
        '''
        Reports an unexpected fatal error.  Unlike other diagnostics, the
        traceback of a fatal error is displayed immediately.

        Params
        ------
        ferr: Exception
            The exception to report as a fatal error.
        '''

        self.diagnostics.append(Diagnostic(0, repr(ferr), severity=Severity.FATAL))

        if self.log_level != LogLevel.SILENT:
            self.print_diagnostics()
            traceback.print_exception(ferr, file=self.stream)

    def report_error(self, msg: str, kind: str):
        '''
        Reports a normal/top-level error that doesn't refer to specific place in
        user source text.

        Params
        ------
        msg: str
            The error message.
        kind: str
            The kind of error, eg. `config`.
        '''

        self.diagnostics.append(Diagnostic(0, msg, kind, Severity.OTHER))

    def log(self, msg: str):
        '''
        Displays an informational message when the reporter is verbose.

        Params
        ------
        msg: str
            The message to display.
        '''

        if self.log_level == LogLevel.VERBOSE:
            print(f'[info] {msg}', file=self.stream)

    def print_diagnostics(self):
        '''Writes out all the diagnostics that have not been written yet.'''

        pending = self.diagnostics[self._flushed:]
        self._flushed = len(self.diagnostics)

        if self.log_level == LogLevel.SILENT:
            return

        for diag in pending:
            print(diag, file=self.stream)

    # ---------------------------------------------------------------------------- #

    def _has(self, severity: Severity) -> bool:
        return any(diag.severity == severity for diag in self.diagnostics)

    @property
    def had_error(self) -> bool:
        '''Returns whether any error was reported.'''

        return len(self.diagnostics) > 0

    @property
    def had_compile_error(self) -> bool:
        '''Returns whether a lexical or syntax error was reported.'''

        return self._has(Severity.COMPILE)

    @property
    def had_runtime_error(self) -> bool:
        '''Returns whether a runtime or fatal error was reported.'''

        return self._has(Severity.RUNTIME) or self._has(Severity.FATAL)

    @property
    def return_code(self) -> int:
        '''Gets the process return code for the run.'''

        if self.had_runtime_error:
            return 70
        elif self.had_compile_error:
            return 65
        elif self.had_error:
            return 1

        return 0
