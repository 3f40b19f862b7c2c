'''Provides the main interpreter driver.'''

__all__ = [
    'COMMANDS',
    'Interpreter'
]

from typing import List, Optional

from .config import InterpreterConfig
from .report.reporter import Reporter, LoxRuntimeError
from .runtime.evaluator import Evaluator
from .syntax.ast import Expr
from .syntax.lexer import Lexer
from .syntax.parser import Parser
from .syntax.token import Token

# The commands the interpreter can run over a source text.
COMMANDS = ['tokenize', 'parse', 'evaluate']

class Interpreter:
    '''
    The high-level construct running the pipeline over one source text:
    lexing, parsing and evaluation.  Each instance is good for a single run:
    it owns the reporter that collects the diagnostics of that run.
    '''

    # The configuration of the run.
    config: InterpreterConfig

    # The reporter for the run.
    reporter: Reporter

    def __init__(self, config: Optional[InterpreterConfig] = None, reporter: Optional[Reporter] = None):
        '''
        Params
        ------
        config: Optional[InterpreterConfig]
            The configuration of the run: defaults to the default configuration.
        reporter: Optional[Reporter]
            The reporter to use: defaults to a new reporter at the configured
            log level.
        '''

        self.config = config if config else InterpreterConfig()
        self.reporter = reporter if reporter else Reporter(self.config.log_level)

    def run(self, command: str, source: str) -> int:
        '''
        Runs one of the interpreter commands.

        Params
        ------
        command: str
            The command to run: one of `COMMANDS`.
        source: str
            The source text to run the command over.

        Returns
        -------
        return_code: int
            The return code for the program.
        '''

        match command:
            case 'tokenize':
                return self.tokenize(source)
            case 'parse':
                return self.parse(source)
            case 'evaluate':
                return self.evaluate(source)
            case _:
                raise ValueError(f'unknown command: {command}')

    def tokenize(self, source: str) -> int:
        '''Prints every token of the source text.'''

        try:
            tokens = self.lex(source)

            for tok in tokens:
                print(tok)
        except Exception as e:
            self.reporter.report_fatal_error(e)

        self.reporter.print_diagnostics()
        return self.reporter.return_code

    def parse(self, source: str) -> int:
        '''Prints the syntax tree of the source text.'''

        try:
            if expr := self.build_tree(source):
                print(expr)
        except Exception as e:
            self.reporter.report_fatal_error(e)

        self.reporter.print_diagnostics()
        return self.reporter.return_code

    def evaluate(self, source: str) -> int:
        '''Prints the value of the source text.'''

        try:
            if expr := self.build_tree(source):
                evaluator = Evaluator(self.config.strict_division)

                try:
                    value = evaluator.evaluate(expr)
                    self.reporter.log(f'evaluated to {value!r}')

                    print(value)
                except LoxRuntimeError as rerr:
                    self.reporter.report_runtime_error(rerr)
        except Exception as e:
            self.reporter.report_fatal_error(e)

        self.reporter.print_diagnostics()
        return self.reporter.return_code

    # ---------------------------------------------------------------------------- #

    def lex(self, source: str) -> List[Token]:
        '''Returns all the tokens of the source text.'''

        tokens = Lexer(source, self.reporter).tokenize()

        self.reporter.log(f'lexed {len(tokens)} tokens')

        return tokens

    def build_tree(self, source: str) -> Optional[Expr]:
        '''
        Returns the syntax tree of the source text or `None` if a lexical or
        syntax error was reported.  Parsing is not attempted if lexing failed.
        '''

        tokens = self.lex(source)

        if self.reporter.had_error:
            return None

        expr = Parser(tokens, self.reporter).parse()

        if expr:
            self.reporter.log(f'parsed expression {expr}')

        return expr
