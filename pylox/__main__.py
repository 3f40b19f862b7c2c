'''The entry point for the pylox interpreter.'''

__all__ = ['main']

from typing import List, Optional
import argparse
import sys

from . import PYLOX_VERSION
from .config import ConfigError, LOG_LEVELS, load_config
from .interpreter import COMMANDS, Interpreter
from .report.reporter import Reporter

def build_arg_parser() -> argparse.ArgumentParser:
    '''Returns the command-line argument parser.'''

    parser = argparse.ArgumentParser(prog='pylox')
    parser.add_argument('command', choices=COMMANDS, help='the stage to run the source file through')
    parser.add_argument('filename', help='the source file to run')
    parser.add_argument('-c', '--config', help='the path to the configuration file')
    parser.add_argument('-l', '--log-level', choices=list(LOG_LEVELS), help='overrides the configured log level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {PYLOX_VERSION}')

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    '''
    Runs the interpreter over a source file.

    Params
    ------
    argv: Optional[List[str]]
        The command-line arguments: defaults to `sys.argv[1:]`.

    Returns
    -------
    return_code: int
        The return code for the program.
    '''

    args = build_arg_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as cerr:
        reporter = Reporter()
        reporter.report_error(str(cerr), 'config')
        reporter.print_diagnostics()
        return reporter.return_code

    if args.log_level:
        config.log_level = LOG_LEVELS[args.log_level]

    interp = Interpreter(config)

    try:
        with open(args.filename, 'r', encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        interp.reporter.report_error(f'unable to read `{args.filename}`: {e}', 'io')
        interp.reporter.print_diagnostics()
        return interp.reporter.return_code

    return interp.run(args.command, source)

if __name__ == '__main__':
    sys.exit(main())
