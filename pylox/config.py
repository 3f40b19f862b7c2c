'''Provides the loader for the interpreter's TOML configuration file.'''

__all__ = ['CONFIG_FILE_NAME', 'ConfigError', 'InterpreterConfig', 'load_config']

from dataclasses import dataclass
from typing import Any, Dict, Optional
import os

import toml

from .report.reporter import LogLevel

# The name of the configuration file looked for in the working directory.
CONFIG_FILE_NAME = 'pylox.toml'

# Maps the accepted `log-level` strings to log levels.
LOG_LEVELS = {
    'silent': LogLevel.SILENT,
    'error': LogLevel.ERROR,
    'warn': LogLevel.WARN,
    'verbose': LogLevel.VERBOSE,
}

@dataclass
class ConfigError(Exception):
    '''
    Indicates an error loading the configuration file.

    Attributes
    ----------
    path: str
        The path to the configuration file.
    message: str
        The error message.
    '''

    path: str
    message: str

    def __str__(self) -> str:
        return f'{self.path}: {self.message}'

# InterpreterConfig is the configuration of a single run of the interpreter.
@dataclass
class InterpreterConfig:
    log_level: LogLevel = LogLevel.ERROR

    # strict_division makes division by zero a runtime error instead of
    # producing an IEEE infinity or NaN.
    strict_division: bool = False

# ConfigLoader is the class responsible for loading a configuration file.
class ConfigLoader:
    path: str

    def __init__(self, path: str) -> None:
        self.path = path

    # load is the main entry point for the config loader
    def load(self) -> InterpreterConfig:
        if not os.path.exists(self.path):
            self._error('configuration file does not exist')

        # load the configuration file with TOML
        with open(self.path, 'r', encoding='utf-8') as toml_file:
            try:
                toml_data = toml.load(toml_file)
            except toml.TomlDecodeError as te:
                self._error(f'error parsing configuration file: {te.args[0]}')

        log_level_name = self._get_field(toml_data, 'log-level', str, 'error')
        if log_level_name not in LOG_LEVELS:
            self._error(f'unknown log level: `{log_level_name}`')

        return InterpreterConfig(
            log_level=LOG_LEVELS[log_level_name],
            strict_division=self._get_field(toml_data, 'strict-division', bool, False)
        )

    # ---------------------------------------------------------------------------- #

    # _error reports an error loading the configuration file
    def _error(self, msg: str) -> None:
        raise ConfigError(self.path, msg)

    # _get_field gets a field from the configuration.  It throws an error if
    # the field has the wrong type or if it is missing and no default is
    # provided.
    def _get_field(self, toml_data: Dict[str, Any], field_name: str, field_type, default = None) -> Any:
        if field_name in toml_data:
            field_val = toml_data[field_name]

            if isinstance(field_val, field_type):
                return field_val
            else:
                self._error(f'field `{field_name}` must be of type {field_type.__name__}')

        if default is not None:
            return default
        else:
            self._error(f'missing required field: `{field_name}`')

# load_config loads the configuration for a run.  If `path` is `None`, the
# default configuration file in the working directory is used if it exists
# and the default configuration otherwise.
def load_config(path: Optional[str] = None) -> InterpreterConfig:
    if path is None:
        if not os.path.exists(CONFIG_FILE_NAME):
            return InterpreterConfig()

        path = CONFIG_FILE_NAME

    return ConfigLoader(path).load()
