'''A tree-walking evaluator for a small C-like expression language.'''

# The current pylox version.
PYLOX_VERSION = '0.1.0'

# The conventional source file extension.
LOX_FILE_EXT = '.lox'
