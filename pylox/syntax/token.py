'''Provides the implementation of lexical tokens.'''

__all__ = ['Token', 'KEYWORDS', 'SYMBOLS', 'keyword_kind']

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from ..report import TextSpan
from ..runtime.value import format_number

@dataclass(frozen=True)
class Token:
    '''
    Represents a single lexical token.

    Attributes
    ----------
    kind: Token.Kind
        The lexical kind of the token.
    value: str
        The lexeme: the exact source text the token was read from.
    span: TextSpan
        The positional span over which the token extends.
    literal: Union[str, float, None]
        The decoded value of a string or number literal: the string contents
        without quotes or the parsed number.  `None` for all other tokens.
    '''

    class Kind(Enum):
        '''Enumerates the different kinds of tokens.'''

        LEFT_PAREN = auto()
        RIGHT_PAREN = auto()
        LEFT_BRACE = auto()
        RIGHT_BRACE = auto()
        COMMA = auto()
        DOT = auto()
        MINUS = auto()
        PLUS = auto()
        SEMICOLON = auto()
        STAR = auto()
        SLASH = auto()

        EQUAL = auto()
        EQUAL_EQUAL = auto()
        BANG = auto()
        BANG_EQUAL = auto()
        LESS = auto()
        LESS_EQUAL = auto()
        GREATER = auto()
        GREATER_EQUAL = auto()

        STRING = auto()
        NUMBER = auto()
        IDENTIFIER = auto()

        AND = auto()
        CLASS = auto()
        ELSE = auto()
        FALSE = auto()
        FOR = auto()
        FUN = auto()
        IF = auto()
        NIL = auto()
        OR = auto()
        PRINT = auto()
        RETURN = auto()
        SUPER = auto()
        THIS = auto()
        TRUE = auto()
        VAR = auto()
        WHILE = auto()

        EOF = auto()

    kind: Kind
    value: str
    span: TextSpan
    literal: Union[str, float, None] = None

    @property
    def line(self) -> int:
        '''Returns the line the token is reported on: the line it ends on.'''

        return self.span.end_line

    @property
    def context(self) -> str:
        '''Returns the local context used when reporting an error at the token.'''

        if self.kind == Token.Kind.EOF:
            return ' at end'

        return f" at '{self.value}'"

    def __str__(self) -> str:
        match self.kind:
            case Token.Kind.STRING:
                literal = self.literal
            case Token.Kind.NUMBER:
                literal = format_number(self.literal)
            case _:
                literal = 'null'

        return f'{self.kind.name} {self.value} {literal}'

# Maps keyword strings to their token kinds.
KEYWORDS = {
    'and': Token.Kind.AND,
    'class': Token.Kind.CLASS,
    'else': Token.Kind.ELSE,
    'false': Token.Kind.FALSE,
    'for': Token.Kind.FOR,
    'fun': Token.Kind.FUN,
    'if': Token.Kind.IF,
    'nil': Token.Kind.NIL,
    'or': Token.Kind.OR,
    'print': Token.Kind.PRINT,
    'return': Token.Kind.RETURN,
    'super': Token.Kind.SUPER,
    'this': Token.Kind.THIS,
    'true': Token.Kind.TRUE,
    'var': Token.Kind.VAR,
    'while': Token.Kind.WHILE,
}

# Maps symbol strings to their token kinds.  Every two character symbol is a
# one character symbol followed by `=`.
SYMBOLS = {
    '(': Token.Kind.LEFT_PAREN,
    ')': Token.Kind.RIGHT_PAREN,
    '{': Token.Kind.LEFT_BRACE,
    '}': Token.Kind.RIGHT_BRACE,
    ',': Token.Kind.COMMA,
    '.': Token.Kind.DOT,
    '-': Token.Kind.MINUS,
    '+': Token.Kind.PLUS,
    ';': Token.Kind.SEMICOLON,
    '*': Token.Kind.STAR,
    '/': Token.Kind.SLASH,

    '=': Token.Kind.EQUAL,
    '==': Token.Kind.EQUAL_EQUAL,
    '!': Token.Kind.BANG,
    '!=': Token.Kind.BANG_EQUAL,
    '<': Token.Kind.LESS,
    '<=': Token.Kind.LESS_EQUAL,
    '>': Token.Kind.GREATER,
    '>=': Token.Kind.GREATER_EQUAL,
}

def keyword_kind(lexeme: str) -> Optional[Token.Kind]:
    '''
    Returns the keyword kind of the lexeme if it is a keyword.

    Params
    ------
    lexeme: str
        The raw identifier text to look up.
    '''

    return KEYWORDS.get(lexeme)
