'''Provides the definitions of the expression syntax tree.'''

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..report import TextSpan
from ..runtime.value import format_number
from .token import Token

__all__ = [
    'Operator',
    'Expr',
    'Binary',
    'Unary',
    'Literal',
    'Grouping'
]

class Operator(Enum):
    '''
    Enumerates the operators that can appear in an expression.  The value of
    each member is the operator's symbol.
    '''

    EQUAL = '='
    EQUAL_EQUAL = '=='
    BANG = '!'
    BANG_EQUAL = '!='
    LESS = '<'
    LESS_EQUAL = '<='
    GREATER = '>'
    GREATER_EQUAL = '>='
    PLUS = '+'
    MINUS = '-'
    STAR = '*'
    SLASH = '/'

    @staticmethod
    def from_token(tok: Token) -> 'Operator':
        '''
        Returns the operator corresponding to a token.

        Params
        ------
        tok: Token
            The operator token.

        Raises
        ------
        ValueError
            If the token is not an operator token.
        '''

        try:
            return Operator[tok.kind.name]
        except KeyError:
            raise ValueError(f'not an operator token: {tok.kind.name}') from None

    def __str__(self) -> str:
        return self.value

class Expr(ABC):
    '''The abstract base class for all expression nodes.'''

    @property
    @abstractmethod
    def span(self) -> TextSpan:
        '''Returns the text span over which this node extends.'''

    @abstractmethod
    def __str__(self) -> str:
        '''Returns the parenthesized prefix form of the expression.'''

@dataclass
class Binary(Expr):
    '''
    The AST node representing a binary operator application.

    Attributes
    ----------
    left: Expr
        The left operand.
    op: Operator
        The applied operator.
    right: Expr
        The right operand.
    op_span: TextSpan
        The span of the operator token: runtime errors are reported here.
    '''

    left: Expr
    op: Operator
    right: Expr
    op_span: TextSpan

    @property
    def span(self) -> TextSpan:
        return TextSpan.over(self.left.span, self.right.span)

    def __str__(self) -> str:
        return f'({self.op} {self.left} {self.right})'

@dataclass
class Unary(Expr):
    '''
    The AST node representing a unary operator application.

    Attributes
    ----------
    op: Operator
        The applied operator.
    operand: Expr
        The operand of the application.
    op_span: TextSpan
        The span of the operator token.
    '''

    op: Operator
    operand: Expr
    op_span: TextSpan

    @property
    def span(self) -> TextSpan:
        return TextSpan.over(self.op_span, self.operand.span)

    def __str__(self) -> str:
        return f'({self.op} {self.operand})'

@dataclass
class Literal(Expr):
    '''
    The AST node representing a literal.

    Attributes
    ----------
    value: Union[bool, float, str, None]
        The literal value: `None` is the literal `nil`.
    '''

    value: Union[bool, float, str, None]
    _span: TextSpan

    @property
    def span(self) -> TextSpan:
        return self._span

    def __str__(self) -> str:
        match self.value:
            case bool():
                return 'true' if self.value else 'false'
            case float():
                return format_number(self.value)
            case None:
                return 'nil'
            case _:
                return self.value

@dataclass
class Grouping(Expr):
    '''
    The AST node representing a parenthesized expression.

    Attributes
    ----------
    expr: Expr
        The enclosed expression.
    '''

    expr: Expr
    _span: TextSpan

    @property
    def span(self) -> TextSpan:
        return self._span

    def __str__(self) -> str:
        return f'(group {self.expr})'
