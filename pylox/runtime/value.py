'''Provides the runtime values produced by evaluation and their formatting.'''

__all__ = [
    'Value',
    'Number',
    'String',
    'Boolean',
    'Nil',
    'NIL',
    'format_number',
    'is_truthy'
]

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple, Union
import math
import struct

def format_number(value: float) -> str:
    '''
    Returns the canonical text of a number: integral values are written with
    exactly one decimal place, all other values in their shortest round-trip
    decimal form (never in exponent notation).

    Params
    ------
    value: float
        The number to format.
    '''

    if math.isnan(value):
        return 'NaN'
    elif math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    elif value.is_integer():
        return f'{value:.1f}'

    text = repr(value)

    # `repr` switches to exponent notation for very small magnitudes.
    if 'e' in text:
        text = format(Decimal(text), 'f')

    return text

def _total_order_key(value: float) -> int:
    '''
    Returns an integer key which sorts floats by the IEEE 754 total order:
    negative NaNs first, then -inf through -0.0, 0.0 through inf, then
    positive NaNs.
    '''

    bits = struct.unpack('<q', struct.pack('<d', value))[0]

    if bits < 0:
        return bits ^ 0x7FFF_FFFF_FFFF_FFFF

    return bits

class Value(ABC):
    '''
    The abstract base class for all runtime values.

    Values of different variants are never equal.  Values are ordered first by
    variant (`Number < String < Boolean < Nil`) and then by their contents;
    this ordering is only used to sort values consistently and is not exposed
    by the language's comparison operators.
    '''

    # The position of the variant in the cross-variant ordering.
    rank: int = 0

    @abstractmethod
    def sort_key(self) -> Tuple:
        '''Returns the key used to order values.'''

    def __lt__(self, other: 'Value') -> bool:
        if not isinstance(other, Value):
            return NotImplemented

        return self.sort_key() < other.sort_key()

    def __le__(self, other: 'Value') -> bool:
        if not isinstance(other, Value):
            return NotImplemented

        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: 'Value') -> bool:
        if not isinstance(other, Value):
            return NotImplemented

        return self.sort_key() > other.sort_key()

    def __ge__(self, other: 'Value') -> bool:
        if not isinstance(other, Value):
            return NotImplemented

        return self.sort_key() >= other.sort_key()

    @staticmethod
    def from_literal(lit: Union[bool, float, str, None]) -> 'Value':
        '''
        Converts the value of a literal AST node into a runtime value.

        Params
        ------
        lit: Union[bool, float, str, None]
            The literal value.
        '''

        # `bool` must be matched before `float`: `True` is an `int`.
        match lit:
            case bool():
                return Boolean(lit)
            case float() | int():
                return Number(float(lit))
            case str():
                return String(lit)
            case None:
                return NIL

        raise TypeError(f'no runtime value for literal: {lit!r}')

@dataclass(frozen=True, eq=False)
class Number(Value):
    '''A 64-bit floating point number.'''

    value: float

    rank = 0

    def sort_key(self) -> Tuple:
        return (self.rank, _total_order_key(self.value))

    def __eq__(self, other: object) -> bool:
        # Plain float comparison, so NaN is never equal to anything.
        if isinstance(other, Number):
            return self.value == other.value

        return False

    def __hash__(self) -> int:
        return hash((Number, self.value))

    def __str__(self) -> str:
        return format_number(self.value)

@dataclass(frozen=True)
class String(Value):
    '''An immutable string of text.'''

    value: str

    rank = 1

    def sort_key(self) -> Tuple:
        return (self.rank, self.value)

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class Boolean(Value):
    '''A boolean value.'''

    value: bool

    rank = 2

    def sort_key(self) -> Tuple:
        return (self.rank, self.value)

    def __str__(self) -> str:
        return 'true' if self.value else 'false'

@dataclass(frozen=True)
class Nil(Value):
    '''The absence of a value.'''

    rank = 3

    def sort_key(self) -> Tuple:
        return (self.rank,)

    def __str__(self) -> str:
        return 'nil'

# The only instance of nil anyone needs.
NIL = Nil()

def is_truthy(value: Value) -> bool:
    '''
    Returns the truthiness of a value: only `false` and `nil` are falsy.

    Params
    ------
    value: Value
        The value to test.
    '''

    match value:
        case Boolean(b):
            return b
        case Nil():
            return False
        case _:
            return True
