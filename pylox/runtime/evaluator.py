'''Provides the tree-walking evaluator.'''

__all__ = ['Evaluator', 'InternalError', 'LoxRuntimeError']

from typing import Callable
import math

from ..report import TextSpan
from ..report.reporter import LoxRuntimeError
from ..syntax.ast import *
from .value import *

class InternalError(Exception):
    '''
    Indicates that the evaluator was given a tree that the parser could never
    produce: eg. a binary application of `!`.
    '''

def ieee_divide(lhs: float, rhs: float) -> float:
    '''
    Divides two floats with IEEE 754 semantics: division by zero produces a
    signed infinity or NaN rather than raising.
    '''

    if rhs != 0:
        return lhs / rhs
    elif lhs == 0 or math.isnan(lhs):
        return math.nan

    return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)

class Evaluator:
    '''
    Responsible for reducing an expression tree to a single value.  Evaluation
    holds no state between calls: the first runtime error aborts the
    evaluation of the whole expression.
    '''

    # Whether dividing by zero is a runtime error instead of producing an IEEE
    # infinity or NaN.
    strict_division: bool

    def __init__(self, strict_division: bool = False):
        '''
        Params
        ------
        strict_division: bool
            Whether dividing by zero is a runtime error.
        '''

        self.strict_division = strict_division

    def evaluate(self, expr: Expr) -> Value:
        '''
        Evaluates an expression.

        Params
        ------
        expr: Expr
            The expression to evaluate.

        Raises
        ------
        LoxRuntimeError
            If an operator is applied to operands of the wrong kind.
        InternalError
            If the tree contains an operator in a position it cannot appear in.
        '''

        match expr:
            case Literal(value):
                return Value.from_literal(value)
            case Grouping(inner):
                return self.evaluate(inner)
            case Unary():
                return self.eval_unary(expr)
            case Binary():
                return self.eval_binary(expr)
            case _:
                raise InternalError(f'unknown expression node: {type(expr).__name__}')

    # ---------------------------------------------------------------------------- #

    def eval_unary(self, unary: Unary) -> Value:
        operand = self.evaluate(unary.operand)

        match unary.op:
            case Operator.BANG:
                return Boolean(not is_truthy(operand))
            case Operator.MINUS:
                match operand:
                    case Number(n):
                        return Number(-n)
                    case _:
                        raise LoxRuntimeError('Operand must be a number.', unary.op_span)
            case _:
                raise InternalError(f'invalid unary operator: {unary.op}')

    def eval_binary(self, binary: Binary) -> Value:
        # Both operands are always evaluated, left first.
        lhs = self.evaluate(binary.left)
        rhs = self.evaluate(binary.right)
        span = binary.op_span

        match binary.op:
            case Operator.EQUAL_EQUAL:
                return Boolean(lhs == rhs)
            case Operator.BANG_EQUAL:
                return Boolean(lhs != rhs)
            case Operator.GREATER:
                return Boolean(self.numeric(lhs, rhs, span, lambda a, b: a > b))
            case Operator.GREATER_EQUAL:
                return Boolean(self.numeric(lhs, rhs, span, lambda a, b: a >= b))
            case Operator.LESS:
                return Boolean(self.numeric(lhs, rhs, span, lambda a, b: a < b))
            case Operator.LESS_EQUAL:
                return Boolean(self.numeric(lhs, rhs, span, lambda a, b: a <= b))
            case Operator.MINUS:
                return Number(self.numeric(lhs, rhs, span, lambda a, b: a - b))
            case Operator.STAR:
                return Number(self.numeric(lhs, rhs, span, lambda a, b: a * b))
            case Operator.SLASH:
                return Number(self.numeric(lhs, rhs, span, self.divide(span)))
            case Operator.PLUS:
                match (lhs, rhs):
                    case (Number(a), Number(b)):
                        return Number(a + b)
                    case (String(a), String(b)):
                        return String(a + b)
                    case _:
                        raise LoxRuntimeError('Operands must be numbers or strings.', span)
            case _:
                raise InternalError(f'invalid binary operator: {binary.op}')

    def numeric(self, lhs: Value, rhs: Value, span: TextSpan, op: Callable[[float, float], object]):
        '''
        Applies an operation requiring two number operands.

        Params
        ------
        lhs: Value
            The left operand.
        rhs: Value
            The right operand.
        span: TextSpan
            The span of the operator being applied.
        op: Callable[[float, float], object]
            The operation to apply to the unwrapped numbers.
        '''

        match (lhs, rhs):
            case (Number(a), Number(b)):
                return op(a, b)
            case _:
                raise LoxRuntimeError('Operands must be numbers.', span)

    def divide(self, span: TextSpan) -> Callable[[float, float], float]:
        '''Returns the division operation selected by the division policy.'''

        if not self.strict_division:
            return ieee_divide

        def checked_divide(lhs: float, rhs: float) -> float:
            if rhs == 0:
                raise LoxRuntimeError('Division by zero.', span)

            return lhs / rhs

        return checked_divide
