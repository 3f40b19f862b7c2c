'''Provides the recursive descent expression parser.'''

__all__ = ['Parser']

from typing import List, Optional

from ..report import TextSpan
from ..report.reporter import CompileError, Reporter
from .ast import *
from .token import Token

class Parser:
    '''
    Responsible for building an expression tree from a sequence of tokens.
    A parse either produces a tree representing the whole input or reports a
    single syntax error and produces nothing.
    '''

    # The tokens being parsed: always terminated by an EOF token.
    tokens: List[Token]

    # The reporter syntax errors are reported to.
    reporter: Reporter

    # The index of the token the parser is on.
    _cursor: int = 0

    def __init__(self, tokens: List[Token], reporter: Reporter):
        '''
        Params
        ------
        tokens: List[Token]
            The tokens to parse including the trailing EOF token.
        reporter: Reporter
            The reporter to report syntax errors to.
        '''

        self.tokens = tokens
        self.reporter = reporter

    def parse(self) -> Optional[Expr]:
        '''
        The main entry point for the parsing algorithm.  Returns the parsed
        expression or `None` if a syntax error was reported.

        input := expr 'EOF' ;
        '''

        self._cursor = 0

        try:
            expr = self.parse_expr()

            if not self.has(Token.Kind.EOF):
                self.reject_with_msg('Expected end of expression.')

            return expr
        except CompileError as cerr:
            self.reporter.report_compile_error(cerr)
            return None

    # ---------------------------------------------------------------------------- #

    def parse_expr(self) -> Expr:
        '''expr := equality ;'''

        return self.parse_binary_expr(0)

    # The table of binary operators ordered by precedence: lowest to highest.
    PRED_TABLE = [
        {Token.Kind.BANG_EQUAL, Token.Kind.EQUAL_EQUAL},
        {Token.Kind.GREATER, Token.Kind.GREATER_EQUAL, Token.Kind.LESS, Token.Kind.LESS_EQUAL},
        {Token.Kind.MINUS, Token.Kind.PLUS},
        {Token.Kind.STAR, Token.Kind.SLASH},
    ]

    def parse_binary_expr(self, pred_level: int) -> Expr:
        '''
        Parses one of the given binary expressions based on the precedence
        level. This function essentially handles all the logic common to all
        binary operators: every level is left associative.

        Params
        ------
        pred_level: int
            The precedence level of the expression being parsed: 0 is lowest
            precedence.

        equality := comparison {('!=' | '==') comparison} ;
        comparison := term {('>' | '>=' | '<' | '<=') term} ;
        term := factor {('-' | '+') factor} ;
        factor := unary {('*' | '/') unary} ;
        '''

        if pred_level == len(self.PRED_TABLE):
            return self.parse_unary_expr()

        lhs = self.parse_binary_expr(pred_level + 1)

        while (op_tok := self.tok()).kind in self.PRED_TABLE[pred_level]:
            self.advance()

            rhs = self.parse_binary_expr(pred_level + 1)

            lhs = Binary(lhs, Operator.from_token(op_tok), rhs, op_tok.span)

        return lhs

    def parse_unary_expr(self) -> Expr:
        '''unary := ('!' | '-') unary | primary ;'''

        match (tok := self.tok()).kind:
            case Token.Kind.BANG | Token.Kind.MINUS:
                self.advance()

                operand = self.parse_unary_expr()

                return Unary(Operator.from_token(tok), operand, tok.span)
            case _:
                return self.parse_primary()

    def parse_primary(self) -> Expr:
        '''
        primary := 'true' | 'false' | 'nil' | 'NUMBER' | 'STRING' | '(' expr ')' ;
        '''

        match (tok := self.tok()).kind:
            case Token.Kind.TRUE:
                self.advance()
                return Literal(True, tok.span)
            case Token.Kind.FALSE:
                self.advance()
                return Literal(False, tok.span)
            case Token.Kind.NIL:
                self.advance()
                return Literal(None, tok.span)
            case Token.Kind.NUMBER | Token.Kind.STRING:
                self.advance()
                return Literal(tok.literal, tok.span)
            case Token.Kind.LEFT_PAREN:
                self.advance()

                expr = self.parse_expr()

                rparen = self.want(Token.Kind.RIGHT_PAREN, "Expected ')' after expression.")

                return Grouping(expr, TextSpan.over(tok.span, rparen.span))
            case _:
                self.reject_with_msg('Expected expression.')

    # ---------------------------------------------------------------------------- #

    def advance(self):
        '''Moves the parser forward one token.  The parser never moves past EOF.'''

        if self._cursor < len(self.tokens) - 1:
            self._cursor += 1

    def has(self, kind: Token.Kind) -> bool:
        '''
        Returns whether or no the parser is on a token of the given kind.

        Params
        ------
        kind: Token.Kind
            The kind of token to check for.
        '''

        return self.tok().kind == kind

    def want(self, kind: Token.Kind, msg: str) -> Token:
        '''
        Asserts that the token the parser is on is of the given kind.

        Params
        ------
        kind: Token.Kind
            The kind of token to check for.
        msg: str
            The error message to reject the token with if it does not match.

        Returns
        -------
        Token
            The matched token.
        '''

        tok = self.tok()

        if tok.kind != kind:
            self.reject_with_msg(msg)

        self.advance()
        return tok

    def tok(self) -> Token:
        '''Returns the token the parser is currently on.'''

        return self.tokens[self._cursor]

    def reject_with_msg(self, msg: str):
        '''
        Rejects the current token using the given error message.

        Params
        ------
        msg: str
            The error message.
        '''

        tok = self.tok()

        raise CompileError(msg, tok.span, tok.context)
