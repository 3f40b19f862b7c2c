'''Provides the lexical analyzer.'''

__all__ = ['Lexer']

from typing import Iterator, List, Optional

from .token import Token, SYMBOLS, keyword_kind
from ..report import TextSpan
from ..report.reporter import CompileError, Reporter

class Lexer:
    '''
    Responsible for converting source text into a stream of tokens (ie.
    performing lexical analysis).  Malformed tokens are reported to the
    reporter and skipped so that the rest of the input is still scanned.

    .. note: All the `lex_*` methods assume that the character beginning them
        has not been read in but is correct -- ie. the lookahead is valid.
    '''

    # The source text being tokenized.
    source: str

    # The reporter lexical errors are reported to.
    reporter: Reporter

    # The offset of the next character to read from the source text.
    offset: int = 0

    # The line beginning the current token.
    start_line: int = 1

    # The column beginning the current token.
    start_col: int = 1

    # The current line position of the lexer within the input stream.
    line: int = 1

    # The current column position of the lexer within the input stream.
    col: int = 1

    # The buffer storing the contents of the token as it is constructed.
    tok_buff: List[str]

    # The token read ahead by `peek_token` if there is one.
    _peeked: Optional[Token] = None

    def __init__(self, source: str, reporter: Reporter):
        '''
        Params
        ------
        source: str
            The full source text to tokenize.
        reporter: Reporter
            The reporter to report lexical errors to.
        '''

        self.source = source
        self.reporter = reporter
        self.tok_buff = []

    def __iter__(self) -> Iterator[Token]:
        '''Yields every remaining token up to and including the EOF token.'''

        while True:
            tok = self.next_token()
            yield tok

            if tok.kind == Token.Kind.EOF:
                return

    def tokenize(self) -> List[Token]:
        '''Returns all the remaining tokens ending with the EOF token.'''

        return list(self)

    def next_token(self) -> Token:
        '''
        Returns the next token read from the stream if there is a token.  If
        not, it returns an EOF token.  Malformed tokens are reported and
        skipped.
        '''

        if self._peeked:
            tok, self._peeked = self._peeked, None
            return tok

        # Use the lookahead to determine what token to lex.
        while c := self.peek():
            try:
                match c:
                    case ' ' | '\t' | '\r' | '\n':
                        self.skip()
                    case '/' if self.peek_next() == '/':
                        self.skip_comment()
                    case '\"':
                        return self.lex_string()
                    case _:
                        if is_alpha(c):
                            return self.lex_ident_or_keyword()
                        elif is_digit(c):
                            return self.lex_number()
                        else:
                            return self.lex_symbol_or_fail(c)
            except CompileError as cerr:
                self.tok_buff.clear()
                self.reporter.report_compile_error(cerr)

        # If we reach the end of the input stream, then we just make and return
        # a new EOF token.  Once this line is reached, it will be reached by all
        # subsequent calls the `next_token` and so an EOF token will be returned
        # from then on out.
        self.mark()
        return self.make_token(Token.Kind.EOF)

    def peek_token(self) -> Token:
        '''Returns the next token without consuming it.'''

        if not self._peeked:
            self._peeked = self.next_token()

        return self._peeked

    def expect(self, kind: Token.Kind, message: str) -> Token:
        '''
        Consumes the next token asserting that it is of the given kind.

        Params
        ------
        kind: Token.Kind
            The kind of token to expect.
        message: str
            The error message to raise if the token is of a different kind.

        Returns
        -------
        Token
            The matched token.
        '''

        tok = self.next_token()

        if tok.kind != kind:
            raise CompileError(message, tok.span, tok.context)

        return tok

    # ---------------------------------------------------------------------------- #

    def skip_comment(self):
        '''Skips a line comment up to (but not including) the newline ending it.'''

        while (c := self.peek()) and c != '\n':
            self.skip()

    def lex_string(self) -> Token:
        '''Lexes a string literal.  String literals may span multiple lines.'''

        # Read the opening double quote.
        self.mark()
        self.read()

        while c := self.read():
            if c == '\"':
                tok = self.make_token(Token.Kind.STRING)
                return Token(tok.kind, tok.value, tok.span, tok.value[1:-1])

        # If we reach here, the input loop for the string didn't return, so
        # the string is unclosed.
        self.error('Unterminated string.')

    def lex_ident_or_keyword(self) -> Token:
        '''Lexes an identifier or keyword.'''

        # Read the raw identifier.
        self.mark()
        self.read()

        while (c := self.peek()) and (is_alpha(c) or is_digit(c)):
            self.read()

        # If the token value is a keyword, then we convert to the token kind to
        # a keyword kind but leave all the other data the same.
        kind = keyword_kind(''.join(self.tok_buff))

        return self.make_token(kind if kind else Token.Kind.IDENTIFIER)

    def lex_number(self) -> Token:
        '''
        Lexes a numeric literal: a run of digits optionally followed by a
        decimal point and more digits.  A decimal point that is not followed
        by a digit is not part of the number.
        '''

        self.mark()

        while (c := self.peek()) and is_digit(c):
            self.read()

        if self.peek() == '.' and (c := self.peek_next()) and is_digit(c):
            self.read()

            while (c := self.peek()) and is_digit(c):
                self.read()

        tok = self.make_token(Token.Kind.NUMBER)

        try:
            value = float(tok.value)
        except ValueError:
            raise CompileError(f'Invalid number literal: {tok.value}', tok.span)

        return Token(tok.kind, tok.value, tok.span, value)

    def lex_symbol_or_fail(self, c: str) -> Token:
        '''
        Lexes a punctuation or operator token. If the input stream does not
        contain a valid punctuation or operator token, then an unexpected
        character error is raised.

        Params
        ------
        c: str
            The character ahead -- beginning the symbol, yet to be read in.
        '''

        self.mark()
        self.read()

        # We need to first character to be a valid symbol -- this method is
        # called as a "last resort" for the lexer when it can't match anything
        # else.
        if c in SYMBOLS:
            symbol_kind = SYMBOLS[c]

            # Consume until the ahead is no longer a symbol character.
            while (c := self.peek()) and (sym_value := ''.join(self.tok_buff) + c) in SYMBOLS:
                self.read()
                symbol_kind = SYMBOLS[sym_value]

            return self.make_token(symbol_kind)
        else:
            self.error(f'Unexpected character: {c}')

    # ---------------------------------------------------------------------------- #

    def make_token(self, kind: Token.Kind) -> Token:
        '''
        Creates a new token based on the state of the lexer.  Clears the token
        buffer for the next token to be read in.

        Params
        ------
        kind: Token.Kind
            The kind of token to produce.
        '''

        tok = Token(kind, ''.join(self.tok_buff), self.get_span())

        self.tok_buff.clear()

        return tok

    def mark(self):
        '''
        Marks the current position of the lexer as the beginning of a new token.
        '''

        self.start_line = self.line
        self.start_col = self.col

    def error(self, msg: str):
        '''
        Raises a compile error over the lexer's current token span.

        Params
        ------
        msg: str
            The error message.
        '''

        raise CompileError(msg, self.get_span())

    def get_span(self) -> TextSpan:
        '''
        Returns the text span of the current token being lexed: from the marked
        start position to the current position of the lexer.
        '''

        return TextSpan(self.start_line, self.start_col, self.line, self.col)

    # ---------------------------------------------------------------------------- #

    def read(self) -> Optional[str]:
        '''
        Consumes the next character from the input stream into the token buffer
        if another character exists.  Otherwise, nothing is added to the token
        buffer and `None` is returned.
        '''

        c = self.peek()

        if not c:
            return None

        self.offset += 1
        self.update_position(c)
        self.tok_buff.append(c)

        return c

    def peek(self) -> Optional[str]:
        '''
        Returns the next character in the input stream if it exists without
        consuming it or moving the lexer forward.  If there is no character
        ahead, then `None` is returned.
        '''

        if self.offset < len(self.source):
            return self.source[self.offset]

        return None

    def peek_next(self) -> Optional[str]:
        '''Returns the character after the next character if it exists.'''

        if self.offset + 1 < len(self.source):
            return self.source[self.offset + 1]

        return None

    def skip(self) -> bool:
        '''
        Moves the lexer forward one character without consuming it.  This method
        returns whether or not the lexer was able to move forward (ie. is the
        lexer at the end of the input stream -- true if no, false if yes).
        '''

        c = self.peek()

        if not c:
            return False

        self.offset += 1
        self.update_position(c)

        return True

    def update_position(self, c: str):
        '''
        Updates the position of the lexer based on a character.

        Params
        ------
        c: str
            The character read in.
        '''

        match c:
            case '\n':
                self.line += 1
                self.col = 1
            case '\t':
                # Tabs count as four columns.
                self.col += 4
            case _:
                self.col += 1

def is_alpha(c: str) -> bool:
    '''Returns whether a character can begin an identifier.'''

    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'

def is_digit(c: str) -> bool:
    '''Returns whether a character is an ASCII decimal digit.'''

    return '0' <= c <= '9'
