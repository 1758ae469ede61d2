"""
lexer: break one line of text apart into tokens, one token per call

tokens:
INTEGER_CONST       : [0-9]+
PRINT               : 'print'
PLUS MINUS MUL DIV  : '+' '-' '*' '/'
LPAREN RPAREN       : '(' ')'
"""

from enum import Enum

from pcalc import config
from pcalc.errors import ErrorCode, ErrorInfo, LexerError, Position


INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

WHITESPACE = ' \t\n\r'
DIGITS = '0123456789'


# Token types
class TokenType(Enum):
    # misc
    INTEGER_CONST   = 'INTEGER_CONST'
    EOF             = 'EOF'
    # opt
    PLUS            = '+'
    MINUS           = '-'
    MUL             = '*'
    DIV             = '/'
    LPAREN          = '('
    RPAREN          = ')'
    # keywords
    PRINT           = 'print'


SINGLE_CHAR_TOKENS = {
    token_type.value: token_type
    for token_type in (
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.MUL,
        TokenType.DIV,
        TokenType.LPAREN,
        TokenType.RPAREN,
    )
}


class Token:
    def __init__(self, token_type, value, position):
        """Token

        Args:
          token_type: TokenType
          value: int for INTEGER_CONST, the source text otherwise, None for EOF
          position: Position
        """
        self.type = token_type
        self.value = value
        self.position = position

    def __str__(self):
        if self.position is None:
            return f'Token({self.type}, {repr(self.value)})'
        return f'Token({self.type}, {repr(self.value)}, pos={self.position.line}:{self.position.col})'

    def __repr__(self):
        return self.__str__()


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None
        # type of the token returned last, a minus admits one more magnitude
        self.last_type = None
        # for error information
        self.line = 1
        self.col = 1

    def position(self):
        return Position(self.line, self.col)

    def error(self, error_code, message, found=None, expected=None):
        raise LexerError(error_code, self.position(), message, found=found, expected=expected)

    def log(self, msg):
        if config.SHOULD_LOG_TOKENS:
            print(msg)

    def advance(self):
        """get next char, and increse the pos pointer

        advance the 'pos' pointer and set the 'current_char' variable.
        """
        if self.current_char == '\n':
            self.line += 1
            self.col = 0

        self.pos += 1
        self.col += 1
        if self.pos > len(self.text) - 1:
            self.current_char = None  # end of input
        else:
            self.current_char = self.text[self.pos]

    def skip_whitespace(self):
        while self.current_char is not None and self.current_char in WHITESPACE:
            self.advance()

    def number(self):
        """parse an integer from the input, it must fit in 32 bits

        after a minus the run may be 2147483648, the magnitude of INT32_MIN;
        the parser rejects it unless the minus makes it a signed literal.
        """
        position = self.position()
        limit = INT32_MAX + 1 if self.last_type == TokenType.MINUS else INT32_MAX

        result = ''
        while self.current_char is not None and self.current_char in DIGITS:
            result += self.current_char
            self.advance()

        value = int(result)
        if value > limit:
            raise LexerError(
                ErrorCode.MALFORMED_NUMBER,
                position,
                ErrorInfo.malformed_number(result),
                found=result,
            )

        return Token(TokenType.INTEGER_CONST, value, position)

    def keyword(self):
        """parse the `print` keyword, every char must match
        """
        position = self.position()
        want = TokenType.PRINT.value

        for char in want:
            if self.current_char != char:
                self.error(
                    ErrorCode.EXPECTED_KEYWORD,
                    ErrorInfo.expected_keyword(want, self.current_char),
                    found=self.current_char,
                    expected=want,
                )
            self.advance()

        return Token(TokenType.PRINT, want, position)

    def get_next_token(self):
        """lexical analyzer, lexer, scanner, tokenizer

        breaking a sentence apart into tokens. One token one time.
        Once the input is exhausted every call returns an EOF token.
        """
        token = self.scan()
        self.last_type = token.type
        self.log(token)
        return token

    def scan(self):
        while self.current_char is not None:
            # space
            if self.current_char in WHITESPACE:
                self.skip_whitespace()
                continue

            # digit -> integer
            if self.current_char in DIGITS:
                return self.number()

            # p -> print
            if self.current_char == 'p':
                return self.keyword()

            # single-char token
            token_type = SINGLE_CHAR_TOKENS.get(self.current_char)
            if token_type is None:
                self.error(
                    ErrorCode.UNEXPECTED_CHAR,
                    ErrorInfo.unexpected_char(self.current_char),
                    found=self.current_char,
                )

            token = Token(token_type, self.current_char, self.position())
            self.advance()
            return token

        return Token(TokenType.EOF, None, self.position())
