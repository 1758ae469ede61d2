"""
errors raised by every stage of the calculator

- LexerError, ParserError: invalid input
- InterpreterError: arithmetic fault while evaluating (both backends)
- CompilerError: native backend could not build or run the module
"""

from collections import namedtuple
from enum import Enum


Position = namedtuple('Position', ['line', 'col'])


class ErrorCode(Enum):
    # lexer
    UNEXPECTED_CHAR         = 'Unexpected char'
    MALFORMED_NUMBER        = 'Malformed number'
    EXPECTED_KEYWORD        = 'Expected keyword'
    # parser, invalid syntax
    UNEXPECTED_TOKEN        = 'Unexpected token'
    TRAILING_INPUT          = 'Trailing input'
    LEXICAL_ERROR           = 'Lexical error'
    # any stage
    NESTING_TOO_DEEP        = 'Nesting too deep'
    # interpreter
    DIVISION_BY_ZERO        = 'Division by zero'
    DIVISION_OVERFLOW       = 'Division overflow'
    # compiler
    NATIVE_BACKEND_FAILURE  = 'Native backend failure'


class ErrorInfo:
    # lexer error

    @staticmethod
    def unexpected_char(item):
        return f'unexpected char `{item}`'

    @staticmethod
    def malformed_number(item):
        return f'number `{item}` does not fit in 32 bits'

    @staticmethod
    def expected_keyword(want, item):
        found = 'end of input' if item is None else f'`{item}`'
        return f'expected keyword `{want}`, found {found}'

    # parser error

    @staticmethod
    def unexpected_token(item, want):
        return f'token `{item}` is not expected, want `{want}`'

    @staticmethod
    def trailing_input(item):
        return f'trailing input starting at token `{item}`'

    @staticmethod
    def nesting_too_deep():
        return 'expression is nested too deeply'

    # interpreter error

    @staticmethod
    def division_by_zero():
        return 'division by zero'

    @staticmethod
    def division_overflow():
        return 'division overflows 32-bit integer'


class Error(Exception):
    def __init__(self, error_code, position, message):
        super().__init__(message)
        self.error_code = error_code
        self.position = position
        self.message = message

    def __str__(self):
        if self.position is None:
            return f'{self.__class__.__name__}: {self.message}'
        return f'{self.__class__.__name__}: <{self.position.line}:{self.position.col}>: {self.message}'

    __repr__ = __str__


class LexerError(Error):
    def __init__(self, error_code, position, message, found=None, expected=None):
        super().__init__(error_code, position, message)
        self.found = found
        self.expected = expected


class ParserError(Error):
    def __init__(self, error_code, position, message, found=None, expected=None, lexer_error=None):
        super().__init__(error_code, position, message)
        self.found = found
        self.expected = expected
        self.lexer_error = lexer_error


class InterpreterError(Error):
    pass


class CompilerError(Error):
    pass
