"""
run one line of input through the whole pipeline

    text -> Lexer -> Parser -> AST -> Interpreter | Compiler
"""

from enum import Enum

from pcalc import config
from pcalc.errors import CompilerError, ErrorCode, ErrorInfo, InterpreterError, ParserError
from pcalc.interpreter import Interpreter
from pcalc.lexer import Lexer
from pcalc.parser import Parser


class Backend(Enum):
    INTERPRETER = 'interpret'
    NATIVE      = 'jit'


def parse(text):
    lexer = Lexer(text)
    parser = Parser(lexer)
    try:
        return parser.parse()
    except RecursionError:
        raise ParserError(ErrorCode.NESTING_TOO_DEEP, None, ErrorInfo.nesting_too_deep()) from None


def run(text, backend=Backend.INTERPRETER):
    """evaluate `text`, printing if it starts with `print`

    Returns:
      int, the value of the expression
    """
    tree = parse(text)

    if config.DISPLAY_AST:
        from pcalc.displayer import Displayer
        Displayer(tree).display()

    if backend is Backend.NATIVE:
        # llvmlite is only needed on this path
        from pcalc.compiler import Compiler
        try:
            return Compiler().run(tree)
        except RecursionError:
            raise CompilerError(ErrorCode.NESTING_TOO_DEEP, None, ErrorInfo.nesting_too_deep()) from None

    try:
        return Interpreter(tree).interpret()
    except RecursionError:
        raise InterpreterError(ErrorCode.NESTING_TOO_DEEP, None, ErrorInfo.nesting_too_deep()) from None
