"""
interpreter: walk the AST and reduce it to a 32-bit signed integer

arithmetic wraps around like the native i32 instructions the compiler emits,
division truncates toward zero.
"""

from pcalc.errors import ErrorCode, ErrorInfo, InterpreterError
from pcalc.lexer import INT32_MIN, TokenType
from pcalc.parser import BinOp, Num, Print
from pcalc.visitor import NodeVisitor, left_spine


def to_int32(value):
    """wrap an unbounded int into the 32-bit two's complement range
    """
    return (value - INT32_MIN) % 2 ** 32 + INT32_MIN


def truncate_div(left, right):
    """signed division rounding toward zero, like C and LLVM `sdiv`
    """
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class Interpreter(NodeVisitor):
    def __init__(self, tree) -> None:
        self.tree = tree

    def error(self, error_code, token, message):
        raise InterpreterError(error_code, token.position, message)

    def visit_BinOp(self, node: BinOp):
        chain = left_spine(node)
        # left first, the compiler emits in the same order
        result = self.visit(chain[0].left)
        for binop in chain:
            result = self.apply(binop, result, self.visit(binop.right))
        return result

    def apply(self, node: BinOp, left, right):
        if node.op.type == TokenType.PLUS:
            return to_int32(left + right)
        elif node.op.type == TokenType.MINUS:
            return to_int32(left - right)
        elif node.op.type == TokenType.MUL:
            return to_int32(left * right)
        else:   # node.op.type == DIV
            if right == 0:
                self.error(ErrorCode.DIVISION_BY_ZERO, node.op, ErrorInfo.division_by_zero())
            if left == INT32_MIN and right == -1:
                self.error(ErrorCode.DIVISION_OVERFLOW, node.op, ErrorInfo.division_overflow())
            return truncate_div(left, right)

    def visit_Num(self, node: Num):
        return node.value

    def visit_Print(self, node: Print):
        value = self.visit(node.expr)
        print(value)
        return value

    def interpret(self):
        return self.visit(self.tree)
