import pytest

from pcalc.lexer import Token, TokenType
from pcalc.parser import BinOp, Num


@pytest.fixture
def right_nested_sum():
    """build 1+(1+(1+...)) directly, deeper than the parser accepts
    """
    def build(depth):
        one = Token(TokenType.INTEGER_CONST, 1, None)
        plus = Token(TokenType.PLUS, '+', None)
        tree = Num(one)
        for _ in range(depth):
            tree = BinOp(Num(one), plus, tree)
        return tree

    return build
