"""
parser: recursive descent with one token of look-ahead, builds the AST

grammar:
program             : PRINT expr EOF
                    | expr EOF
expr                : term ((PLUS | MINUS) term)*
term                : factor ((MUL | DIV) factor)*
factor              : INTEGER_CONST
                    | MINUS INTEGER_CONST
                    | LPAREN expr RPAREN
"""

from pcalc.errors import ErrorCode, ErrorInfo, LexerError, ParserError
from pcalc.lexer import INT32_MAX, Lexer, Token, TokenType


BINARY_OPERATORS = (TokenType.PLUS, TokenType.MINUS, TokenType.MUL, TokenType.DIV)


class AST:
    pass


class Num(AST):
    """integer literal
    """

    def __init__(self, token: Token, value=None):
        self.token = token
        self.value = token.value if value is None else value


class BinOp(AST):
    """left op right, op is one of + - * /
    """

    def __init__(self, left, op: Token, right):
        if op.type not in BINARY_OPERATORS:
            raise ValueError(f'{op} is not a binary operator')
        self.left = left
        self.token = self.op = op
        self.right = right


class Print(AST):
    """print statement, only at the root
    """

    def __init__(self, token: Token, expr):
        self.token = token
        self.expr = expr


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current_token = self.get_next_token()

    def get_next_token(self):
        try:
            return self.lexer.get_next_token()
        except LexerError as e:
            raise ParserError(
                ErrorCode.LEXICAL_ERROR,
                e.position,
                e.message,
                lexer_error=e,
            ) from e

    def error(self, error_code, token, message, expected=None):
        raise ParserError(error_code, token.position, message, found=token, expected=expected)

    def eat(self, token_type):
        """verify the token type, the token value does not matter
        """
        if self.current_token.type == token_type:
            self.current_token = self.get_next_token()
        else:
            self.error(
                ErrorCode.UNEXPECTED_TOKEN,
                self.current_token,
                ErrorInfo.unexpected_token(self.current_token.type.value, token_type.value),
                expected=token_type,
            )

    def program(self):
        """parse program

        program : PRINT expr EOF
                | expr EOF
        """
        if self.current_token.type == TokenType.PRINT:
            token = self.current_token
            self.eat(TokenType.PRINT)
            result = Print(token, self.expr())
        else:
            result = self.expr()

        if self.current_token.type != TokenType.EOF:
            self.error(
                ErrorCode.TRAILING_INPUT,
                self.current_token,
                ErrorInfo.trailing_input(self.current_token.value),
                expected=TokenType.EOF,
            )

        return result

    def expr(self):
        """parse expr

        expr : term ((PLUS | MINUS) term)*
        """
        result = self.term()

        while self.current_token.type in (TokenType.PLUS, TokenType.MINUS):
            op = self.current_token
            self.eat(op.type)
            result = BinOp(left=result, op=op, right=self.term())

        return result

    def term(self):
        """parse term

        term : factor ((MUL | DIV) factor)*
        """
        result = self.factor()

        while self.current_token.type in (TokenType.MUL, TokenType.DIV):
            op = self.current_token
            self.eat(op.type)
            result = BinOp(left=result, op=op, right=self.factor())

        return result

    def factor(self):
        """parse factor

        factor : INTEGER_CONST
               | MINUS INTEGER_CONST
               | LPAREN expr RPAREN
        """
        token = self.current_token
        if token.type == TokenType.INTEGER_CONST:
            # 2147483648 only fits as the operand of a signed literal
            if token.value > INT32_MAX:
                self.error(
                    ErrorCode.MALFORMED_NUMBER,
                    token,
                    ErrorInfo.malformed_number(token.value),
                )
            self.eat(TokenType.INTEGER_CONST)
            return Num(token)
        elif token.type == TokenType.MINUS:
            # signed literal, the sign binds to the number only
            self.eat(TokenType.MINUS)
            number = self.current_token
            self.eat(TokenType.INTEGER_CONST)
            return Num(number, value=-number.value)
        elif token.type == TokenType.LPAREN:
            self.eat(TokenType.LPAREN)
            result = self.expr()
            self.eat(TokenType.RPAREN)
            return result
        else:
            self.error(
                ErrorCode.UNEXPECTED_TOKEN,
                token,
                ErrorInfo.unexpected_token(token.type.value, TokenType.INTEGER_CONST.value),
                expected=TokenType.INTEGER_CONST,
            )

    def parse(self):
        return self.program()
