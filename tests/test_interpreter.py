import pytest

from pcalc.errors import ErrorCode, InterpreterError
from pcalc.interpreter import Interpreter, to_int32, truncate_div
from pcalc.lexer import INT32_MAX, INT32_MIN
from pcalc.runner import parse, run


def evaluate(text):
    return Interpreter(parse(text)).interpret()


@pytest.mark.parametrize('n', [0, 1, -1, 42, -42, 1000000, INT32_MAX, -INT32_MAX, INT32_MIN])
def test_literal_round_trip(n):
    assert evaluate(str(n)) == n


def test_left_associativity():
    assert evaluate('8-3-2') == 3
    assert evaluate('64/4/2') == 8


def test_precedence():
    assert evaluate('2+3*4') == 14
    assert evaluate('(2+3)*4') == 20
    assert evaluate('2*3+4*5') == 26


def test_division_truncates_toward_zero():
    assert evaluate('7/2') == 3
    assert evaluate('-7/2') == -3
    assert evaluate('7/-2') == -3
    assert evaluate('-7/-2') == 3


def test_arithmetic_wraps_to_32_bits():
    assert evaluate('2147483647+1') == INT32_MIN
    assert evaluate('-2147483647-2') == INT32_MAX
    assert evaluate('65536*65536') == 0


def test_division_by_zero():
    with pytest.raises(InterpreterError) as exc:
        evaluate('1/0')
    assert exc.value.error_code == ErrorCode.DIVISION_BY_ZERO
    assert exc.value.position.col == 2


def test_division_by_computed_zero():
    with pytest.raises(InterpreterError) as exc:
        evaluate('10/(3-3)')
    assert exc.value.error_code == ErrorCode.DIVISION_BY_ZERO


def test_division_overflow():
    with pytest.raises(InterpreterError) as exc:
        evaluate('(-2147483647-1)/-1')
    assert exc.value.error_code == ErrorCode.DIVISION_OVERFLOW


def test_print_writes_and_returns(capsys):
    assert evaluate('print 5') == 5
    assert capsys.readouterr().out == '5\n'


def test_print_negative(capsys):
    assert evaluate('print 3 - 10') == -7
    assert capsys.readouterr().out == '-7\n'


def test_no_output_without_print(capsys):
    assert evaluate('1+1') == 2
    assert capsys.readouterr().out == ''


def test_failed_print_writes_nothing(capsys):
    with pytest.raises(InterpreterError):
        evaluate('print 1/0')
    assert capsys.readouterr().out == ''


def test_visit_subtree():
    tree = parse('(1+2)*(3+4)')
    interpreter = Interpreter(tree)
    assert interpreter.visit(tree.left) == 3
    assert interpreter.visit(tree.right) == 7


def test_run_uses_interpreter_by_default():
    assert run('1+2*3') == 7


def test_to_int32():
    assert to_int32(INT32_MAX) == INT32_MAX
    assert to_int32(INT32_MIN) == INT32_MIN
    assert to_int32(INT32_MAX + 1) == INT32_MIN
    assert to_int32(-2 ** 32 + 5) == 5


def test_truncate_div():
    assert truncate_div(9, 3) == 3
    assert truncate_div(-9, 4) == -2
    assert truncate_div(0, -4) == 0


def test_int32_min_literal():
    assert evaluate(str(INT32_MIN)) == INT32_MIN
    assert evaluate('1--2147483648') == -INT32_MAX


def test_long_sum():
    assert run('+'.join(['1'] * 5000)) == 5000


def test_long_mixed_chain():
    text = '1000000' + '/1*1' * 3000 + '-999999' + '+0' * 3000
    assert run(text) == 1


def test_long_print(capsys):
    assert run('print ' + '-'.join(['2'] * 3000)) == 2 - 2 * 2999
    assert capsys.readouterr().out == f'{2 - 2 * 2999}\n'


def test_nested_parentheses():
    assert run('(' * 100 + '7' + ')' * 100) == 7
    assert run('1+(' * 100 + '1' + ')' * 100) == 101


def test_deep_parentheses():
    from pcalc.errors import ParserError
    with pytest.raises(ParserError) as exc:
        run('(' * 5000 + '1' + ')' * 5000)
    assert exc.value.error_code == ErrorCode.NESTING_TOO_DEEP


def test_deep_tree(monkeypatch, right_nested_sum):
    from pcalc import runner
    monkeypatch.setattr(runner, 'parse', lambda text: right_nested_sum(5000))
    with pytest.raises(InterpreterError) as exc:
        run('deep')
    assert exc.value.error_code == ErrorCode.NESTING_TOO_DEEP


def test_moderately_deep_tree(right_nested_sum):
    assert Interpreter(right_nested_sum(200)).interpret() == 201
