"""
compiler: translate the AST into LLVM IR and run it with the JIT

The module holds one routine, `i32 @main()`, whose body is the arithmetic of
the line followed by `ret i32 0`. `print` becomes a call to the C `printf`
with a `"%d\n"` template. The final value is also stored in the `@result`
global so callers that do not print can read it back.

Division is guarded: a zero divisor, or INT32_MIN / -1, returns early from
`@main` with a non-zero ExitStatus, which `run()` raises as the same
InterpreterError the tree-walking backend raises.
"""

from enum import IntEnum
import ctypes
import sys

from llvmlite import binding
from llvmlite import ir

from pcalc import config
from pcalc.errors import CompilerError, ErrorCode, ErrorInfo, InterpreterError
from pcalc.lexer import INT32_MIN, TokenType
from pcalc.parser import BinOp, Num, Print
from pcalc.visitor import NodeVisitor, left_spine


I32 = ir.IntType(32)
I8_PTR = ir.IntType(8).as_pointer()

FORMAT_STRING = '%d\n\0'


class ExitStatus(IntEnum):
    OK                  = 0
    DIVISION_BY_ZERO    = 1
    DIVISION_OVERFLOW   = 2


_FAULTS = {
    ExitStatus.DIVISION_BY_ZERO: (ErrorCode.DIVISION_BY_ZERO, ErrorInfo.division_by_zero),
    ExitStatus.DIVISION_OVERFLOW: (ErrorCode.DIVISION_OVERFLOW, ErrorInfo.division_overflow),
}


class Compiler(NodeVisitor):
    def __init__(self, module_name='calc'):
        self.module = ir.Module(name=module_name)
        self.builder = None
        self.fn_value = None

        # int printf(char *format, ...)
        printf_type = ir.FunctionType(I32, [I8_PTR], var_arg=True)
        self.printf = ir.Function(self.module, printf_type, name='printf')

        fmt = ir.Constant(
            ir.ArrayType(ir.IntType(8), len(FORMAT_STRING)),
            bytearray(FORMAT_STRING.encode('ascii')),
        )
        self.format_str = ir.GlobalVariable(self.module, fmt.type, name='format_str')
        self.format_str.linkage = 'private'
        self.format_str.global_constant = True
        self.format_str.initializer = fmt

        self.result = ir.GlobalVariable(self.module, I32, name='result')
        self.result.initializer = ir.Constant(I32, 0)

    def log(self, msg):
        if config.SHOULD_LOG_IR:
            print(msg, file=sys.stderr)

    def create_main_function(self):
        fn_type = ir.FunctionType(I32, [])
        self.fn_value = ir.Function(self.module, fn_type, name='main')
        basic_block = self.fn_value.append_basic_block(name='entry')
        self.builder = ir.IRBuilder(basic_block)

    def finish_main_function(self, value):
        self.builder.store(value, self.result)
        self.builder.ret(ir.Constant(I32, int(ExitStatus.OK)))

    def guard(self, cond, status):
        """return `status` from main when `cond` holds at run time
        """
        with self.builder.if_then(cond, likely=False):
            self.builder.ret(ir.Constant(I32, int(status)))

    def visit_BinOp(self, node: BinOp):
        chain = left_spine(node)
        value = self.visit(chain[0].left)
        for binop in chain:
            value = self.emit_op(binop, value, self.visit(binop.right))
        return value

    def emit_op(self, node: BinOp, lhs, rhs):
        if node.op.type == TokenType.PLUS:
            return self.builder.add(lhs, rhs, name='tmpadd')
        elif node.op.type == TokenType.MINUS:
            return self.builder.sub(lhs, rhs, name='tmpsub')
        elif node.op.type == TokenType.MUL:
            return self.builder.mul(lhs, rhs, name='tmpmul')
        else:   # node.op.type == DIV
            is_zero = self.builder.icmp_signed('==', rhs, ir.Constant(I32, 0), name='divzero')
            self.guard(is_zero, ExitStatus.DIVISION_BY_ZERO)
            overflow = self.builder.and_(
                self.builder.icmp_signed('==', lhs, ir.Constant(I32, INT32_MIN)),
                self.builder.icmp_signed('==', rhs, ir.Constant(I32, -1)),
                name='divoverflow',
            )
            self.guard(overflow, ExitStatus.DIVISION_OVERFLOW)
            return self.builder.sdiv(lhs, rhs, name='tmpdiv')

    def visit_Num(self, node: Num):
        return ir.Constant(I32, node.value)

    def visit_Print(self, node: Print):
        value = self.visit(node.expr)
        format_ptr = self.builder.bitcast(self.format_str, I8_PTR)
        self.builder.call(self.printf, [format_ptr, value], name='printf_call')
        return value

    def compile(self, tree):
        """emit the whole line as `@main`

        Returns:
          ir.Module
        """
        self.create_main_function()
        value = self.visit(tree)
        self.finish_main_function(value)
        return self.module

    def run(self, tree):
        """compile `tree`, JIT it and run `@main`

        Returns:
          the value of the line, as the interpreter would return it
        """
        llvm_ir = str(self.compile(tree))
        self.log(llvm_ir)

        binding.initialize_native_target()
        binding.initialize_native_asmprinter()

        try:
            target = binding.Target.from_default_triple()
            target_machine = target.create_target_machine()
            mod = binding.parse_assembly(llvm_ir)
            mod.verify()
            engine = binding.create_mcjit_compiler(mod, target_machine)
            engine.finalize_object()
            engine.run_static_constructors()
        except RuntimeError as e:
            raise CompilerError(ErrorCode.NATIVE_BACKEND_FAILURE, None, str(e)) from e

        main = ctypes.CFUNCTYPE(ctypes.c_int32)(engine.get_function_address('main'))

        # python and C stdio buffer stdout separately
        sys.stdout.flush()
        status = main()
        _libc.fflush(None)

        if status != ExitStatus.OK:
            error_code, message = _FAULTS[ExitStatus(status)]
            raise InterpreterError(error_code, None, message())

        return ctypes.c_int32.from_address(engine.get_global_value_address('result')).value


_libc = ctypes.CDLL(None)
