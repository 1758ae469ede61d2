import argparse
import sys

from pcalc import config
from pcalc.errors import Error
from pcalc.runner import Backend, run


def build_arg_parser():
    parser = argparse.ArgumentParser(prog='pcalc', description='PCALC - Simple Calculator')
    parser.add_argument(
        '-c',
        dest='command',
        metavar='TEXT',
        help='Evaluate one line and exit',
    )
    parser.add_argument(
        '--jit',
        help='Compile to LLVM IR and run it natively',
        action='store_true',
    )
    parser.add_argument(
        '--tokens',
        help='Print every token',
        action='store_true',
    )
    parser.add_argument(
        '--ir',
        help='Print generated LLVM IR to stderr',
        action='store_true',
    )
    parser.add_argument(
        '--ast',
        help='Render the abstract syntax tree to "Tree.html"',
        action='store_true',
    )
    parser.add_argument(
        '--cdn-echarts',
        help='Load echarts from the CDN in "Tree.html"',
        action='store_true',
    )
    return parser


def run_line(text, backend):
    """run one line, report errors instead of raising them

    Returns:
      True if the line evaluated
    """
    try:
        run(text, backend)
    except Error as e:
        print(e)
        return False
    return True


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    config.SHOULD_LOG_TOKENS = args.tokens
    config.SHOULD_LOG_IR = args.ir
    config.DISPLAY_AST = args.ast
    config.LOCAL_ECHARTS = not args.cdn_echarts

    backend = Backend.NATIVE if args.jit else Backend.INTERPRETER

    if args.command is not None:
        return 0 if run_line(args.command, backend) else 1

    while True:
        try:
            text = input('calc> ')
        except (EOFError, KeyboardInterrupt):
            break
        if not text.strip():
            continue

        run_line(text, backend)

    return 0


if __name__ == '__main__':
    sys.exit(main())
