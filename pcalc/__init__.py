"""
PCALC - Simple Calculator

one line of integer arithmetic, with an optional leading `print`:

    print (1 + 2) * -3

evaluated by a tree-walking interpreter or compiled to LLVM IR and run by
the JIT.
"""

__version__ = '0.1.0'
