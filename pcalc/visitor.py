from pcalc.parser import BinOp


class NodeVisitor:
    def visit(self, node):
        """dispatches
        """
        method_name = 'visit_' + type(node).__name__
        visitor = getattr(self, method_name, self.generic_visitor)
        return visitor(node)

    def generic_visitor(self, node):
        raise NotImplementedError(f'No visit_{type(node).__name__} method')


def left_spine(node):
    """the chain of BinOp nodes along the left edge of `node`, innermost first

    `1+2+3` parses as `(1+2)+3`, so a long sum is one deep left spine.
    Walkers loop over it, recursion depth follows parenthesis nesting only.
    """
    chain = []
    while isinstance(node, BinOp):
        chain.append(node)
        node = node.left
    chain.reverse()
    return chain
