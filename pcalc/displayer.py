"""
displayer: render the AST as a top-to-bottom tree chart

open the generated html in a browser; with config.LOCAL_ECHARTS the page
loads `echarts.min.js` from its own directory instead of the CDN.
"""

import re

from pyecharts import options as opts
from pyecharts.charts import Tree

from pcalc import config
from pcalc.parser import BinOp, Num, Print
from pcalc.visitor import NodeVisitor, left_spine


ECHARTS_SCRIPT = re.compile(r'src="[^"]*echarts\.min\.js"')


class Displayer(NodeVisitor):
    def __init__(self, tree) -> None:
        self.tree = tree

    def visit_BinOp(self, node: BinOp):
        chain = left_spine(node)
        data = self.visit(chain[0].left)
        for binop in chain:
            data = {
                'name': f'{binop.op.value}',
                'children': [data, self.visit(binop.right)]
            }
        return data

    def visit_Num(self, node: Num):
        data = {
            'name': f'{node.value}'
        }
        return data

    def visit_Print(self, node: Print):
        data = {
            'name': 'print',
            'children': [self.visit(node.expr)]
        }
        return data

    def display(self, path='Tree.html'):
        data = self.visit(self.tree)
        (
            Tree()
            .add(
                series_name="",         # name
                data=[data],            # data
                initial_tree_depth=-1,  # all expand
                orient="TB",            # top-to-bottom
                label_opts=opts.LabelOpts(
                    position="top",
                    vertical_align="middle",
                ),
            )
            .set_global_opts(title_opts=opts.TitleOpts(title="Tree"))
            .render(path)
        )

        if config.LOCAL_ECHARTS:
            with open(path, 'r', encoding='utf-8') as fin:
                content = fin.read()
            content = ECHARTS_SCRIPT.sub('src="echarts.min.js"', content)
            with open(path, 'w', encoding='utf-8') as fout:
                fout.write(content)

        return path
