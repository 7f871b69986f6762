"""
AST打印器測試
"""

import io
import os
import sys
import unittest
from contextlib import redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from wordy.ast import ASTPrinter, ConstantNode, VariableNode, AssignmentNode, BlockNode, ConditionalNode


class TestASTPrinter(unittest.TestCase):
    """AST打印器測試類"""

    def setUp(self):
        """設置測試環境"""
        self.node = ConditionalNode(
            ConditionalNode.Operator.LESS_THAN, VariableNode("x"), ConstantNode(2),
            AssignmentNode(VariableNode("y"), ConstantNode(1)),
        )

    def test_format(self):
        """依子節點順序縮排輸出"""
        expected = (
            "ConditionalNode(operator=LESS_THAN)\n"
            "  lhs: VariableNode(name=x)\n"
            "  rhs: ConstantNode(value=2.0)\n"
            "  ifTrue: AssignmentNode\n"
            "    variable: VariableNode(name=y)\n"
            "    expression: ConstantNode(value=1.0)\n"
            "  ifFalse: None\n"
        )
        self.assertEqual(ASTPrinter().format(self.node), expected)

    def test_block_and_width(self):
        """代碼塊子節點與縮排寬度"""
        block = BlockNode([AssignmentNode(VariableNode("a"), ConstantNode(0))])
        self.assertEqual(
            ASTPrinter(indent_width=4).format(block),
            "BlockNode\n"
            "    0: AssignmentNode\n"
            "        variable: VariableNode(name=a)\n"
            "        expression: ConstantNode(value=0.0)\n",
        )

    def test_print(self):
        """打印到標準輸出"""
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            ASTPrinter().print(self.node)
        self.assertEqual(buffer.getvalue(), ASTPrinter().format(self.node))


if __name__ == '__main__':
    unittest.main()
