"""
AST節點模型測試
測試結構相等、子節點順序與除錯表示
"""

import dataclasses
import math
import os
import sys
import unittest

# 將源碼目錄添加到路徑中
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from wordy.ast.ast_nodes import (
    ASTNode, ExpressionNode, StatementNode,
    ConstantNode, VariableNode, BinaryExpressionNode,
    AssignmentNode, BlockNode, ConditionalNode,
)

Op = BinaryExpressionNode.Operator
Cmp = ConditionalNode.Operator


class TestASTNodes(unittest.TestCase):
    """AST節點測試類"""

    def setUp(self):
        """設置測試環境"""
        self.x = VariableNode("x")
        self.y = VariableNode("y")

    def test_structural_equality(self):
        """測試結構相等"""
        a = BinaryExpressionNode(Op.ADDITION, self.x, ConstantNode(1))
        b = BinaryExpressionNode(Op.ADDITION, VariableNode("x"), ConstantNode(1.0))
        self.assertEqual(a, a)
        self.assertEqual(a, b)
        self.assertEqual(b, a)
        self.assertEqual(hash(a), hash(b))

    def test_operator_discriminates(self):
        """相同操作數、不同運算符不相等"""
        add = BinaryExpressionNode(Op.ADDITION, self.x, self.y)
        sub = BinaryExpressionNode(Op.SUBTRACTION, self.x, self.y)
        self.assertNotEqual(add, sub)

    def test_kind_discriminates(self):
        """不同節點類型永不相等"""
        self.assertNotEqual(ConstantNode(1), VariableNode("x"))
        assign = AssignmentNode(self.x, self.y)
        block = BlockNode([assign])
        self.assertNotEqual(block, assign)
        self.assertNotEqual(self.x, "x")

    def test_children_recursive_equality(self):
        """子節點遞迴比較"""
        first = ConditionalNode(Cmp.LESS_THAN, self.x, self.y, AssignmentNode(self.x, ConstantNode(1)))
        second = ConditionalNode(Cmp.LESS_THAN, self.x, self.y, AssignmentNode(self.x, ConstantNode(2)))
        self.assertNotEqual(first, second)
        with_else = ConditionalNode(
            Cmp.LESS_THAN, self.x, self.y,
            AssignmentNode(self.x, ConstantNode(1)),
            AssignmentNode(self.x, ConstantNode(1)),
        )
        self.assertNotEqual(first, with_else)

    def test_constant_equality_uses_total_order(self):
        """常量相等與 EQUALS 的全序一致"""
        self.assertNotEqual(ConstantNode(0.0), ConstantNode(-0.0))
        self.assertEqual(ConstantNode(float("nan")), ConstantNode(float("nan")))
        self.assertEqual(hash(ConstantNode(float("nan"))), hash(ConstantNode(math.nan)))
        self.assertNotEqual(
            BinaryExpressionNode(Op.ADDITION, self.x, ConstantNode(0.0)),
            BinaryExpressionNode(Op.ADDITION, self.x, ConstantNode(-0.0)),
        )
        self.assertEqual(len({ConstantNode(1), ConstantNode(1.0), ConstantNode(-0.0)}), 2)

    def test_abstract_bases(self):
        """缺少必要方法的節點無法建立"""
        class Incomplete(StatementNode):
            def accept(self, visitor):
                return None

        with self.assertRaises(TypeError):
            ASTNode()
        with self.assertRaises(TypeError):
            ExpressionNode()
        with self.assertRaises(TypeError):
            Incomplete()

    def test_binary_children_order(self):
        """二元表達式子節點順序"""
        node = BinaryExpressionNode(Op.DIVISION, self.x, self.y)
        self.assertEqual(list(node.get_children().items()), [("lhs", self.x), ("rhs", self.y)])

    def test_conditional_children_order(self):
        """條件語句子節點順序，缺少的 else 保留位置"""
        if_true = AssignmentNode(self.x, ConstantNode(1))
        node = ConditionalNode(Cmp.EQUALS, self.x, self.y, if_true)
        children = node.get_children()
        self.assertEqual(list(children), ["lhs", "rhs", "ifTrue", "ifFalse"])
        self.assertIs(children["ifTrue"], if_true)
        self.assertIsNone(children["ifFalse"])

    def test_block_children(self):
        """代碼塊子節點以序號命名"""
        first = AssignmentNode(self.x, ConstantNode(1))
        second = AssignmentNode(self.y, ConstantNode(2))
        block = BlockNode([first, second])
        self.assertEqual(list(block.get_children().items()), [("0", first), ("1", second)])
        self.assertIsInstance(block.statements, tuple)

    def test_immutable(self):
        """節點建構後不可變"""
        node = BinaryExpressionNode(Op.ADDITION, self.x, self.y)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            node.lhs = self.y

    def test_describe_attributes(self):
        """屬性描述"""
        self.assertEqual(
            BinaryExpressionNode(Op.EXPONENTIATION, self.x, self.y).describe_attributes(),
            "(operator=EXPONENTIATION)",
        )
        self.assertEqual(
            ConditionalNode(Cmp.GREATER_THAN, self.x, self.y, AssignmentNode(self.x, self.y)).describe(),
            "ConditionalNode(operator=GREATER_THAN)",
        )
        self.assertEqual(BlockNode([]).describe_attributes(), "")

    def test_repr(self):
        """除錯表示包含類型、屬性與子節點"""
        node = BinaryExpressionNode(Op.ADDITION, self.x, ConstantNode(2))
        self.assertEqual(
            repr(node),
            "BinaryExpressionNode(operator=ADDITION, lhs=VariableNode('x'), rhs=ConstantNode(2.0))",
        )
        self.assertEqual(repr(node), repr(BinaryExpressionNode(Op.ADDITION, VariableNode("x"), ConstantNode(2))))


if __name__ == '__main__':
    unittest.main()
