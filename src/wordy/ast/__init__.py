"""
抽象語法樹模組
"""

from .ast_nodes import (
    ASTNode, ExpressionNode, StatementNode,
    ConstantNode, VariableNode, BinaryExpressionNode,
    AssignmentNode, BlockNode, ConditionalNode,
)
from .ast_printer import ASTPrinter
