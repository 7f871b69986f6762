"""
Wordy 語言核心：抽象語法樹、樹狀直譯器與源碼生成器
"""

from .ast import (
    ASTNode, ExpressionNode, StatementNode,
    ConstantNode, VariableNode, BinaryExpressionNode,
    AssignmentNode, BlockNode, ConditionalNode, ASTPrinter,
)
from .compiler import CompilerConfig, PrintWriter, IndentingPrintWriter, compile_to_string
from .interpreter import EvaluationContext, run_program, evaluate_expression
from .utils.error import (
    WordyError, EvaluationError, UndefinedVariableError,
    CodegenError, InternalCompilerError,
)

__version__ = "0.1.0"
