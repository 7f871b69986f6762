"""
直譯器模組
負責在求值上下文中遍歷並執行AST
"""

from .evaluation_context import EvaluationContext
from .interpreter import run_program, evaluate_expression
