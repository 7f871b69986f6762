"""
直譯器入口
在給定上下文中執行語句或計算表達式
"""

import logging
from typing import Optional

from .evaluation_context import EvaluationContext

logger = logging.getLogger(__name__)


def run_program(node, context: Optional[EvaluationContext] = None) -> EvaluationContext:
    """
    執行一棵以語句為根的AST

    Args:
        node: 語句節點
        context: 求值上下文，None 時建立空的上下文

    Returns:
        執行後的上下文
    """
    if context is None:
        context = EvaluationContext()
    logger.debug("running %s", node.describe())
    node.run(context)
    return context


def evaluate_expression(node, context: Optional[EvaluationContext] = None) -> float:
    """計算一棵以表達式為根的AST"""
    if context is None:
        context = EvaluationContext()
    return node.evaluate(context)
