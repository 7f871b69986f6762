"""
源碼生成入口
將AST編譯為C系語言的源碼文字
"""

import io
import logging
from typing import Optional

from .config import CompilerConfig
from .print_writer import PrintWriter

logger = logging.getLogger(__name__)


def compile_to_string(node, config: Optional[CompilerConfig] = None) -> str:
    """
    將一棵AST編譯為源碼字串

    Args:
        node: 根節點（表達式或語句）
        config: 編譯器設定（可選）

    Returns:
        生成的源碼
    """
    buffer = io.StringIO()
    out = PrintWriter(buffer, config)
    node.compile(out)
    out.flush()
    source = buffer.getvalue()
    logger.debug("compiled %s into %d characters", type(node).__name__, len(source))
    return source
