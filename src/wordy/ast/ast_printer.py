"""
AST打印器模組
用於在調試時美觀地打印抽象語法樹結構
"""

from typing import List, Optional

from .ast_nodes import ASTNode


class ASTPrinter:
    """抽象語法樹打印器，只依賴 get_children，不需知道具體節點類型"""

    def __init__(self, indent_width: int = 2):
        """
        初始化AST打印器

        Args:
            indent_width: 每層縮排的空格數
        """
        self.indent_width = indent_width

    def format(self, node: ASTNode) -> str:
        """將整棵樹格式化為多行字串"""
        lines: List[str] = []
        self._format_node(node, None, 0, lines)
        return "\n".join(lines) + "\n"

    def print(self, node: ASTNode) -> None:
        """打印AST節點"""
        print(self.format(node), end="")

    def _format_node(self, node: Optional[ASTNode], role: Optional[str], depth: int, lines: List[str]):
        prefix = " " * (self.indent_width * depth)
        label = f"{role}: " if role is not None else ""
        if node is None:
            lines.append(f"{prefix}{label}None")
            return
        lines.append(f"{prefix}{label}{node.describe()}")
        for child_role, child in node.get_children().items():
            self._format_node(child, child_role, depth + 1, lines)
