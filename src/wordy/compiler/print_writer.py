"""
文字輸出器
包裝任意文字串流，提供 print / println 介面給代碼生成使用
"""

from typing import Optional, TextIO

from .config import CompilerConfig


class PrintWriter:
    """文字串流上的 print / println 介面"""

    def __init__(self, stream: TextIO, config: Optional[CompilerConfig] = None):
        """
        初始化輸出器

        Args:
            stream: 目標文字串流（例如 io.StringIO 或已開啟的檔案）
            config: 編譯器設定（可選）
        """
        self.stream = stream
        self.config = config or CompilerConfig()

    def print(self, text: str) -> None:
        self.stream.write(text)

    def println(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def write(self, text: str) -> None:
        self.print(text)

    def flush(self) -> None:
        self.stream.flush()
