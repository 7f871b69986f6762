"""
縮排輸出器
在每一行開頭自動加上固定前綴，讓巢狀區塊的輸出不必自行追蹤縮排
"""


class IndentingPrintWriter:
    """
    包裝另一個輸出器，為每個邏輯行加上前綴

    前綴在每行第一段非空文字之前寫出一次；println 或文字中的換行
    會重新設定「待縮排」狀態。多層包裝會累加前綴。空行不加前綴。
    """

    def __init__(self, out, line_prefix: str):
        """
        初始化縮排輸出器

        Args:
            out: 被包裝的輸出器（PrintWriter 或另一個 IndentingPrintWriter）
            line_prefix: 每行前綴
        """
        self._out = out
        self.line_prefix = line_prefix
        self.indent_pending = True

    @property
    def config(self):
        return self._out.config

    def print(self, text: str) -> None:
        for index, line in enumerate(text.split("\n")):
            if index > 0:
                self._newline()
            if not line:
                continue
            if self.indent_pending:
                self.indent_pending = False
                self._out.print(self.line_prefix)
            self._out.print(line)

    def println(self, text: str = "") -> None:
        self.print(text)
        self._newline()

    def write(self, text: str) -> None:
        self.print(text)

    def flush(self) -> None:
        self._out.flush()

    def _newline(self) -> None:
        self._out.println()
        self.indent_pending = True
