"""
錯誤處理模組
定義Wordy直譯器與編譯器核心會拋出的錯誤類型
"""

from typing import Optional


class WordyError(Exception):
    """Wordy語言錯誤的基類"""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        """
        初始化錯誤

        Args:
            message: 錯誤訊息
            line: 發生錯誤的行號（可選）
            column: 發生錯誤的列號（可選）
        """
        self.message = message
        self.line = line
        self.column = column

        # 構建帶有位置資訊的完整訊息
        if line is not None and column is not None:
            full_message = f"line {line}, column {column}: {message}"
        elif line is not None:
            full_message = f"line {line}: {message}"
        else:
            full_message = message

        super().__init__(full_message)


class EvaluationError(WordyError):
    """執行期錯誤"""
    pass


class UndefinedVariableError(EvaluationError):
    """讀取未定義的變數"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"undefined variable: {name}")


class CodegenError(WordyError):
    """代碼生成錯誤"""
    pass


class InternalCompilerError(WordyError):
    """
    內部契約違反

    只會在AST本身不合法時出現（例如未知的運算符），
    代表程式錯誤而非使用者錯誤，不應被捕捉後繼續執行。
    """
    pass
