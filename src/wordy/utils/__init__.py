"""
工具模組
錯誤類型、日誌與LLVM JIT執行器
"""

from .error import (
    WordyError, EvaluationError, UndefinedVariableError,
    CodegenError, InternalCompilerError,
)
from .logger import setup_global_logging
