"""
編譯器模組包
負責將AST轉換為C系語言源碼
"""

from .config import CompilerConfig
from .print_writer import PrintWriter
from .indenting_print_writer import IndentingPrintWriter
from .compiler import compile_to_string
