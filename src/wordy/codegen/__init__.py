"""
代碼生成模組包
負責將AST轉換為LLVM IR
"""

from .llvm_generator import LLVMGenerator, ENTRY_POINT
