"""
LLVM IR 執行功能
以 MCJIT 即時編譯 Wordy 程式並在求值上下文上執行
"""

import ctypes
import logging
from typing import Optional

import llvmlite.binding as llvm

from ..codegen.llvm_generator import LLVMGenerator, ENTRY_POINT
from ..compiler.config import CompilerConfig
from ..interpreter.evaluation_context import EvaluationContext
from .error import UndefinedVariableError

logger = logging.getLogger(__name__)

_initialized = False


def initialize_llvm() -> None:
    """初始化 LLVM 原生目標，只執行一次"""
    global _initialized
    if _initialized:
        return
    try:
        llvm.initialize()
    except RuntimeError as e:
        # 新版 llvmlite 會自動完成核心初始化，並拒絕舊的呼叫方式
        logger.debug("llvm.initialize() skipped: %s", e)
    llvm.initialize_native_target()
    llvm.initialize_native_asmprinter()
    _initialized = True
    logger.info("LLVM native target initialized")


class IRExecutor:
    """
    LLVM IR 執行器類
    負責生成、驗證並執行 Wordy 程式對應的 LLVM IR
    """

    def __init__(self, config: Optional[CompilerConfig] = None):
        """
        初始化執行器

        Args:
            config: 編譯器設定（可選）
        """
        self.config = config or CompilerConfig()
        self.logger = logging.getLogger(__name__)
        initialize_llvm()

    def generate_ir(self, node) -> str:
        """生成帶目標三元組的 LLVM IR 字串"""
        return str(self._generate(node)[0])

    def _generate(self, node):
        generator = LLVMGenerator(self.config)
        module = generator.generate(node)
        module.triple = llvm.get_process_triple()
        return module, generator

    def run(self, node, context: Optional[EvaluationContext] = None) -> EvaluationContext:
        """
        JIT 編譯並執行語句樹

        Args:
            node: 以語句為根的AST
            context: 求值上下文，None 時建立空的上下文

        Returns:
            執行後的上下文
        """
        if context is None:
            context = EvaluationContext()

        module, generator = self._generate(node)

        self.logger.info("開始執行LLVM IR...")
        llvm_module = llvm.parse_assembly(str(module))
        llvm_module.verify()

        # 執行引擎會接管並釋放目標機器，每次執行都需要新的實例
        target_machine = llvm.Target.from_default_triple().create_target_machine()
        engine = llvm.create_mcjit_compiler(llvm_module, target_machine)
        engine.finalize_object()
        engine.run_static_constructors()

        func_ptr = engine.get_function_address(ENTRY_POINT)
        cfunc = ctypes.CFUNCTYPE(
            ctypes.c_int32, ctypes.POINTER(ctypes.c_double), ctypes.POINTER(ctypes.c_uint8)
        )(func_ptr)

        names = generator.slot_names
        slots = (ctypes.c_double * len(names))(
            *[context.get(name) if context.contains(name) else 0.0 for name in names]
        )
        defined = (ctypes.c_uint8 * len(names))(
            *[1 if context.contains(name) else 0 for name in names]
        )
        status = cfunc(slots, defined)

        # 出錯前已完成的賦值與直譯器一樣保留在上下文中
        for index, name in enumerate(names):
            if defined[index]:
                context.set(name, slots[index])
        if status:
            raise UndefinedVariableError(names[status - 1])
        self.logger.info("LLVM IR 執行完成")
        return context
