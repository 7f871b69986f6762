"""
LLVM IR 生成器
將 Wordy 語句樹降級為 LLVM IR：

    i32 wordy_run(double* slots, i8* defined)

每個變數依首次出現順序佔用 slots 中的一格；賦值時同時將 defined
對應位置設為 1，讓執行器知道哪些變數在執行後需要寫回上下文。
讀取變數前檢查 defined，未定義時立即回傳「位置 + 1」；正常結束回傳 0。
"""

import logging
from typing import Dict, List, Optional, Set

from llvmlite import ir

from ..ast.ast_nodes import (
    ASTNode, StatementNode, ConstantNode, VariableNode, BinaryExpressionNode,
    AssignmentNode, BlockNode, ConditionalNode,
)
from ..compiler.config import CompilerConfig
from ..utils.error import CodegenError, InternalCompilerError

ENTRY_POINT = "wordy_run"

DOUBLE = ir.DoubleType()
FLAG = ir.IntType(8)
INDEX = ir.IntType(32)
STATUS = ir.IntType(32)
BITS = ir.IntType(64)


class LLVMGenerator:
    """代碼生成器 - 將 Wordy AST 轉換為 LLVM IR"""

    def __init__(self, config: Optional[CompilerConfig] = None):
        """
        初始化生成器

        Args:
            config: 編譯器設定（可選）
        """
        self.config = config or CompilerConfig()
        self.logger = logging.getLogger(__name__)
        self.module: Optional[ir.Module] = None
        self.builder: Optional[ir.IRBuilder] = None
        self.slot_names: List[str] = []
        self.read_names: Set[str] = set()
        self.assigned_names: Set[str] = set()
        self._slots: Dict[str, int] = {}

    def generate(self, node: ASTNode) -> ir.Module:
        """
        生成 LLVM 模組

        Args:
            node: 以語句為根的AST

        Returns:
            包含 wordy_run 函數的模組
        """
        if not isinstance(node, StatementNode):
            raise CodegenError(f"LLVM backend expects a statement, got {type(node).__name__}")

        self.module = ir.Module(name="wordy_module")
        self.slot_names = []
        self.read_names = set()
        self.assigned_names = set()
        self._slots = {}
        self._collect_slots(node)

        func_type = ir.FunctionType(STATUS, [DOUBLE.as_pointer(), FLAG.as_pointer()])
        func = ir.Function(self.module, func_type, name=ENTRY_POINT)
        self.slots_arg, self.defined_arg = func.args
        self.slots_arg.name = "slots"
        self.defined_arg.name = "defined"

        entry_block = func.append_basic_block(name="entry")
        self.builder = ir.IRBuilder(entry_block)
        node.accept(self)
        self.builder.ret(ir.Constant(STATUS, 0))

        self.logger.debug("generated %s with %d slots", ENTRY_POINT, len(self.slot_names))
        return self.module

    def _collect_slots(self, node: Optional[ASTNode]) -> None:
        if node is None:
            return
        if isinstance(node, VariableNode) and node.name not in self._slots:
            self._slots[node.name] = len(self.slot_names)
            self.slot_names.append(node.name)
        for child in node.get_children().values():
            self._collect_slots(child)

    def _slot_pointer(self, base, name: str):
        index = ir.Constant(INDEX, self._slots[name])
        return self.builder.gep(base, [index], inbounds=True, name=f"{name}.ptr")

    # 表達式

    def visit_constant(self, node: ConstantNode) -> ir.Value:
        return ir.Constant(DOUBLE, node.value)

    def visit_variable(self, node: VariableNode) -> ir.Value:
        self.read_names.add(node.name)
        flag = self.builder.load(self._slot_pointer(self.defined_arg, node.name), name=f"{node.name}.defined")
        undefined = self.builder.icmp_unsigned("==", flag, ir.Constant(FLAG, 0), name=f"{node.name}.undefined")
        with self.builder.if_then(undefined, likely=False):
            self.builder.ret(ir.Constant(STATUS, self._slots[node.name] + 1))
        return self.builder.load(self._slot_pointer(self.slots_arg, node.name), name=node.name)

    def visit_binary_expression(self, node: BinaryExpressionNode) -> ir.Value:
        left = node.lhs.accept(self)
        right = node.rhs.accept(self)

        Operator = BinaryExpressionNode.Operator
        if node.operator is Operator.ADDITION:
            return self.builder.fadd(left, right, name="addtmp")
        elif node.operator is Operator.SUBTRACTION:
            return self.builder.fsub(left, right, name="subtmp")
        elif node.operator is Operator.MULTIPLICATION:
            return self.builder.fmul(left, right, name="multmp")
        elif node.operator is Operator.DIVISION:
            return self.builder.fdiv(left, right, name="divtmp")
        elif node.operator is Operator.EXPONENTIATION:
            pow_func = self.module.declare_intrinsic("llvm.pow", [DOUBLE])
            return self.builder.call(pow_func, [left, right], name="powtmp")
        raise InternalCompilerError(f"unknown binary operator: {node.operator!r}")

    # 語句

    def visit_assignment(self, node: AssignmentNode) -> None:
        name = node.variable.name
        value = node.expression.accept(self)
        self.assigned_names.add(name)
        self.builder.store(value, self._slot_pointer(self.slots_arg, name))
        self.builder.store(ir.Constant(FLAG, 1), self._slot_pointer(self.defined_arg, name))

    def visit_block(self, node: BlockNode) -> None:
        for statement in node.statements:
            statement.accept(self)

    def visit_conditional(self, node: ConditionalNode) -> None:
        condition = self._gen_condition(node)
        if node.if_false is None:
            with self.builder.if_then(condition):
                node.if_true.accept(self)
            return

        with self.builder.if_else(condition) as (then, otherwise):
            with then:
                node.if_true.accept(self)
            with otherwise:
                node.if_false.accept(self)

    def _gen_condition(self, node: ConditionalNode) -> ir.Value:
        left = node.lhs.accept(self)
        right = node.rhs.accept(self)

        Operator = ConditionalNode.Operator
        if node.operator is Operator.LESS_THAN:
            return self.builder.fcmp_ordered("<", left, right, name="lttmp")
        elif node.operator is Operator.GREATER_THAN:
            return self.builder.fcmp_ordered(">", left, right, name="gttmp")
        elif node.operator is Operator.EQUALS:
            # 全序相等：兩邊皆為 NaN，或位元完全相同（區分 -0.0 與 0.0）
            left_nan = self.builder.fcmp_unordered("uno", left, left, name="lnan")
            right_nan = self.builder.fcmp_unordered("uno", right, right, name="rnan")
            both_nan = self.builder.and_(left_nan, right_nan, name="bothnan")
            left_bits = self.builder.bitcast(left, BITS, name="lbits")
            right_bits = self.builder.bitcast(right, BITS, name="rbits")
            same_bits = self.builder.icmp_unsigned("==", left_bits, right_bits, name="samebits")
            return self.builder.or_(both_nan, same_bits, name="eqtmp")
        raise InternalCompilerError(f"unknown comparison operator: {node.operator!r}")
