"""
Wordy 語言抽象語法樹節點定義

節點分為兩類：表達式節點計算出一個 double 值，語句節點對求值上下文
產生副作用。所有節點建構後不可變，並支援結構相等比較、除錯表示，
以及依宣告順序列出具名子節點。
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Tuple

from ..compiler.indenting_print_writer import IndentingPrintWriter
from ..interpreter import ieee
from ..utils.error import InternalCompilerError

logger = logging.getLogger(__name__)


class ASTNode(ABC):
    """抽象語法樹節點基類"""

    def get_children(self) -> Dict[str, Optional["ASTNode"]]:
        """
        依宣告順序回傳具名子節點

        Returns:
            角色名稱到子節點的有序映射；缺少的可選子節點以 None 佔位
        """
        return {}

    def describe_attributes(self) -> str:
        """節點自身屬性（不含子節點）的文字描述"""
        return ""

    def describe(self) -> str:
        return f"{type(self).__name__}{self.describe_attributes()}"

    @abstractmethod
    def accept(self, visitor):
        """接受訪問者模式"""

    @abstractmethod
    def compile(self, out) -> None:
        """將節點輸出為目標語言源碼"""


class ExpressionNode(ASTNode):
    """表達式基類"""

    def evaluate(self, context) -> float:
        """
        在上下文中計算表達式

        Args:
            context: 求值上下文

        Returns:
            計算結果
        """
        value = self.do_evaluate(context)
        if getattr(context, "trace", False):
            logger.debug("%s -> %r", self.describe(), value)
        return value

    @abstractmethod
    def do_evaluate(self, context) -> float:
        pass


class StatementNode(ASTNode):
    """語句基類"""

    def run(self, context) -> None:
        """在上下文中執行語句"""
        if getattr(context, "trace", False):
            logger.debug("run %s", self.describe())
        self.do_run(context)

    @abstractmethod
    def do_run(self, context) -> None:
        pass


@dataclass(frozen=True, eq=False, repr=False)
class ConstantNode(ExpressionNode):
    """
    數值常量節點

    相等比較採用與 EQUALS 相同的全序：-0.0 與 0.0 不相等，所有 NaN 彼此相等。
    """
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return ieee.compare(self.value, other.value) == 0

    def __hash__(self):
        return hash((type(self).__name__, ieee.total_order_key(self.value)))

    def describe_attributes(self) -> str:
        return f"(value={self.value!r})"

    def accept(self, visitor):
        return visitor.visit_constant(self)

    def do_evaluate(self, context) -> float:
        return self.value

    def compile(self, out) -> None:
        if math.isnan(self.value):
            out.print("NAN")
        elif math.isinf(self.value):
            out.print("INFINITY" if self.value > 0 else "-INFINITY")
        else:
            out.print(repr(self.value))

    def __repr__(self):
        return f"ConstantNode({self.value!r})"


@dataclass(frozen=True, repr=False)
class VariableNode(ExpressionNode):
    """變數引用節點"""
    name: str

    def describe_attributes(self) -> str:
        return f"(name={self.name})"

    def accept(self, visitor):
        return visitor.visit_variable(self)

    def do_evaluate(self, context) -> float:
        return context.get(self.name)

    def compile(self, out) -> None:
        out.print(self.name)

    def __repr__(self):
        return f"VariableNode({self.name!r})"


@dataclass(frozen=True, repr=False)
class BinaryExpressionNode(ExpressionNode):
    """二元表達式節點，例如 "x plus y" """

    class Operator(Enum):
        ADDITION = auto()
        SUBTRACTION = auto()
        MULTIPLICATION = auto()
        DIVISION = auto()
        EXPONENTIATION = auto()

    operator: "BinaryExpressionNode.Operator"
    lhs: ExpressionNode
    rhs: ExpressionNode

    def get_children(self) -> Dict[str, Optional[ASTNode]]:
        return {"lhs": self.lhs, "rhs": self.rhs}

    def describe_attributes(self) -> str:
        return f"(operator={self.operator.name})"

    def accept(self, visitor):
        return visitor.visit_binary_expression(self)

    def do_evaluate(self, context) -> float:
        left_value = self.lhs.evaluate(context)
        right_value = self.rhs.evaluate(context)

        Operator = BinaryExpressionNode.Operator
        if self.operator is Operator.ADDITION:
            return left_value + right_value
        elif self.operator is Operator.SUBTRACTION:
            return left_value - right_value
        elif self.operator is Operator.MULTIPLICATION:
            return left_value * right_value
        elif self.operator is Operator.DIVISION:
            return ieee.divide(left_value, right_value)
        elif self.operator is Operator.EXPONENTIATION:
            return ieee.power(left_value, right_value)
        raise InternalCompilerError(f"unknown binary operator: {self.operator!r}")

    def compile(self, out) -> None:
        if self.operator is BinaryExpressionNode.Operator.EXPONENTIATION:
            # 函數呼叫形式本身已是完整表達式，不加括號
            out.print(f"{out.config.power_function}(")
            self.lhs.compile(out)
            out.print(", ")
            self.rhs.compile(out)
            out.print(")")
            return

        token = _INFIX_TOKENS.get(self.operator)
        if token is None:
            raise InternalCompilerError(f"unknown binary operator: {self.operator!r}")
        out.print("(")
        self.lhs.compile(out)
        out.print(f" {token} ")
        self.rhs.compile(out)
        out.print(")")

    def __repr__(self):
        return f"BinaryExpressionNode(operator={self.operator.name}, lhs={self.lhs!r}, rhs={self.rhs!r})"


_INFIX_TOKENS = {
    BinaryExpressionNode.Operator.ADDITION: "+",
    BinaryExpressionNode.Operator.SUBTRACTION: "-",
    BinaryExpressionNode.Operator.MULTIPLICATION: "*",
    BinaryExpressionNode.Operator.DIVISION: "/",
}


@dataclass(frozen=True, repr=False)
class AssignmentNode(StatementNode):
    """賦值語句節點，例如 "Set x to 3" """
    variable: VariableNode
    expression: ExpressionNode

    def get_children(self) -> Dict[str, Optional[ASTNode]]:
        return {"variable": self.variable, "expression": self.expression}

    def accept(self, visitor):
        return visitor.visit_assignment(self)

    def do_run(self, context) -> None:
        context.set(self.variable.name, self.expression.evaluate(context))

    def compile(self, out) -> None:
        self.variable.compile(out)
        out.print(" = ")
        self.expression.compile(out)
        out.print(";")

    def __repr__(self):
        return f"AssignmentNode(variable={self.variable!r}, expression={self.expression!r})"


@dataclass(frozen=True, repr=False)
class BlockNode(StatementNode):
    """代碼塊節點，依序執行其中的語句"""
    statements: Tuple[StatementNode, ...]

    def __post_init__(self):
        object.__setattr__(self, "statements", tuple(self.statements))

    def get_children(self) -> Dict[str, Optional[ASTNode]]:
        return {str(index): statement for index, statement in enumerate(self.statements)}

    def accept(self, visitor):
        return visitor.visit_block(self)

    def do_run(self, context) -> None:
        for statement in self.statements:
            statement.run(context)

    def compile(self, out) -> None:
        out.println("{")
        inner = IndentingPrintWriter(out, out.config.indent)
        for statement in self.statements:
            statement.compile(inner)
            inner.println()
        out.print("}")

    def __repr__(self):
        return f"BlockNode({list(self.statements)!r})"


@dataclass(frozen=True, repr=False)
class ConditionalNode(StatementNode):
    """
    條件語句節點（"If ... then ..."）

    Wordy 只支援兩個數值表達式之間的直接比較，不支援布林運算符
    或任意布林表達式。一般結構為：

        If <lhs> <operator> <rhs> then <if_true> else <if_false>
    """

    class Operator(Enum):
        EQUALS = auto()
        LESS_THAN = auto()
        GREATER_THAN = auto()

    operator: "ConditionalNode.Operator"
    lhs: ExpressionNode
    rhs: ExpressionNode
    if_true: StatementNode
    if_false: Optional[StatementNode] = None

    def get_children(self) -> Dict[str, Optional[ASTNode]]:
        return {
            "lhs": self.lhs,
            "rhs": self.rhs,
            "ifTrue": self.if_true,
            "ifFalse": self.if_false,
        }

    def describe_attributes(self) -> str:
        return f"(operator={self.operator.name})"

    def accept(self, visitor):
        return visitor.visit_conditional(self)

    def condition_holds(self, context) -> bool:
        """計算比較條件"""
        left_value = self.lhs.evaluate(context)
        right_value = self.rhs.evaluate(context)

        Operator = ConditionalNode.Operator
        if self.operator is Operator.EQUALS:
            return ieee.compare(left_value, right_value) == 0
        elif self.operator is Operator.LESS_THAN:
            return left_value < right_value
        elif self.operator is Operator.GREATER_THAN:
            return left_value > right_value
        raise InternalCompilerError(f"unknown comparison operator: {self.operator!r}")

    def do_run(self, context) -> None:
        if self.condition_holds(context):
            self.if_true.run(context)
        elif self.if_false is not None:
            self.if_false.run(context)

    def compile(self, out) -> None:
        Operator = ConditionalNode.Operator
        if self.operator is Operator.EQUALS:
            token = out.config.equals_token
        elif self.operator is Operator.LESS_THAN:
            token = "<"
        elif self.operator is Operator.GREATER_THAN:
            token = ">"
        else:
            raise InternalCompilerError(f"unknown comparison operator: {self.operator!r}")

        out.print("if (")
        self.lhs.compile(out)
        out.print(f" {token} ")
        self.rhs.compile(out)
        out.print(") ")
        self.if_true.compile(out)
        if self.if_false is not None:
            out.print(" else ")
            self.if_false.compile(out)
        else:
            out.print(" else {}")

    def __repr__(self):
        return (
            f"ConditionalNode(operator={self.operator.name}, lhs={self.lhs!r}, rhs={self.rhs!r}, "
            f"if_true={self.if_true!r}, if_false={self.if_false!r})"
        )
