"""
求值上下文
保存變數名稱到數值的可變映射
"""

from typing import Dict, Optional

from ..utils.error import UndefinedVariableError


class EvaluationContext:
    """變數儲存區，供直譯器讀寫"""

    def __init__(self, variables: Optional[Dict[str, float]] = None, trace: bool = False):
        """
        初始化上下文

        Args:
            variables: 初始變數（可選）
            trace: 是否以 DEBUG 級別記錄每個節點的求值過程
        """
        self._variables: Dict[str, float] = {}
        self.trace = trace
        for name, value in (variables or {}).items():
            self.set(name, value)

    def get(self, name: str) -> float:
        """讀取變數，不存在時拋出 UndefinedVariableError"""
        try:
            return self._variables[name]
        except KeyError:
            raise UndefinedVariableError(name) from None

    def set(self, name: str, value: float) -> None:
        """寫入變數"""
        self._variables[name] = float(value)

    def contains(self, name: str) -> bool:
        return name in self._variables

    def variables(self) -> Dict[str, float]:
        """回傳目前所有變數的快照"""
        return dict(self._variables)

    def __repr__(self):
        return f"EvaluationContext({self._variables})"
