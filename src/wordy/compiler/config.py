"""
編譯器設定
"""

import os
from dataclasses import dataclass


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class CompilerConfig:
    """
    源碼生成設定

    Attributes:
        indent: 每層區塊的縮排字串
        power_function: 乘冪使用的函數名稱
        legacy_equals_token: EQUALS 是否沿用舊版輸出的單一 "="；
            設為 False 時輸出 "=="
    """
    indent: str = "    "
    power_function: str = "pow"
    legacy_equals_token: bool = True

    @property
    def equals_token(self) -> str:
        return "=" if self.legacy_equals_token else "=="

    @classmethod
    def from_env(cls) -> "CompilerConfig":
        """從 WORDY_INDENT / WORDY_POWER_FUNCTION / WORDY_STRICT_EQUALITY 讀取設定"""
        defaults = cls()
        return cls(
            indent=os.getenv("WORDY_INDENT", defaults.indent),
            power_function=os.getenv("WORDY_POWER_FUNCTION") or defaults.power_function,
            legacy_equals_token=not _env_flag("WORDY_STRICT_EQUALITY"),
        )
