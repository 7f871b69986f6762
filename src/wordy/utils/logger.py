"""
日誌設定
套件內各模組以 logging.getLogger(__name__) 記錄，這裡只負責應用程式端的全局配置
"""

import logging
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_global_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """
    設置全局日誌配置

    Args:
        level: 日誌級別；logging.DEBUG 會顯示直譯器追蹤與代碼生成細節
        stream: 輸出串流，None 時使用標準錯誤
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, stream=stream, force=True)
