"""日志：按模块取 logger，统一输出到 stdout。"""
import logging
import sys
from typing import Optional

from hireai.core.config import log_level


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """获取已配置 handler 的 logger；level 不传则用 HIREAI_LOG_LEVEL。"""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else log_level())
    return logger
