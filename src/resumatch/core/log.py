"""日志初始化：库内各模块只取 logger，由脚本或宿主应用调用 setup_logging 决定输出。"""
import logging

from resumatch.core.config import log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int | None = None) -> None:
    """为 resumatch 根 logger 挂一个 stderr handler；level 不传则读 RESUMATCH_LOG_LEVEL。"""
    root = logging.getLogger("resumatch")
    root.setLevel(level or log_level())
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
