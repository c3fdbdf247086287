"""
日志配置

基于标准 logging。应用入口调用一次 setup_logging()，
各模块通过 get_logger(__name__) 或 logging.getLogger(__name__) 获取记录器。
只提供标准 logging 后端，不支持 LOG_BACKEND 切换 loguru/logfire。
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    配置根日志记录器

    Args:
        level: 日志级别（DEBUG/INFO/WARNING/ERROR）
        log_file: 日志文件路径（可选，目录不存在时自动创建）
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    # httpx 在 INFO 级别会记录每个请求 URL
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """获取模块日志记录器"""
    return logging.getLogger(name)
