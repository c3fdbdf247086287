"""JSON 解码辅助校验器

Slack 对缺省的集合字段有时返回 null，这里统一按零值处理。
"""

from typing import Any, Callable

from pydantic import BeforeValidator


def none_as(empty: Callable[[], Any]) -> BeforeValidator:
    """JSON null 解码为 empty() 的返回值"""
    return BeforeValidator(lambda value: empty() if value is None else value)
