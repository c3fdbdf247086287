"""Slack HTTP 传输接口"""

from typing import Any, Dict, List, Optional, Protocol

# 表单编码：每个键对应一个值列表，同一键可以出现多次
FormValues = Dict[str, List[str]]


class SlackTransport(Protocol):
    """Slack 传输接口

    定义向 Web API 提交表单的契约。
    实现类负责连接、TLS、超时和非 2xx 状态码的处理，不做重试。
    """

    def post_form(
        self,
        path: str,
        values: FormValues,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """以 application/x-www-form-urlencoded 提交表单

        Args:
            path: API 方法路径（如 team.info）
            values: 表单字段
            timeout: 本次调用的超时（秒），None 表示使用传输层默认值

        Returns:
            解析后的 JSON 对象
        """
        ...


class AsyncSlackTransport(Protocol):
    """异步 Slack 传输接口，语义与 SlackTransport 相同"""

    async def post_form(
        self,
        path: str,
        values: FormValues,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        ...
