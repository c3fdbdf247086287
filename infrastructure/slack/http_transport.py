"""HTTP Slack 传输实现"""

import logging
from typing import Any, Dict, Optional

import httpx

from domain.common.exceptions import SlackDecodeError, SlackException
from domain.team.services.slack_transport import FormValues


class StatusCodeError(SlackException):
    """Slack 返回非 2xx 状态码"""

    def __init__(self, status_code: int, status: str):
        super().__init__(f"slack server error: {status_code} {status}")
        self.status_code = status_code
        self.status = status


def _decode_json(response: httpx.Response, path: str) -> Dict[str, Any]:
    if not 200 <= response.status_code < 300:
        raise StatusCodeError(response.status_code, response.reason_phrase)

    try:
        return response.json()
    except ValueError as e:
        raise SlackDecodeError(
            f"Invalid JSON from {path}: {response.text[:200]}"
        ) from e


class HttpxSlackTransport:
    """HTTP Slack 传输实现

    使用 httpx 以表单方式 POST 到 Web API。网络异常（httpx.RequestError）
    原样抛出，不做重试。

    Attributes:
        DEFAULT_BASE_URL: Web API 地址
        DEFAULT_TIMEOUT: 默认超时时间（秒）
    """

    DEFAULT_BASE_URL = "https://slack.com/api/"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化传输

        Args:
            base_url: Web API 地址，自动补全末尾的 /
            client: httpx 客户端（可选，未提供时自行创建并负责关闭）
            timeout: 默认超时时间（秒）
            logger: 日志记录器（可选）
        """
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._owns_client = client is None
        self._client = client or httpx.Client()
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)

    def post_form(
        self,
        path: str,
        values: FormValues,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """提交表单并返回解析后的 JSON

        Raises:
            httpx.RequestError: 网络错误或超时
            StatusCodeError: 非 2xx 响应
            SlackDecodeError: 响应体不是 JSON
        """
        url = self._base_url + path
        response = self._client.post(
            url,
            data=values,
            timeout=self._timeout if timeout is None else timeout,
        )
        self._logger.debug(f"POST {path} -> {response.status_code}")
        return _decode_json(response, path)

    def close(self) -> None:
        """关闭自行创建的 httpx 客户端"""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxSlackTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncHttpxSlackTransport:
    """异步 HTTP Slack 传输实现，基于 httpx.AsyncClient"""

    DEFAULT_BASE_URL = HttpxSlackTransport.DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = HttpxSlackTransport.DEFAULT_TIMEOUT

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)

    async def post_form(
        self,
        path: str,
        values: FormValues,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        url = self._base_url + path
        response = await self._client.post(
            url,
            data=values,
            timeout=self._timeout if timeout is None else timeout,
        )
        self._logger.debug(f"POST {path} -> {response.status_code} (async)")
        return _decode_json(response, path)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpxSlackTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
