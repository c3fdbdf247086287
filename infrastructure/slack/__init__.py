"""
Slack Web API 基础设施层

提供基于 httpx 的传输实现。
"""

from .http_transport import (
    AsyncHttpxSlackTransport,
    HttpxSlackTransport,
    StatusCodeError,
)

__all__ = [
    "HttpxSlackTransport",
    "AsyncHttpxSlackTransport",
    "StatusCodeError",
]
