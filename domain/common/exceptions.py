"""领域异常定义"""

from typing import Optional, Sequence


class DomainException(Exception):
    """领域异常基类"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SlackException(DomainException):
    """Slack API 调用异常基类"""


class SlackErrorResponse(SlackException):
    """Slack API 返回的业务错误（ok=false）

    传输和解码都成功，但远端报告了逻辑失败，例如 invalid_auth、team_not_found。

    Attributes:
        error: 远端返回的错误码
        messages: response_metadata.messages
        warnings: response_metadata.warnings
    """

    def __init__(
        self,
        error: str,
        messages: Optional[Sequence[str]] = None,
        warnings: Optional[Sequence[str]] = None,
    ):
        self.error = error
        self.messages = list(messages or [])
        self.warnings = list(warnings or [])

        message = error
        if self.messages:
            message = f"{error}\nmessages: {self.messages}"
        super().__init__(message)


class SlackDecodeError(SlackException):
    """响应体不是 JSON 或结构与预期不符"""
