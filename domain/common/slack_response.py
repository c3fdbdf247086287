"""Slack 响应信封

所有 Web API 响应都带有 ok/error 字段。JSON 解码成功并不代表调用成功，
解码之后必须再检查 ok。
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Annotated, Any, List, Optional, Type, TypeVar

from pydantic import StrictBool, StrictStr, TypeAdapter, ValidationError

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import SlackDecodeError, SlackErrorResponse
from domain.common.validators import none_as

# ok=false 但未给出 error 时使用的错误码
UNKNOWN_ERROR = "unknown_error"


@dataclass(frozen=True)
class ResponseMetadata(BaseValueObject):
    """
    响应元数据

    Attributes:
        next_cursor: 下一页游标，为空表示没有更多数据
        messages: 附加消息（通常是错误详情）
        warnings: 警告信息
    """

    next_cursor: Annotated[StrictStr, none_as(str)] = ""
    messages: Annotated[List[StrictStr], none_as(list)] = field(default_factory=list)
    warnings: Annotated[List[StrictStr], none_as(list)] = field(default_factory=list)

    @property
    def cursor(self) -> str:
        return self.next_cursor


@dataclass(frozen=True)
class SlackResponse(BaseValueObject):
    """
    Slack 响应信封基类

    各接口的响应类型继承此类并增加各自的载荷字段。

    Attributes:
        ok: 调用是否成功
        error: 失败时的错误码
        warning: 警告码
        response_metadata: 响应元数据
    """

    ok: StrictBool = False
    error: Annotated[StrictStr, none_as(str)] = ""
    warning: Annotated[StrictStr, none_as(str)] = ""
    response_metadata: Annotated[ResponseMetadata, none_as(dict)] = field(
        default_factory=ResponseMetadata
    )

    def err(self) -> Optional[SlackErrorResponse]:
        """返回远端报告的错误，成功时返回 None"""
        if self.ok:
            return None
        return SlackErrorResponse(
            self.error or UNKNOWN_ERROR,
            messages=self.response_metadata.messages,
            warnings=self.response_metadata.warnings,
        )

    def raise_for_error(self) -> None:
        """
        远端报告失败时抛出异常

        Raises:
            SlackErrorResponse: 如果 ok 为 false
        """
        error = self.err()
        if error is not None:
            raise error


R = TypeVar("R", bound=SlackResponse)


@lru_cache(maxsize=None)
def _adapter(response_type: Type[Any]) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode_response(data: Any, response_type: Type[R]) -> R:
    """
    解码响应并检查信封

    先按 response_type 解码整个 JSON 对象，再检查 ok 字段。
    两步都成功才返回响应对象，不会返回部分结果。

    Args:
        data: 已解析的 JSON 数据
        response_type: SlackResponse 子类

    Returns:
        解码后的响应对象

    Raises:
        SlackDecodeError: 如果数据结构与 response_type 不符
        SlackErrorResponse: 如果远端报告失败
    """
    try:
        response = _adapter(response_type).validate_python(data)
    except ValidationError as e:
        raise SlackDecodeError(
            f"Cannot decode {response_type.__name__}: {e}"
        ) from e

    response.raise_for_error()
    return response
