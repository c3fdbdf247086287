"""团队信息值对象"""

from dataclasses import dataclass, field
from typing import Annotated, Any, Dict

from pydantic import StrictStr

from domain.common.base_value_object import BaseValueObject
from domain.common.validators import none_as


@dataclass(frozen=True)
class TeamInfo(BaseValueObject):
    """
    团队信息值对象

    Attributes:
        id: 团队 ID（如 T12345）
        name: 团队显示名称
        domain: 团队域名（xxx.slack.com 中的 xxx）
        email_domain: 团队邮箱域名
        icon: 图标元数据，键值结构不固定（image_34、image_default 等）
    """

    id: StrictStr = ""
    name: StrictStr = ""
    domain: StrictStr = ""
    email_domain: StrictStr = ""
    icon: Annotated[Dict[str, Any], none_as(dict)] = field(default_factory=dict)
