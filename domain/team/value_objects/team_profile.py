"""团队资料值对象"""

from dataclasses import dataclass, field
from typing import Annotated, Dict, List

from pydantic import StrictBool, StrictInt, StrictStr

from domain.common.base_value_object import BaseValueObject
from domain.common.validators import none_as


@dataclass(frozen=True)
class TeamProfileField(BaseValueObject):
    """
    团队资料字段

    Attributes:
        id: 字段 ID
        ordering: 显示顺序
        label: 字段标签
        hint: 填写提示
        type: 字段类型（text、date、options_list 等）
        possible_values: options_list 类型的可选值
        is_hidden: 是否隐藏
        options: 选项开关（如 is_scim、is_protected）
    """

    id: StrictStr = ""
    ordering: StrictInt = 0
    label: StrictStr = ""
    hint: StrictStr = ""
    type: StrictStr = ""
    possible_values: Annotated[List[StrictStr], none_as(list)] = field(default_factory=list)
    is_hidden: StrictBool = False
    options: Annotated[Dict[str, StrictBool], none_as(dict)] = field(default_factory=dict)


@dataclass(frozen=True)
class TeamProfile(BaseValueObject):
    """团队资料，字段按响应中的顺序保存"""

    fields: Annotated[List[TeamProfileField], none_as(list)] = field(
        default_factory=list
    )
