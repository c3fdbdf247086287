"""外部团队（Slack Connect 组织）值对象"""

from dataclasses import dataclass, field
from typing import Annotated, List

from pydantic import StrictBool, StrictInt, StrictStr

from domain.common.base_value_object import BaseValueObject
from domain.common.validators import none_as


@dataclass(frozen=True)
class ConnectedWorkspace(BaseValueObject):
    """与外部团队建立连接的本方工作区"""

    workspace_id: StrictStr = ""
    workspace_name: StrictStr = ""


@dataclass(frozen=True)
class Organization(BaseValueObject):
    """
    外部团队记录

    Attributes:
        team_id: 外部团队 ID
        team_name: 外部团队名称
        team_domain: 外部团队域名
        public_url: 外部团队地址
        is_sponsored: 是否由本方赞助
        canonical_avatars: 头像 URL 列表
        connected_workspaces: 已连接的本方工作区
        connection_status: 连接状态（connected、disconnected 等）
        last_active_timestamp: 最近活跃时间（Unix 秒）
    """

    team_id: StrictStr = ""
    team_name: StrictStr = ""
    team_domain: StrictStr = ""
    public_url: StrictStr = ""
    is_sponsored: StrictBool = False
    canonical_avatars: Annotated[List[StrictStr], none_as(list)] = field(
        default_factory=list
    )
    connected_workspaces: Annotated[List[ConnectedWorkspace], none_as(list)] = field(
        default_factory=list
    )
    connection_status: StrictStr = ""
    last_active_timestamp: StrictInt = 0
