"""外部团队列表查询参数"""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.team.services.slack_transport import FormValues


@dataclass
class ExternalTeamsParameters:
    """team.externalTeams.list 的查询参数

    列表类过滤条件只提交第一个元素，其余元素被忽略。

    Attributes:
        connection_status_filter: 按连接状态过滤
        cursor: 分页游标
        limit: 每页最大条数
        slack_connect_pref_filter: 按 Slack Connect 偏好过滤
        sort_direction: 排序方向（asc/desc）
        sort_field: 排序字段
        workspace_filter: 按本方工作区过滤
    """

    connection_status_filter: Optional[str] = None
    cursor: Optional[str] = None
    limit: Optional[int] = None
    slack_connect_pref_filter: List[str] = field(default_factory=list)
    sort_direction: Optional[str] = None
    sort_field: Optional[str] = None
    workspace_filter: List[str] = field(default_factory=list)

    def to_values(self, values: FormValues) -> None:
        """将非空参数写入表单"""
        if self.connection_status_filter:
            values["connection_status_filter"] = [self.connection_status_filter]
        if self.cursor:
            values["cursor"] = [self.cursor]
        if self.limit:
            values["limit"] = [str(self.limit)]
        # TODO: 确认远端是否接受多值过滤后改为提交完整列表
        if self.slack_connect_pref_filter:
            values["slack_connect_pref_filter"] = [self.slack_connect_pref_filter[0]]
        if self.sort_direction:
            values["sort_direction"] = [self.sort_direction]
        if self.sort_field:
            values["sort_field"] = [self.sort_field]
        if self.workspace_filter:
            values["workspace_filter"] = [self.workspace_filter[0]]
