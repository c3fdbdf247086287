"""计费信息查询参数"""

from dataclasses import dataclass
from typing import Optional

from domain.team.services.slack_transport import FormValues


@dataclass
class BillableInfoParameters:
    """team.billableInfo 的查询参数

    Attributes:
        user: 只查询该用户，留空查询全部
        team_id: 团队 ID（企业组织令牌必填）
    """

    user: Optional[str] = None
    team_id: Optional[str] = None

    def to_values(self, values: FormValues) -> None:
        """将非空参数写入表单"""
        if self.team_id:
            values["team_id"] = [self.team_id]
        if self.user:
            values["user"] = [self.user]
