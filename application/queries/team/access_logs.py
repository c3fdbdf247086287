"""访问日志查询参数"""

from dataclasses import dataclass
from typing import Optional

from domain.team.services.slack_transport import FormValues

DEFAULT_LOGINS_COUNT = 100
DEFAULT_LOGINS_PAGE = 1


@dataclass
class AccessLogParameters:
    """team.accessLogs 的查询参数

    count、page 等于远端默认值时不写入表单，由远端套用默认值。

    Attributes:
        team_id: 团队 ID（企业组织令牌必填）
        count: 每页条数
        page: 页码
    """

    team_id: Optional[str] = None
    count: Optional[int] = DEFAULT_LOGINS_COUNT
    page: Optional[int] = DEFAULT_LOGINS_PAGE

    def to_values(self, values: FormValues) -> None:
        """将非默认参数写入表单"""
        if self.team_id:
            values["team_id"] = [self.team_id]
        if self.count is not None and self.count != DEFAULT_LOGINS_COUNT:
            values["count"] = [str(self.count)]
        if self.page is not None and self.page != DEFAULT_LOGINS_PAGE:
            values["page"] = [str(self.page)]
