"""
Team 界限上下文

提供团队相关 Web API 的领域模型，包括：
- TeamInfo, TeamProfile, Login, Paging, BillingActive, Organization 值对象
- 各接口的响应信封
- SlackTransport 传输接口
"""

from domain.team.value_objects import (
    BillingActive,
    ConnectedWorkspace,
    Login,
    Organization,
    Paging,
    TeamInfo,
    TeamProfile,
    TeamProfileField,
)
from domain.team.services import AsyncSlackTransport, FormValues, SlackTransport

__all__ = [
    "TeamInfo",
    "TeamProfile",
    "TeamProfileField",
    "Login",
    "Paging",
    "BillingActive",
    "ConnectedWorkspace",
    "Organization",
    "SlackTransport",
    "AsyncSlackTransport",
    "FormValues",
]
