"""Team 接口响应类型

每个接口一个响应信封，载荷字段挂在 SlackResponse 之上。
"""

from dataclasses import dataclass, field
from typing import Annotated, Dict, List

from domain.common.slack_response import SlackResponse
from domain.common.validators import none_as
from domain.team.value_objects import (
    BillingActive,
    Login,
    Organization,
    Paging,
    TeamInfo,
    TeamProfile,
)


@dataclass(frozen=True)
class TeamResponse(SlackResponse):
    """team.info 响应"""

    team: Annotated[TeamInfo, none_as(dict)] = field(default_factory=TeamInfo)


@dataclass(frozen=True)
class TeamProfileResponse(SlackResponse):
    """team.profile.get 响应"""

    profile: Annotated[TeamProfile, none_as(dict)] = field(default_factory=TeamProfile)


@dataclass(frozen=True)
class LoginResponse(SlackResponse):
    """team.accessLogs 响应"""

    logins: Annotated[List[Login], none_as(list)] = field(default_factory=list)
    paging: Annotated[Paging, none_as(dict)] = field(default_factory=Paging)


@dataclass(frozen=True)
class BillableInfoResponse(SlackResponse):
    """team.billableInfo 响应，按用户 ID 索引"""

    billable_info: Annotated[Dict[str, BillingActive], none_as(dict)] = field(
        default_factory=dict
    )


@dataclass(frozen=True)
class ExternalTeamsResponse(SlackResponse):
    """team.externalTeams.list 响应，下一页游标在 response_metadata 中"""

    organizations: Annotated[List[Organization], none_as(list)] = field(
        default_factory=list
    )
