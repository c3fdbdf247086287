"""
Team Web API 应用服务

每个方法对应一个 API 方法：构造表单、经传输层提交、解码响应信封、
检查 ok 字段。不重试、不缓存，任何失败都以异常形式直接抛给调用方：
- 传输层异常（httpx.RequestError、StatusCodeError）原样抛出
- SlackDecodeError：响应结构不符
- SlackErrorResponse：远端报告失败
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple, Type

from application.queries.team import (
    AccessLogParameters,
    BillableInfoParameters,
    ExternalTeamsParameters,
)
from domain.common.slack_response import R, decode_response
from domain.team.responses import (
    BillableInfoResponse,
    ExternalTeamsResponse,
    LoginResponse,
    TeamProfileResponse,
    TeamResponse,
)
from domain.team.services.slack_transport import (
    AsyncSlackTransport,
    FormValues,
    SlackTransport,
)
from domain.team.value_objects import (
    BillingActive,
    Login,
    Organization,
    Paging,
    TeamInfo,
    TeamProfile,
)


class _TeamRequests:
    """各 API 方法的路径和表单构造

    同步和异步服务共用，保证两者提交的请求完全一致。
    """

    TEAM_INFO_PATH = "team.info"
    TEAM_PROFILE_PATH = "team.profile.get"
    ACCESS_LOGS_PATH = "team.accessLogs"
    BILLABLE_INFO_PATH = "team.billableInfo"
    EXTERNAL_TEAMS_PATH = "team.externalTeams.list"

    def __init__(self, token: str, logger: Optional[logging.Logger] = None):
        self._token = token
        self._logger = logger or logging.getLogger(__name__)

    def _new_values(self) -> FormValues:
        return {"token": [self._token]}

    def _team_info_values(self, team: Optional[str] = None) -> FormValues:
        values = self._new_values()
        if team:
            values["team"] = [team]
        return values

    def _team_profile_values(self, team_ids: Sequence[str]) -> FormValues:
        values = self._new_values()
        # 与单值参数不同，team_id 以原样的多值列表提交
        if team_ids and team_ids[0]:
            values["team_id"] = list(team_ids)
        return values

    def _access_logs_values(self, params: AccessLogParameters) -> FormValues:
        values = self._new_values()
        params.to_values(values)
        return values

    def _billable_info_values(self, params: BillableInfoParameters) -> FormValues:
        values = self._new_values()
        params.to_values(values)
        return values

    def _external_teams_values(
        self, params: Optional[ExternalTeamsParameters]
    ) -> FormValues:
        values = self._new_values()
        if params is not None:
            params.to_values(values)
        return values


class TeamApiService(_TeamRequests):
    """Team Web API 服务（同步）

    Example:
        service = TeamApiService(transport, token="xoxb-...")
        team = service.get_team_info()
        logins, paging = service.get_access_logs(AccessLogParameters(page=2))
    """

    def __init__(
        self,
        transport: SlackTransport,
        token: str,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化服务

        Args:
            transport: Slack 传输实现
            token: 访问令牌，随每个请求以 token 字段提交
            logger: 日志记录器（可选）
        """
        super().__init__(token, logger)
        self._transport = transport

    def _call(
        self,
        path: str,
        values: FormValues,
        response_type: Type[R],
        timeout: Optional[float],
    ) -> R:
        self._logger.debug(f"Calling {path}")
        data = self._transport.post_form(path, values, timeout=timeout)
        return decode_response(data, response_type)

    def get_team_info(self, timeout: Optional[float] = None) -> TeamInfo:
        """获取当前令牌所属团队的信息"""
        response = self._call(
            self.TEAM_INFO_PATH, self._team_info_values(), TeamResponse, timeout
        )
        return response.team

    def get_other_team_info(
        self, team: Optional[str], timeout: Optional[float] = None
    ) -> TeamInfo:
        """获取指定团队的信息

        team 为空时等同于 get_team_info()。
        """
        if not team:
            return self.get_team_info(timeout=timeout)
        response = self._call(
            self.TEAM_INFO_PATH, self._team_info_values(team), TeamResponse, timeout
        )
        return response.team

    def get_team_profile(
        self, *team_ids: str, timeout: Optional[float] = None
    ) -> TeamProfile:
        """获取团队资料字段定义"""
        response = self._call(
            self.TEAM_PROFILE_PATH,
            self._team_profile_values(team_ids),
            TeamProfileResponse,
            timeout,
        )
        return response.profile

    def get_access_logs(
        self,
        params: Optional[AccessLogParameters] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[List[Login], Paging]:
        """获取一页访问日志

        Returns:
            (登录记录列表, 分页信息)
        """
        response = self._call(
            self.ACCESS_LOGS_PATH,
            self._access_logs_values(params or AccessLogParameters()),
            LoginResponse,
            timeout,
        )
        return response.logins, response.paging

    def get_billable_info(
        self,
        params: Optional[BillableInfoParameters] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, BillingActive]:
        """获取计费状态，按用户 ID 索引"""
        response = self._call(
            self.BILLABLE_INFO_PATH,
            self._billable_info_values(params or BillableInfoParameters()),
            BillableInfoResponse,
            timeout,
        )
        return response.billable_info

    def get_external_teams(
        self,
        params: Optional[ExternalTeamsParameters] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[List[Organization], str]:
        """列出已连接的外部团队

        Returns:
            (外部团队列表, 下一页游标)，游标为空表示没有更多数据
        """
        response = self._call(
            self.EXTERNAL_TEAMS_PATH,
            self._external_teams_values(params),
            ExternalTeamsResponse,
            timeout,
        )
        return response.organizations, response.response_metadata.cursor


class AsyncTeamApiService(_TeamRequests):
    """Team Web API 服务（异步）

    方法与 TeamApiService 一一对应。取消和超时由传输层处理。
    """

    def __init__(
        self,
        transport: AsyncSlackTransport,
        token: str,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(token, logger)
        self._transport = transport

    async def _call(
        self,
        path: str,
        values: FormValues,
        response_type: Type[R],
        timeout: Optional[float],
    ) -> R:
        self._logger.debug(f"Calling {path} (async)")
        data = await self._transport.post_form(path, values, timeout=timeout)
        return decode_response(data, response_type)

    async def get_team_info(self, timeout: Optional[float] = None) -> TeamInfo:
        response = await self._call(
            self.TEAM_INFO_PATH, self._team_info_values(), TeamResponse, timeout
        )
        return response.team

    async def get_other_team_info(
        self, team: Optional[str], timeout: Optional[float] = None
    ) -> TeamInfo:
        if not team:
            return await self.get_team_info(timeout=timeout)
        response = await self._call(
            self.TEAM_INFO_PATH, self._team_info_values(team), TeamResponse, timeout
        )
        return response.team

    async def get_team_profile(
        self, *team_ids: str, timeout: Optional[float] = None
    ) -> TeamProfile:
        response = await self._call(
            self.TEAM_PROFILE_PATH,
            self._team_profile_values(team_ids),
            TeamProfileResponse,
            timeout,
        )
        return response.profile

    async def get_access_logs(
        self,
        params: Optional[AccessLogParameters] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[List[Login], Paging]:
        response = await self._call(
            self.ACCESS_LOGS_PATH,
            self._access_logs_values(params or AccessLogParameters()),
            LoginResponse,
            timeout,
        )
        return response.logins, response.paging

    async def get_billable_info(
        self,
        params: Optional[BillableInfoParameters] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, BillingActive]:
        response = await self._call(
            self.BILLABLE_INFO_PATH,
            self._billable_info_values(params or BillableInfoParameters()),
            BillableInfoResponse,
            timeout,
        )
        return response.billable_info

    async def get_external_teams(
        self,
        params: Optional[ExternalTeamsParameters] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[List[Organization], str]:
        response = await self._call(
            self.EXTERNAL_TEAMS_PATH,
            self._external_teams_values(params),
            ExternalTeamsResponse,
            timeout,
        )
        return response.organizations, response.response_metadata.cursor
