"""Team 应用服务"""

from application.team.services.team_api_service import (
    AsyncTeamApiService,
    TeamApiService,
)

__all__ = ["TeamApiService", "AsyncTeamApiService"]
