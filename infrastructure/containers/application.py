"""
应用容器（AppContainer）

管理应用层服务。
依赖 InfraContainer 获取传输实现，依赖 ConfigContainer 获取令牌。
"""

from dependency_injector import containers, providers

from application.team.services.team_api_service import (
    AsyncTeamApiService,
    TeamApiService,
)


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ Team 服务 ============

    team_api_service = providers.Factory(
        TeamApiService,
        transport=infra.slack_transport,
        token=config.settings.provided.slack_token,
    )

    async_team_api_service = providers.Factory(
        AsyncTeamApiService,
        transport=infra.async_slack_transport,
        token=config.settings.provided.slack_token,
    )
