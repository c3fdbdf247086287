"""
基础设施容器（InfraContainer）

管理 Slack 传输等基础设施组件。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from infrastructure.slack.http_transport import (
    AsyncHttpxSlackTransport,
    HttpxSlackTransport,
)


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ Slack 传输 ============

    # 同步传输（单例，复用连接池）
    slack_transport = providers.Singleton(
        HttpxSlackTransport,
        base_url=config.settings.provided.slack_api_url,
        timeout=config.settings.provided.slack_timeout,
    )

    # 异步传输（单例）
    async_slack_transport = providers.Singleton(
        AsyncHttpxSlackTransport,
        base_url=config.settings.provided.slack_api_url,
        timeout=config.settings.provided.slack_timeout,
    )
