"""
依赖注入容器

容器层次：
    ApplicationContainer
    ├── config: ConfigContainer
    ├── infra: InfraContainer (依赖 config)
    └── app: AppContainer (依赖 config, infra)

用法：
    container = ApplicationContainer()
    service = container.app.team_api_service()
"""

from dependency_injector import containers, providers

from .config import ConfigContainer
from .infrastructure import InfraContainer
from .application import AppContainer


class ApplicationContainer(containers.DeclarativeContainer):
    """根容器"""

    config = providers.Container(ConfigContainer)

    infra = providers.Container(InfraContainer, config=config)

    app = providers.Container(AppContainer, config=config, infra=infra)


__all__ = [
    "ApplicationContainer",
    "ConfigContainer",
    "InfraContainer",
    "AppContainer",
]
