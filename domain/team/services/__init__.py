"""Team 领域服务接口"""

from domain.team.services.slack_transport import (
    AsyncSlackTransport,
    FormValues,
    SlackTransport,
)

__all__ = ["SlackTransport", "AsyncSlackTransport", "FormValues"]
