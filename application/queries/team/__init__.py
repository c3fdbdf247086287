"""Team queries package"""

from application.queries.team.access_logs import (
    DEFAULT_LOGINS_COUNT,
    DEFAULT_LOGINS_PAGE,
    AccessLogParameters,
)
from application.queries.team.billable_info import BillableInfoParameters
from application.queries.team.external_teams import ExternalTeamsParameters

__all__ = [
    "DEFAULT_LOGINS_COUNT",
    "DEFAULT_LOGINS_PAGE",
    "AccessLogParameters",
    "BillableInfoParameters",
    "ExternalTeamsParameters",
]
