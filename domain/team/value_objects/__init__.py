"""Team 领域值对象模块"""

from domain.team.value_objects.team_info import TeamInfo
from domain.team.value_objects.team_profile import TeamProfile, TeamProfileField
from domain.team.value_objects.login import Login, Paging
from domain.team.value_objects.billing_active import BillingActive
from domain.team.value_objects.organization import ConnectedWorkspace, Organization

__all__ = [
    "TeamInfo",
    "TeamProfile",
    "TeamProfileField",
    "Login",
    "Paging",
    "BillingActive",
    "ConnectedWorkspace",
    "Organization",
]
