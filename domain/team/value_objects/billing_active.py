"""计费状态值对象"""

from dataclasses import dataclass

from pydantic import StrictBool

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class BillingActive(BaseValueObject):
    """单个用户的计费状态"""

    billing_active: StrictBool = False
