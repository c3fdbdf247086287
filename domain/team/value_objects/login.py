"""访问日志值对象"""

from dataclasses import dataclass

from pydantic import StrictInt, StrictStr

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class Login(BaseValueObject):
    """
    一条访问日志记录

    同一用户、IP、客户端的登录会合并为一条记录。

    Attributes:
        user_id: 用户 ID
        username: 用户名
        date_first: 首次访问时间（Unix 秒）
        date_last: 最近访问时间（Unix 秒）
        count: 访问次数
        ip: IP 地址
        user_agent: 客户端 User-Agent
        isp: 运营商
        country: 国家
        region: 地区
    """

    user_id: StrictStr = ""
    username: StrictStr = ""
    date_first: StrictInt = 0
    date_last: StrictInt = 0
    count: StrictInt = 0
    ip: StrictStr = ""
    user_agent: StrictStr = ""
    isp: StrictStr = ""
    country: StrictStr = ""
    region: StrictStr = ""


@dataclass(frozen=True)
class Paging(BaseValueObject):
    """
    分页信息

    Attributes:
        count: 每页条数
        total: 总条数
        page: 当前页码
        pages: 总页数
    """

    count: StrictInt = 0
    total: StrictInt = 0
    page: StrictInt = 0
    pages: StrictInt = 0
