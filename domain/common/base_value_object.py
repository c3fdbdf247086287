"""值对象基类"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class BaseValueObject:
    """
    值对象基类

    值对象不可变，按值比较。创建后自动调用 validate()，
    子类覆盖 validate() 实现自身的校验规则。
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """验证值对象有效性（默认不做校验）"""

    def to_dict(self) -> Dict[str, Any]:
        """转换为 JSON 可序列化字典"""
        return asdict(self)
