"""
实体标识比较模块。
判断标识值是否为其类型的空值或默认值，用于区分瞬态实体与持久化实体。
"""
import numbers
import uuid
from typing import Any, Optional


def is_null_or_default(value: Any) -> bool:
    """
    检查值是否为None或其类型的默认值。

    - 文本(str/bytes): None或长度为0时视为默认值
    - 数值(含bool、Decimal): 等于0时视为默认值
    - UUID: 空UUID视为默认值
    - 其他对象: 仅None视为默认值

    Args:
        value: 要检查的值

    Returns:
        如果值为None或默认值，则返回True；否则返回False
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes)):
        return len(value) == 0
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, uuid.UUID):
        return value.int == 0
    return False


def default_identity_for(id_type: Optional[type]) -> Any:
    """
    获取指定标识类型的默认值，新建的实体使用该值作为标识。

    Args:
        id_type: 标识类型，未知时为None

    Returns:
        数值类型返回其零值，UUID返回空UUID，其他类型返回None
    """
    if isinstance(id_type, type):
        if issubclass(id_type, numbers.Number):
            return id_type()
        if issubclass(id_type, uuid.UUID):
            return uuid.UUID(int=0)
    return None
