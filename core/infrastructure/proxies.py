"""
代理类型解析模块。
为持久化框架包装过的对象解析真实类型，供DomainEntity.get_type_unproxied()使用。

在设置中启用:
    DOMAIN_SETTINGS = {
        'TYPE_RESOLVER': 'core.infrastructure.proxies.concrete_model_type',
    }
"""
from typing import Any


def concrete_model_type(instance: Any) -> type:
    """
    解析Django ORM对象的真实类型。
    代理模型(Meta.proxy = True)返回其具体模型，其他对象返回自身类型。

    Args:
        instance: 要解析的对象

    Returns:
        对象的真实类型
    """
    meta = getattr(type(instance), '_meta', None)
    concrete_model = getattr(meta, 'concrete_model', None)
    if isinstance(concrete_model, type):
        return concrete_model
    return type(instance)
