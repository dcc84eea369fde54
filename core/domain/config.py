"""
领域模块配置文件。
从Django设置中获取领域模块的配置，未配置Django时使用默认值。
"""
import os
from typing import Any, Callable, Dict, Optional

from django.conf import ENVIRONMENT_VARIABLE, settings
from django.dispatch import receiver
from django.test.signals import setting_changed
from django.utils.module_loading import import_string

# 类型解析器: 接收实体实例，返回其真实类型
TypeResolver = Callable[[Any], type]

# 领域模块配置默认值
DEFAULTS: Dict[str, Any] = {
    # 类型解析器的导入路径，例如'core.infrastructure.proxies.concrete_model_type'
    'TYPE_RESOLVER': None,
    # 密码最小长度
    'MIN_PASSWORD_LENGTH': 6,
}

_UNLOADED = object()

# 通过代码注入的类型解析器，优先于配置
_injected_resolver: Optional[TypeResolver] = None
# 从配置加载的类型解析器缓存
_configured_resolver: Any = _UNLOADED


def settings_available() -> bool:
    """
    检查Django设置是否可用。
    """
    return settings.configured or bool(os.environ.get(ENVIRONMENT_VARIABLE))


def get_domain_settings() -> Dict[str, Any]:
    """
    获取合并默认值后的领域模块配置。

    Returns:
        领域模块配置字典
    """
    domain_settings = dict(DEFAULTS)
    if settings_available():
        domain_settings.update(getattr(settings, 'DOMAIN_SETTINGS', {}))
    return domain_settings


def get_domain_setting(name: str) -> Any:
    """
    获取单个领域模块配置项。

    Args:
        name: 配置项名称

    Returns:
        配置值

    Raises:
        KeyError: 配置项不存在时抛出
    """
    return get_domain_settings()[name]


def set_type_resolver(resolver: Optional[TypeResolver]) -> None:
    """
    注入类型解析器，用于穿透持久化框架的代理获取实体真实类型。

    Args:
        resolver: 类型解析器，传入None则恢复使用配置中的解析器
    """
    global _injected_resolver
    _injected_resolver = resolver


def get_type_resolver() -> Optional[TypeResolver]:
    """
    获取当前生效的类型解析器。

    Returns:
        类型解析器，未注入也未配置时返回None
    """
    global _configured_resolver
    if _injected_resolver is not None:
        return _injected_resolver
    if _configured_resolver is _UNLOADED:
        if not settings_available():
            return None
        path = get_domain_setting('TYPE_RESOLVER')
        _configured_resolver = import_string(path) if path else None
    return _configured_resolver


@receiver(setting_changed)
def reload_domain_settings(sender: Any, setting: str, **kwargs: Any) -> None:
    """
    领域模块配置变更时清除已加载的类型解析器。
    """
    global _configured_resolver
    if setting == 'DOMAIN_SETTINGS':
        _configured_resolver = _UNLOADED
