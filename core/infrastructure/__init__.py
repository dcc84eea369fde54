"""
基础设施层包。
提供持久化框架相关的类型解析等基础设施组件。
"""

# 代理类型解析
from core.infrastructure.proxies import concrete_model_type

__all__ = [
    # 代理类型解析
    'concrete_model_type',
]
