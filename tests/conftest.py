"""
测试公共配置。
"""
import pytest

from core.domain import set_type_resolver


@pytest.fixture(autouse=True)
def reset_type_resolver():
    """每个测试结束后移除注入的类型解析器"""
    yield
    set_type_resolver(None)
