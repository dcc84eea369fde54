"""
测试辅助函数。
"""
import warnings


def with_id(entity_class, id, *args, **kwargs):
    """
    以显式标识构造实体，屏蔽仅供测试使用的构造方式产生的弃用警告。
    """
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', DeprecationWarning)
        return entity_class(*args, id=id, **kwargs)
