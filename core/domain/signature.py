"""
业务签名标记模块。
用于声明哪些属性构成实体的业务签名，参见DomainEntity.get_signature_properties()。
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

# 签名成员的标记属性名
SIGNATURE_MARKER = '__domain_signature__'


class SignatureProperty(property):
    """
    构成业务签名的property。
    通过domain_signature装饰器创建，setter/deleter会保留签名标记。
    """
    __domain_signature__ = True


def domain_signature(fget: Any) -> SignatureProperty:
    """
    将getter函数(或已有的property)标记为业务签名成员。

    用法:
        @domain_signature
        def username(self) -> str:
            return self._username

    Args:
        fget: getter函数或property对象

    Returns:
        带签名标记的property
    """
    if isinstance(fget, property):
        return SignatureProperty(fget.fget, fget.fset, fget.fdel, fget.__doc__)
    return SignatureProperty(fget)


class SignatureField:
    """
    构成业务签名的普通数据字段。
    值保存在实例的__dict__中，未赋值时返回默认值。

    default为所有实例共享，只应使用不可变值；可变的默认值使用default_factory，
    首次读取时为每个实例单独创建。
    """
    __domain_signature__ = True

    def __init__(self, default: Any = None, doc: str = '',
                 default_factory: Optional[Callable[[], Any]] = None):
        if default is not None and default_factory is not None:
            raise ValueError("不能同时指定default和default_factory")
        self.default = default
        self.default_factory = default_factory
        self.name = None
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type = None) -> Any:
        if instance is None:
            return self
        if self.name not in instance.__dict__:
            if self.default_factory is None:
                return self.default
            instance.__dict__[self.name] = self.default_factory()
        return instance.__dict__[self.name]

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.name] = value


def is_signature_member(obj: Any) -> bool:
    """
    检查类属性是否带有业务签名标记。
    """
    return getattr(obj, SIGNATURE_MARKER, False) is True


@dataclass(frozen=True)
class SignatureMember:
    """
    业务签名成员描述。
    """
    name: str
    owner: type
    descriptor: Any

    def value_of(self, instance: Any) -> Any:
        """
        读取实例上该成员的当前值。
        """
        return getattr(instance, self.name)

    def rendered_value_of(self, instance: Any) -> Any:
        """
        读取实例上该成员的文本表示，值为None时返回None。
        """
        value = self.value_of(instance)
        return None if value is None else str(value)


def signature_members_of(cls: type) -> Tuple[SignatureMember, ...]:
    """
    按声明顺序获取类型(含继承成员)的全部业务签名成员。
    基类成员在前，子类成员在后；子类以无标记属性覆盖同名成员时将其移除。

    结果只依赖于类型的定义，可以按类型永久缓存。

    Args:
        cls: 具体实体类型

    Returns:
        业务签名成员元组
    """
    members: Dict[str, SignatureMember] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if is_signature_member(attr):
                members[name] = SignatureMember(name, klass, attr)
            elif name in members:
                del members[name]
    return tuple(members.values())
