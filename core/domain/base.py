"""
核心领域模型基类模块。
包含DomainEntity基类，为所有具有标识的领域对象提供相等性、哈希和字符串表示。
"""
import logging
import typing
import warnings
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

from cachetools import cached

from core.domain.config import get_type_resolver
from core.domain.exceptions import InvalidEntityStateException
from core.domain.identity import default_identity_for, is_null_or_default
from core.domain.signature import SignatureMember, signature_members_of

T = TypeVar('T')

logger = logging.getLogger(__name__)

_UNSET = object()

_HASH_MASK = (1 << 64) - 1
_HASH_SIGN = 1 << 63

# 业务签名成员索引，键为具体实体类型。
# 类型定义在运行期不变，首次计算的结果永久有效；并发首次计算的结果相同，无需加锁。
_signature_index: Dict[type, Tuple[SignatureMember, ...]] = {}

# 实体标识类型索引，键为具体实体类型
_identity_type_index: Dict[type, Optional[type]] = {}


def _wrap_hash(value: int) -> int:
    """将哈希值截断为64位有符号整数"""
    value &= _HASH_MASK
    return value - (1 << 64) if value & _HASH_SIGN else value


@cached(cache=_signature_index, key=lambda entity_type: entity_type)
def _signature_members_for(entity_type: type) -> Tuple[SignatureMember, ...]:
    members = signature_members_of(entity_type)
    logger.debug(f"已建立{entity_type.__name__}的业务签名索引: {[member.name for member in members]}")
    return members


def _resolve_identity_type(klass: type, substitutions: Dict[Any, Any]) -> Optional[type]:
    # 沿继承链向上查找DomainEntity的泛型参数，途经的类型变量按子类给出的实参替换
    for base in vars(klass).get('__orig_bases__', klass.__bases__):
        origin = typing.get_origin(base) or base
        if not (isinstance(origin, type) and issubclass(origin, DomainEntity)):
            continue
        args = tuple(substitutions.get(arg, arg) for arg in typing.get_args(base))
        if origin is DomainEntity:
            if args and isinstance(args[0], type):
                return args[0]
            return None
        parameters = getattr(origin, '__parameters__', ())
        return _resolve_identity_type(origin, dict(zip(parameters, args)))
    return None


@cached(cache=_identity_type_index, key=lambda entity_type: entity_type)
def _identity_type_for(entity_type: type) -> Optional[type]:
    # 从泛型参数中读取标识类型，例如 class User(DomainEntity[int])
    # 或 class IntStub(GenericStub[int])，其中 class GenericStub(DomainEntity[K])
    return _resolve_identity_type(entity_type, {})


class DomainEntity(Generic[T]):
    """
    领域实体基类。
    抽象基类，只能通过子类实例化。

    实体持久化后(标识非默认值)，通过标识判断相等性；持久化之前，
    或一方已持久化而另一方尚未持久化时，通过业务签名判断相等性。
    不同具体类型的实体永远不相等。

    子类通过domain_signature或SignatureField声明构成业务签名的成员:

        class UserGroup(DomainEntity[int]):
            name = SignatureField(default='')
    """

    # 哈希乘数。31、33、37、39和41产生的碰撞最少。
    HASH_MULTIPLIER = 31

    def __init__(self, id: Any = _UNSET):
        """
        初始化实体。

        Args:
            id: 实体标识。仅供测试使用，生产代码应由持久化层分配标识。

        Raises:
            TypeError: 直接实例化DomainEntity时抛出
        """
        if type(self) is DomainEntity:
            raise TypeError("DomainEntity是抽象基类，不能直接实例化")
        if id is _UNSET:
            id = default_identity_for(_identity_type_for(type(self)))
        else:
            warnings.warn(
                "显式指定标识的构造方式仅用于测试，不应在生产代码中使用",
                DeprecationWarning,
                stacklevel=2,
            )
        self._id = id
        self._row_version: Optional[bytes] = None
        self._cached_hash: Optional[int] = None
        self._cached_signature_hash: Optional[int] = None
        self._hash_signature_values: Optional[Dict[str, Optional[str]]] = None
        self._cached_signature_string = ""
        self._display_signature_values: Optional[Dict[str, Optional[str]]] = None

    @property
    def id(self) -> T:
        """
        实体的持久化标识。
        """
        return self._id

    @property
    def row_version(self) -> Optional[bytes]:
        """
        持久化层使用的并发控制令牌，不参与相等性判断。
        """
        return self._row_version

    def _assign_id(self, value: T) -> None:
        """
        由持久化层分配标识，使实体从瞬态转为持久化状态。

        Args:
            value: 新标识

        Raises:
            InvalidEntityStateException: 标识为默认值，或实体已持久化且标识不同时抛出
        """
        entity_name = self.get_type_unproxied().__name__
        if is_null_or_default(value):
            raise InvalidEntityStateException(entity_name, "不能分配默认值作为标识")
        if not self.is_transient():
            if self._id == value:
                return
            raise InvalidEntityStateException(entity_name, f"标识已分配为{self._id}，不能变更为{value}")
        logger.debug(f"{entity_name}已分配标识: {value}")
        self._id = value

    def _assign_row_version(self, row_version: Optional[bytes]) -> None:
        """
        由持久化层更新并发控制令牌。
        """
        self._row_version = row_version

    def is_transient(self) -> bool:
        """
        瞬态实体尚未与存储中的记录关联，即标识仍为其类型的默认值。
        """
        return is_null_or_default(self._id)

    def get_type_unproxied(self) -> type:
        """
        获取实体的真实类型。

        持久化框架可能用代理对象包装实体，此时可以注入类型解析器
        (参见core.domain.config.set_type_resolver)或在子类中重写此方法。
        默认返回实例自身的类型。
        """
        resolver = get_type_resolver()
        if resolver is not None:
            return resolver(self)
        return type(self)

    def get_signature_properties(self) -> Tuple[SignatureMember, ...]:
        """
        获取构成业务签名的成员，按真实类型全局缓存。
        """
        return _signature_members_for(self.get_type_unproxied())

    def _is_of_same_type(self, compare_to: 'DomainEntity') -> bool:
        return self.get_type_unproxied() is compare_to.get_type_unproxied()

    def _has_same_non_default_id_as(self, compare_to: 'DomainEntity') -> bool:
        return (
            not self.is_transient()
            and not compare_to.is_transient()
            and self._id == compare_to._id
            and self._is_of_same_type(compare_to)
        )

    def _has_same_business_signature_as(self, compare_to: 'DomainEntity') -> bool:
        """
        比较两个实体的业务签名。

        未声明任何签名成员的类型不存在结构相等的定义，只有同一对象才相等。
        """
        signature_properties = self.get_signature_properties()
        if not signature_properties:
            return self is compare_to

        for member in signature_properties:
            value = member.value_of(self)
            value_to_compare_to = member.value_of(compare_to)
            if value is None and value_to_compare_to is None:
                continue
            if value is None or value_to_compare_to is None or value != value_to_compare_to:
                return False
        return True

    def _signature_values(self, signature_properties: Tuple[SignatureMember, ...]) -> Dict[str, Optional[str]]:
        # 签名成员当前值的文本表示，用于检测签名是否发生变化
        return {member.name: member.rendered_value_of(self) for member in signature_properties}

    def _type_hash(self) -> int:
        entity_type = self.get_type_unproxied()
        return hash(f"{entity_type.__module__}.{entity_type.__qualname__}")

    def _signature_properties_string(self) -> str:
        signature_properties = self.get_signature_properties()
        if not signature_properties:
            self._cached_signature_string = ""
            return self._cached_signature_string

        signature_values = self._signature_values(signature_properties)
        if self._display_signature_values is None or signature_values != self._display_signature_values:
            self._cached_signature_string = "".join(
                f"{name}:{value}, " for name, value in signature_values.items() if value is not None
            )
            self._display_signature_values = signature_values
        return self._cached_signature_string

    def __eq__(self, other: Any) -> bool:
        """
        判断两个实体是否相等。

        Args:
            other: 另一个对象

        Returns:
            同一对象，或同类型且标识相同(非默认值)，或同类型且至少一方为瞬态、
            业务签名相同时返回True；否则返回False
        """
        if self is other:
            return True
        if not isinstance(other, DomainEntity):
            return False
        if self._has_same_non_default_id_as(other):
            return True
        # 标识不同，只有一方为瞬态时才比较业务签名
        return (
            self._is_of_same_type(other)
            and (self.is_transient() or other.is_transient())
            and self._has_same_business_signature_as(other)
        )

    def __hash__(self) -> int:
        """
        计算实体的哈希值。

        持久化实体的哈希值由类型和标识计算，计算一次后永久缓存；
        瞬态实体的哈希值由类型和业务签名计算，签名变化后重新计算。
        相等的实体总是具有相同的哈希值。
        """
        if self.is_transient():
            signature_properties = self.get_signature_properties()
            if not signature_properties:
                # 未声明签名成员时使用对象自身的哈希值
                return object.__hash__(self)

            signature_values = self._signature_values(signature_properties)
            if self._cached_signature_hash is not None and signature_values == self._hash_signature_values:
                return self._cached_signature_hash

            # 不同类型的实体可能具有相同的签名值，因此哈希计算包含类型
            hash_code = self._type_hash()
            for member in signature_properties:
                value = member.value_of(self)
                if value is not None:
                    hash_code = _wrap_hash((hash_code * self.HASH_MULTIPLIER) ^ hash(value))

            self._cached_signature_hash = hash_code
            self._hash_signature_values = signature_values
            return hash_code

        if self._cached_hash is None:
            self._cached_hash = _wrap_hash((self._type_hash() * self.HASH_MULTIPLIER) ^ hash(self._id))
        return self._cached_hash

    def __str__(self) -> str:
        """
        返回实体的字符串表示，例如"User: [Id:0] (username:admin, IsTransient:True)"。
        """
        return "{0}: [Id:{1}] ({2}IsTransient:{3})".format(
            self.get_type_unproxied().__name__,
            "" if self._id is None else self._id,
            self._signature_properties_string(),
            self.is_transient(),
        )
