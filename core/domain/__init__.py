"""
领域模型包。
提供实体标识与相等性引擎：实体基类、业务签名标记、标识比较和验证器。
"""

# 基础类
from core.domain.base import DomainEntity

# 标识比较
from core.domain.identity import is_null_or_default, default_identity_for

# 业务签名
from core.domain.signature import (
    SignatureField,
    SignatureMember,
    SignatureProperty,
    domain_signature,
    is_signature_member,
    signature_members_of,
)

# 配置
from core.domain.config import get_domain_setting, get_type_resolver, set_type_resolver

# 领域异常
from core.domain.exceptions import DomainException, InvalidEntityStateException

# 验证器
from core.domain.validation import (
    PasswordLengthValidator,
    PropertiesMustMatchValidator,
    validate_instance,
)

__all__ = [
    # 基础类
    'DomainEntity',

    # 标识比较
    'is_null_or_default',
    'default_identity_for',

    # 业务签名
    'SignatureField',
    'SignatureMember',
    'SignatureProperty',
    'domain_signature',
    'is_signature_member',
    'signature_members_of',

    # 配置
    'get_domain_setting',
    'get_type_resolver',
    'set_type_resolver',

    # 领域异常
    'DomainException',
    'InvalidEntityStateException',

    # 验证器
    'PasswordLengthValidator',
    'PropertiesMustMatchValidator',
    'validate_instance',
]
