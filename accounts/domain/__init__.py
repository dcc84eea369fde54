"""
账户领域模型包。
提供用户、用户组实体和用户注册。
"""

# 实体
from accounts.domain.entities import User, UserGroup

# 用户注册
from accounts.domain.registration import UserRegistration

__all__ = [
    # 实体
    'User',
    'UserGroup',

    # 用户注册
    'UserRegistration',
]
