"""
账户领域模型中的实体。
包含用户与用户组实体，两者之间为双向多对多关系。
"""
from typing import List

from loguru import logger

from core.domain import DomainEntity, SignatureField, domain_signature


class User(DomainEntity[int]):
    """
    用户实体。
    业务签名为用户名。
    """

    def __init__(self):
        """
        初始化用户实体。
        """
        super().__init__()
        self._username = ""
        self.friendly_name = ""
        self.email_address = ""
        self.in_active = False
        self.deleted = False
        self._user_groups: List['UserGroup'] = []

    @domain_signature
    def username(self) -> str:
        """
        标识该用户的唯一用户名，通常为 DOMAIN\\Username。
        应通过set_username设置。
        """
        return self._username

    @property
    def user_groups(self) -> List['UserGroup']:
        """
        用户所属的用户组。
        应通过add_user_group和remove_user_group修改，以维护关系的两端。
        """
        return self._user_groups

    def set_username(self, username: str) -> None:
        """
        设置用户名，友好名称为空时同时设置为用户名。

        Args:
            username: 用户名
        """
        if not self.friendly_name:
            self.friendly_name = username
        self._username = username

    def add_user_group(self, user_group: 'UserGroup') -> None:
        """
        将用户加入用户组，同时维护用户组一端的关系。

        Args:
            user_group: 用户组
        """
        if self not in user_group.users:
            user_group.users.append(self)
        if user_group not in self._user_groups:
            self._user_groups.append(user_group)
        logger.debug(f"用户 {self.username} 已加入用户组 {user_group.name}")

    def remove_user_group(self, user_group: 'UserGroup') -> None:
        """
        将用户移出用户组，同时维护用户组一端的关系。

        Args:
            user_group: 用户组
        """
        if self in user_group.users:
            user_group.users.remove(self)
        if user_group in self._user_groups:
            self._user_groups.remove(user_group)
        logger.debug(f"用户 {self.username} 已移出用户组 {user_group.name}")


class UserGroup(DomainEntity[int]):
    """
    用户组实体。
    业务签名为名称和锁定状态。
    """

    name = SignatureField(default="", doc="用户组名称")

    def __init__(self, name: str = "", description: str = ""):
        """
        初始化用户组实体。

        Args:
            name: 用户组名称
            description: 用户组描述
        """
        super().__init__()
        self.name = name
        self.description = description
        self._locked = False
        self._users: List[User] = []

    @domain_signature
    def locked(self) -> bool:
        """
        用户组是否已锁定，通过lock和unlock修改。
        """
        return self._locked

    @property
    def users(self) -> List[User]:
        """
        用户组中的用户。
        应通过add_user和remove_user修改，以维护关系的两端。
        """
        return self._users

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    def add_user(self, user: User) -> None:
        """
        将用户加入用户组，同时维护用户一端的关系。
        """
        if self not in user.user_groups:
            user.user_groups.append(self)
        if user not in self._users:
            self._users.append(user)
        logger.debug(f"用户组 {self.name} 已添加用户 {user.username}")

    def remove_user(self, user: User) -> None:
        """
        将用户移出用户组，同时维护用户一端的关系。
        """
        if self in user.user_groups:
            user.user_groups.remove(self)
        if user in self._users:
            self._users.remove(user)
        logger.debug(f"用户组 {self.name} 已移除用户 {user.username}")
