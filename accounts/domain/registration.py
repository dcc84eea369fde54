"""
用户注册模块。
校验注册信息并创建新的瞬态用户实体。
"""
from dataclasses import dataclass
from typing import ClassVar, Dict, List

from core.domain import PasswordLengthValidator, PropertiesMustMatchValidator, validate_instance

from accounts.domain.entities import User


@dataclass
class UserRegistration:
    """
    用户注册信息。
    """
    username: str
    email_address: str
    password: str
    confirm_password: str

    validators: ClassVar[List] = [PropertiesMustMatchValidator('password', 'confirm_password')]
    field_validators: ClassVar[Dict[str, List]] = {'password': [PasswordLengthValidator()]}

    def validate(self) -> None:
        """
        校验注册信息。

        Raises:
            ValidationError: 密码过短或两次输入的密码不一致时抛出
        """
        validate_instance(self, self.validators, self.field_validators)

    def create_user(self) -> User:
        """
        校验注册信息并创建用户，新用户在持久化之前为瞬态实体。

        Returns:
            新创建的用户
        """
        self.validate()
        user = User()
        user.set_username(self.username)
        user.email_address = self.email_address
        return user
