"""
实体验证模块。
提供Django风格的验证器，验证失败时抛出django.core.exceptions.ValidationError。
"""
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.utils.deconstruct import deconstructible

from core.domain.config import get_domain_setting


def _find_attribute(instance: Any, name: str) -> Any:
    """按名称读取属性，名称不区分大小写"""
    try:
        return getattr(instance, name)
    except AttributeError:
        lowered = name.lower()
        for candidate in dir(instance):
            if candidate.lower() == lowered:
                return getattr(instance, candidate)
        raise


@deconstructible
class PropertiesMustMatchValidator:
    """
    两个属性必须相等的验证器，例如密码与确认密码。
    以对象为参数调用。
    """
    message = "'%(original_property)s' 与 '%(confirm_property)s' 不匹配。"
    code = 'properties_mismatch'

    def __init__(self, original_property: str, confirm_property: str, message: Optional[str] = None):
        self.original_property = original_property
        self.confirm_property = confirm_property
        if message is not None:
            self.message = message

    def is_valid(self, instance: Any) -> bool:
        """
        检查两个属性的值是否相等。
        """
        original_value = _find_attribute(instance, self.original_property)
        confirm_value = _find_attribute(instance, self.confirm_property)
        return original_value == confirm_value

    def __call__(self, instance: Any) -> None:
        if not self.is_valid(instance):
            raise ValidationError(
                self.message,
                code=self.code,
                params={
                    'original_property': self.original_property,
                    'confirm_property': self.confirm_property,
                },
            )

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, self.__class__)
            and self.original_property == other.original_property
            and self.confirm_property == other.confirm_property
            and self.message == other.message
        )


@deconstructible
class PasswordLengthValidator:
    """
    密码长度验证器。
    以字段值为参数调用，值必须是长度不小于最小长度的字符串。
    """
    message = "'%(field_name)s' 长度至少为 %(min_characters)d 个字符。"
    code = 'password_too_short'

    def __init__(self, min_characters: Optional[int] = None, field_name: str = 'password',
                 message: Optional[str] = None):
        """
        初始化密码长度验证器。

        Args:
            min_characters: 最小长度，未指定时使用DOMAIN_SETTINGS['MIN_PASSWORD_LENGTH']
            field_name: 错误消息中使用的字段名称
            message: 自定义错误消息
        """
        self.min_characters = min_characters
        self.field_name = field_name
        if message is not None:
            self.message = message

    def get_min_characters(self) -> int:
        if self.min_characters is not None:
            return self.min_characters
        return get_domain_setting('MIN_PASSWORD_LENGTH')

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and len(value) >= self.get_min_characters()

    def __call__(self, value: Any) -> None:
        if not self.is_valid(value):
            raise ValidationError(
                self.message,
                code=self.code,
                params={'field_name': self.field_name, 'min_characters': self.get_min_characters()},
            )

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, self.__class__)
            and self.min_characters == other.min_characters
            and self.field_name == other.field_name
            and self.message == other.message
        )


def validate_instance(
    instance: Any,
    validators: Iterable[Callable[[Any], None]] = (),
    field_validators: Optional[Mapping[str, Iterable[Callable[[Any], None]]]] = None,
) -> None:
    """
    对对象运行所有验证器，汇总全部错误后统一抛出。

    Args:
        instance: 要验证的对象
        validators: 以对象为参数的验证器
        field_validators: 字段名称到验证器列表的映射，验证器以字段值为参数

    Raises:
        ValidationError: 任一验证器失败时抛出，错误按字段名称分组，
            对象级错误归入NON_FIELD_ERRORS
    """
    errors: Dict[str, List[ValidationError]] = {}

    for field_name, validators_for_field in (field_validators or {}).items():
        value = getattr(instance, field_name)
        for validator in validators_for_field:
            try:
                validator(value)
            except ValidationError as e:
                errors.setdefault(field_name, []).extend(e.error_list)

    for validator in validators:
        try:
            validator(instance)
        except ValidationError as e:
            errors.setdefault(NON_FIELD_ERRORS, []).extend(e.error_list)

    if errors:
        raise ValidationError(errors)
