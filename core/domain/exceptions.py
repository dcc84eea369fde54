"""
领域异常模块。
包含领域模型中使用的异常类。
"""


class DomainException(Exception):
    """
    领域异常基类。
    所有领域模型中的异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化领域异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """
    实体状态无效异常。
    当实体处于无效状态，或发生不允许的状态转换时抛出。
    """

    def __init__(self, entity_name: str, reason: str):
        """
        初始化实体状态无效异常。

        Args:
            entity_name: 实体名称
            reason: 无效原因
        """
        message = f"{entity_name}处于无效状态: {reason}"
        super().__init__(message)
        self.entity_name = entity_name
        self.reason = reason
