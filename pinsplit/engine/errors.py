"""
异常定义

切分本身从不抛错，只有配置和输入类型两类错误
"""


class PinsplitError(Exception):
    """pinsplit 异常基类"""


class InvalidConfig(PinsplitError, ValueError):
    """配置无效（如分隔符不是单个字符、未知切分策略）"""


class InvalidInput(PinsplitError, TypeError):
    """输入不是文本"""


def ensure_text(value, name: str = "text") -> str:
    """校验输入为 str，否则抛出 InvalidInput"""
    if not isinstance(value, str):
        raise InvalidInput(f"{name} 必须是字符串, 实际为 {type(value).__name__}")
    return value
