"""
切分器配置与数据类型
"""

import os
import unicodedata
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidConfig


DEFAULT_BOUNDARY_MARKER = '∙'

STRATEGY_PATTERN = 'pattern'
STRATEGY_DICTIONARY = 'dictionary'
STRATEGIES = (STRATEGY_PATTERN, STRATEGY_DICTIONARY)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# 数字声调
TONE_DIGITS = '12345'


def validate_boundary_marker(char) -> str:
    """
    校验分隔符

    必须恰好是一个码位，且不能是字母（否则会被当成音节内容）
    """
    if not isinstance(char, str) or len(char) != 1:
        raise InvalidConfig('分隔符必须是单个字符')
    if unicodedata.category(char).startswith('L'):
        raise InvalidConfig(f'分隔符不能是字母: {char!r}')
    return char


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class SplitterConfig:
    """切分器配置"""

    # 音节分隔符
    boundary_marker: str = DEFAULT_BOUNDARY_MARKER

    # 切分策略: pattern / dictionary
    strategy: str = STRATEGY_PATTERN

    # 词典策略的过切纠正（jìn iàn → jì niàn）
    correct_overfetch: bool = True

    # 数字声调回贴（pin 1 → pin1）
    resuffix_tone_digits: bool = True

    # 日志级别
    log_level: str = 'INFO'

    def __post_init__(self):
        validate_boundary_marker(self.boundary_marker)
        # 开启数字声调回贴时，数字分隔符会被当成声调拼进音节
        if self.resuffix_tone_digits and self.boundary_marker in TONE_DIGITS:
            raise InvalidConfig(
                f'开启数字声调回贴时分隔符不能是声调数字: {self.boundary_marker!r}'
            )
        if self.strategy not in STRATEGIES:
            raise InvalidConfig(
                f'未知切分策略: {self.strategy!r}，可选: {", ".join(STRATEGIES)}'
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise InvalidConfig(f'未知日志级别: {self.log_level!r}')

    @classmethod
    def from_env(cls) -> 'SplitterConfig':
        """从环境变量读取配置（未设置的项使用默认值）"""
        return cls(
            boundary_marker=os.getenv('PINSPLIT_BOUNDARY_MARKER', DEFAULT_BOUNDARY_MARKER),
            strategy=os.getenv('PINSPLIT_STRATEGY', STRATEGY_PATTERN).strip().lower(),
            correct_overfetch=_env_flag('PINSPLIT_CORRECT_OVERFETCH', True),
            resuffix_tone_digits=_env_flag('PINSPLIT_RESUFFIX_TONE_DIGITS', True),
            log_level=os.getenv('PINSPLIT_LOG_LEVEL', 'INFO'),
        )


class TokenTag(str, Enum):
    """词元标签"""
    MORPHEME = 'X'
    PUNCTUATION = 'PU'


@dataclass(frozen=True)
class TaggedToken:
    """带标签的词元"""
    text: str
    tag: TokenTag

    @property
    def is_morpheme(self) -> bool:
        return self.tag is TokenTag.MORPHEME

    def to_dict(self) -> dict:
        return {'syllable': self.text, 'tag': self.tag.value}


