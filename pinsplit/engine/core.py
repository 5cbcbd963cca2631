import dataclasses
import os
from typing import FrozenSet, List, Optional

from .config import (
    DEFAULT_BOUNDARY_MARKER,
    STRATEGY_DICTIONARY,
    SplitterConfig,
    TaggedToken,
    validate_boundary_marker,
)
from .dictionary import DictionarySegmenter, resuffix_tone_digits
from .errors import ensure_text
from .logging import get_engine_logger, log_execution_time
from .normalizer import normalize_text
from .pattern import PatternSegmenter
from .tokenizer import join_tokens, morphemes, split_chunks as _split_chunks, tokenize

logger = get_engine_logger()


def create_segmenter(config: SplitterConfig, inventory: Optional[FrozenSet[str]] = None):
    """按配置选择切分策略"""
    if config.strategy == STRATEGY_DICTIONARY:
        return DictionarySegmenter(inventory, correct_overfetch=config.correct_overfetch)
    return PatternSegmenter()


class PinyinSplitter:
    """
    拼音音节切分器

    流程：规范化（隔音符号/连字符 → 分隔符）→ 扫描字母串 → 策略切分 → 标注/拼接

    配置在调用期间只读；修改分隔符会替换整个配置对象，
    因此同一实例可在多线程中并发调用。
    """

    def __init__(self, config: Optional[SplitterConfig] = None, inventory: Optional[FrozenSet[str]] = None):
        self.config = config or SplitterConfig()
        self.segmenter = create_segmenter(self.config, inventory)
        logger.setLevel(self.config.log_level.upper())
        logger.debug(
            f"切分器初始化: strategy={self.config.strategy} "
            f"marker={self.config.boundary_marker!r} "
            f"overfetch={self.config.correct_overfetch} "
            f"resuffix={self.config.resuffix_tone_digits}"
        )

    @property
    def boundary_marker(self) -> str:
        return self.config.boundary_marker

    @property
    def strategy(self) -> str:
        return self.config.strategy

    def set_boundary_marker(self, char: str) -> 'PinyinSplitter':
        """设置分隔符，返回自身以便链式调用"""
        validate_boundary_marker(char)
        self.config = dataclasses.replace(self.config, boundary_marker=char)
        return self

    def normalize(self, text: str) -> str:
        ensure_text(text)
        return normalize_text(text, self.boundary_marker)

    def split_word(self, word: str) -> List[str]:
        """切分单个词（词内已有分隔符会被保留为边界）"""
        ensure_text(word, 'word')
        return self.segmenter.split(word, self.boundary_marker)

    @log_execution_time(logger)
    def tag_text(self, text: str) -> List[TaggedToken]:
        """切分全文并标注：音节为 X，其余字符逐个为 PU"""
        ensure_text(text)
        marker = self.boundary_marker
        tokens = tokenize(normalize_text(text, marker), self.segmenter, marker)
        if self.config.resuffix_tone_digits:
            tokens = resuffix_tone_digits(tokens)
        return tokens

    @log_execution_time(logger)
    def split_text(self, text: str) -> str:
        """返回以分隔符标出音节边界的全文，标点与空白原样保留"""
        ensure_text(text)
        if not text:
            return text
        return join_tokens(self.tag_text(text), self.boundary_marker)

    def list_syllables(self, text: str) -> List[str]:
        """只返回音节"""
        return morphemes(self.tag_text(text))

    def split_chunks(self, text: str) -> List[str]:
        """音节与非字母片段的混合列表"""
        ensure_text(text)
        if not text:
            return [text]
        marker = self.boundary_marker
        return _split_chunks(
            normalize_text(text, marker),
            self.segmenter,
            marker,
            resuffix=self.config.resuffix_tone_digits,
        )


def create_splitter(config: Optional[SplitterConfig] = None, inventory: Optional[FrozenSet[str]] = None) -> PinyinSplitter:
    """
    创建切分器

    Args:
        config: 切分器配置（默认 SplitterConfig()）
        inventory: 自定义音节表（仅词典策略使用）

    Returns:
        PinyinSplitter 实例
    """
    return PinyinSplitter(config, inventory)


def _splitter(strategy: str, marker: Optional[str], correct_overfetch: bool, resuffix_tone_digits: bool) -> PinyinSplitter:
    config = SplitterConfig(
        boundary_marker=DEFAULT_BOUNDARY_MARKER if marker is None else marker,
        strategy=strategy,
        correct_overfetch=correct_overfetch,
        resuffix_tone_digits=resuffix_tone_digits,
        log_level=os.getenv('PINSPLIT_LOG_LEVEL', 'INFO'),
    )
    return PinyinSplitter(config)


# ===== 无状态调用方式 =====

def split_word(word: str, strategy: str = 'pattern', marker: Optional[str] = None,
               correct_overfetch: bool = True, resuffix_tone_digits: bool = True) -> List[str]:
    return _splitter(strategy, marker, correct_overfetch, resuffix_tone_digits).split_word(word)


def split_text(text: str, strategy: str = 'pattern', marker: Optional[str] = None,
               correct_overfetch: bool = True, resuffix_tone_digits: bool = True) -> str:
    return _splitter(strategy, marker, correct_overfetch, resuffix_tone_digits).split_text(text)


def tag_text(text: str, strategy: str = 'pattern', marker: Optional[str] = None,
             correct_overfetch: bool = True, resuffix_tone_digits: bool = True) -> List[TaggedToken]:
    return _splitter(strategy, marker, correct_overfetch, resuffix_tone_digits).tag_text(text)


def list_syllables(text: str, strategy: str = 'pattern', marker: Optional[str] = None,
                   correct_overfetch: bool = True, resuffix_tone_digits: bool = True) -> List[str]:
    return _splitter(strategy, marker, correct_overfetch, resuffix_tone_digits).list_syllables(text)


def split_chunks(text: str, strategy: str = 'dictionary', marker: Optional[str] = None,
                 correct_overfetch: bool = True, resuffix_tone_digits: bool = True) -> List[str]:
    """默认使用词典策略"""
    return _splitter(strategy, marker, correct_overfetch, resuffix_tone_digits).split_chunks(text)
