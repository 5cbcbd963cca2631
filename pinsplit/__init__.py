"""
pinsplit - 汉语拼音音节切分

规则切分与词典切分两种策略，支持带调、数字调与无调拼音
"""

__version__ = "0.1.0"

from pinsplit.engine import (
    PinyinSplitter,
    create_splitter,
    split_word,
    split_text,
    tag_text,
    list_syllables,
    split_chunks,
    SplitterConfig,
    TaggedToken,
    TokenTag,
    PinsplitError,
    InvalidConfig,
    InvalidInput,
    SYLLABLES,
    is_valid_syllable,
    PatternSegmenter,
    DictionarySegmenter,
)

__all__ = [
    "__version__",
    # 引擎
    "PinyinSplitter",
    "create_splitter",
    "split_word",
    "split_text",
    "tag_text",
    "list_syllables",
    "split_chunks",
    # 配置
    "SplitterConfig",
    "TaggedToken",
    "TokenTag",
    # 异常
    "PinsplitError",
    "InvalidConfig",
    "InvalidInput",
    # 音节表
    "SYLLABLES",
    "is_valid_syllable",
    # 切分器
    "PatternSegmenter",
    "DictionarySegmenter",
]
