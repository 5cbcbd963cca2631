from .config import SplitterConfig, TaggedToken, TokenTag, DEFAULT_BOUNDARY_MARKER, STRATEGIES
from .errors import PinsplitError, InvalidConfig, InvalidInput
from .inventory import SYLLABLES, MAX_SYLLABLE_LENGTH, is_valid_syllable, is_valid_sequence, load_inventory
from .normalizer import (
    VOWELS,
    normalize_text,
    remove_affixed_apostrophes,
    replace_hyphen_separators,
    strip_tones,
    has_tone_marks,
    fold_syllable,
)
from .pattern import PatternSegmenter, RULES
from .dictionary import DictionarySegmenter, resuffix_tone_digits
from .tokenizer import tokenize, join_tokens, morphemes
from .core import (
    PinyinSplitter,
    create_splitter,
    create_segmenter,
    split_word,
    split_text,
    tag_text,
    list_syllables,
    split_chunks,
)
from .logging import setup_logging, get_logger, get_api_logger, get_engine_logger

__all__ = [
    # 引擎
    'PinyinSplitter',
    'create_splitter',
    'create_segmenter',
    'split_word',
    'split_text',
    'tag_text',
    'list_syllables',
    'split_chunks',
    # 配置
    'SplitterConfig',
    'TaggedToken',
    'TokenTag',
    'DEFAULT_BOUNDARY_MARKER',
    'STRATEGIES',
    # 异常
    'PinsplitError',
    'InvalidConfig',
    'InvalidInput',
    # 音节表
    'SYLLABLES',
    'MAX_SYLLABLE_LENGTH',
    'is_valid_syllable',
    'is_valid_sequence',
    'load_inventory',
    # 规范化
    'VOWELS',
    'normalize_text',
    'remove_affixed_apostrophes',
    'replace_hyphen_separators',
    'strip_tones',
    'has_tone_marks',
    'fold_syllable',
    # 切分
    'PatternSegmenter',
    'RULES',
    'DictionarySegmenter',
    'resuffix_tone_digits',
    'tokenize',
    'join_tokens',
    'morphemes',
    # 日志
    'setup_logging',
    'get_logger',
    'get_api_logger',
    'get_engine_logger',
]
