"""
文本规范化模块

功能：
1. 隔音符号（Xi'an）和连字符（Zhong-guo）转为音节分隔符
2. 声调符号的去除与检测（保留 ü 的分音符）
"""

import unicodedata
from functools import lru_cache

import regex


# 全部元音（含各声调变体及 ü）
VOWELS = 'aāáǎăàeēéěĕèiīíǐĭìoōóǒŏòuūúǔŭùüǖǘǚǜ'

# 四个声调组合符：抑音、锐音、长音、抑扬（不含分音符 U+0308）
TONE_MARKS = '\u0300\u0301\u0304\u030c'

_APOSTROPHE_RE = regex.compile(rf"(?<=\p{{L}})['’](?=[{VOWELS}])", regex.IGNORECASE)
_HYPHEN_RE = regex.compile(r'(?<=\p{L})-(?=\p{L})')
_TONE_MARKS_RE = regex.compile(f'[{TONE_MARKS}]')


def remove_affixed_apostrophes(text: str, marker: str) -> str:
    """字母与元音之间的隔音符号替换为分隔符: Xi'an → Xi∙an"""
    return _APOSTROPHE_RE.sub(lambda m: marker, text)


def replace_hyphen_separators(text: str, marker: str) -> str:
    """字母之间的连字符替换为分隔符: Zhōng-guó → Zhōng∙guó"""
    return _HYPHEN_RE.sub(lambda m: marker, text)


def normalize_text(text: str, marker: str) -> str:
    """
    切分前的规范化

    先合成为 NFC（分解形式的声调符不是字母，会把字母串截断），
    再处理隔音符号和连字符。其他字符原样保留。
    """
    text = unicodedata.normalize('NFC', text)
    text = remove_affixed_apostrophes(text, marker)
    text = replace_hyphen_separators(text, marker)
    return text


def strip_tones(text: str) -> str:
    """去掉声调符号，ü 保持不变: lǚ → lü"""
    decomposed = unicodedata.normalize('NFD', text)
    return unicodedata.normalize('NFC', _TONE_MARKS_RE.sub('', decomposed))


def has_tone_marks(text: str) -> bool:
    """是否带声调符号"""
    return _TONE_MARKS_RE.search(unicodedata.normalize('NFD', text)) is not None


@lru_cache(maxsize=4096)
def fold_char(char: str) -> str:
    """单字符折叠：去调 + 小写；结果不是单字符时原样返回，保证与原文逐位对齐"""
    folded = strip_tones(char).lower()
    return folded if len(folded) == 1 else char


def fold_syllable(text: str) -> str:
    """折叠为无调小写形式（与原文等长）"""
    return ''.join(fold_char(c) for c in text)
