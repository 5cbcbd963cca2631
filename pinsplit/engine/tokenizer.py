"""
分词标注模块

遍历全文：连续字母交给切分器，每个音节标为 X；
其余字符逐个输出并标为 PU。所有词元按序拼接可还原输入。
"""

from typing import List, Protocol

import regex

from .config import TaggedToken, TokenTag
from .dictionary import is_tone_digit


_TOKEN_RE = regex.compile(r'\p{L}+|\P{L}')
_WORD_RE = regex.compile(r'\p{L}+')


class Segmenter(Protocol):
    def split(self, word: str, marker: str) -> List[str]:
        ...


def tokenize(text: str, segmenter: Segmenter, marker: str) -> List[TaggedToken]:
    """
    切分并标注

    Args:
        text: 已规范化的文本
        segmenter: 切分器
        marker: 分隔符

    Returns:
        词元列表
    """
    tokens = []
    for match in _TOKEN_RE.finditer(text):
        chunk = match.group()
        if _WORD_RE.fullmatch(chunk):
            for syllable in segmenter.split(chunk, marker):
                tokens.append(TaggedToken(syllable, TokenTag.MORPHEME))
        else:
            tokens.append(TaggedToken(chunk, TokenTag.PUNCTUATION))
    return tokens


def join_tokens(tokens: List[TaggedToken], marker: str) -> str:
    """相邻音节之间插入分隔符，标点原样保留"""
    parts = []
    prev_is_morpheme = False
    for token in tokens:
        if token.is_morpheme and prev_is_morpheme:
            parts.append(marker)
        parts.append(token.text)
        prev_is_morpheme = token.is_morpheme
    return ''.join(parts)


def morphemes(tokens: List[TaggedToken]) -> List[str]:
    return [t.text for t in tokens if t.is_morpheme]


def split_chunks(text: str, segmenter: Segmenter, marker: str, resuffix: bool = True) -> List[str]:
    """
    切分为音节与非字母片段的混合列表

    与 tokenize 不同，字母串之间的非字母字符整段保留（如 ", "）。
    纯分隔符片段丢弃；开启 resuffix 时，数字声调片段拼回前一项，纯空白片段丢弃。
    """
    chunks = []
    last = 0
    for match in _WORD_RE.finditer(text):
        if match.start() > last:
            chunks.append(text[last:match.start()])
        chunks.extend(segmenter.split(match.group(), marker))
        last = match.end()
    if last < len(text):
        chunks.append(text[last:])

    chunks = [c for c in chunks if c and c != marker]

    if resuffix:
        fixed: List[str] = []
        for chunk in chunks:
            if is_tone_digit(chunk) and fixed:
                fixed[-1] += chunk.strip()
            elif chunk.strip():
                fixed.append(chunk)
        chunks = fixed

    return chunks
