"""
词典切分模块

功能：
1. 基于音节表的正向最大匹配（贪心，最长优先）
2. 过切纠正：jìniàn 贪心得到 jìn + iàn，回退一个字符修正为 jì + niàn
3. 数字声调回贴：pin1yin1 → pin1 + yin1
"""

from typing import FrozenSet, List, Optional

import regex

from .config import TaggedToken, TokenTag
from .inventory import SYLLABLES, is_valid_syllable
from .normalizer import fold_syllable


_TONE_DIGIT_RE = regex.compile(r'\s*[1-5]\s*')


class DictionarySegmenter:
    """词典切分器"""

    def __init__(self, inventory: Optional[FrozenSet[str]] = None, correct_overfetch: bool = True):
        """
        初始化切分器

        Args:
            inventory: 音节表（默认内置音节表）
            correct_overfetch: 是否执行过切纠正
        """
        self.inventory = inventory if inventory is not None else SYLLABLES
        self.correct_overfetch = correct_overfetch
        self.max_syllable_len = max((len(s) for s in self.inventory), default=1)

    def split(self, word: str, marker: str) -> List[str]:
        """
        切分单个词

        Args:
            word: 连续字母串，可含已有的分隔符
            marker: 分隔符

        Returns:
            音节列表（匹配失败的尾部原样作为一个片段）
        """
        if not word:
            return [word]

        result = []
        for piece in word.split(marker):
            if not piece:
                continue
            segments = self._longest_match(piece)
            if self.correct_overfetch:
                segments = self._fix_overfetch(segments)
            result.extend(segments)

        return result if result else [word]

    def _longest_match(self, piece: str) -> List[str]:
        """正向最大匹配，返回原文（带调）切片"""
        bare = fold_syllable(piece)
        n = len(bare)
        segments = []

        i = 0
        while i < n:
            matched = 0
            for length in range(min(self.max_syllable_len, n - i), 0, -1):
                if bare[i:i + length] in self.inventory:
                    matched = length
                    break

            if matched == 0:
                # 无法识别的尾部原样输出
                segments.append(piece[i:])
                break

            segments.append(piece[i:i + matched])
            i += matched

        return segments

    def _fix_overfetch(self, segments: List[str]) -> List[str]:
        """
        过切纠正

        当前片段无效、前一片段长度 > 1 时，尝试把前一片段的末字符移到当前片段开头；
        两者都变为有效音节才提交。每对只尝试一次。
        """
        fixed: List[str] = []
        for curr in segments:
            if fixed and not self.is_valid(curr):
                prev = fixed[-1]
                bare_prev = fold_syllable(prev)
                if len(bare_prev) > 1:
                    new_prev = prev[:-1]
                    new_curr = prev[-1] + curr
                    if self.is_valid(new_prev) and self.is_valid(new_curr):
                        fixed[-1] = new_prev
                        curr = new_curr
            fixed.append(curr)
        return fixed

    def is_valid(self, syllable: str) -> bool:
        """折叠后是否在音节表中"""
        return is_valid_syllable(syllable, self.inventory)


def is_tone_digit(text: str) -> bool:
    """是否为单个数字声调（1-5，可带空白）"""
    return _TONE_DIGIT_RE.fullmatch(text) is not None


def resuffix_tone_digits(tokens: List[TaggedToken]) -> List[TaggedToken]:
    """
    数字声调回贴

    紧跟在音节后的单个数字 1-5 拼回该音节，而不是作为标点输出：
    pin 1 yin 1 → pin1 yin1。连续数字（如 12）不处理。
    """
    result: List[TaggedToken] = []
    for i, token in enumerate(tokens):
        next_token = tokens[i + 1] if i + 1 < len(tokens) else None
        attach = (
            token.tag is TokenTag.PUNCTUATION
            and is_tone_digit(token.text)
            and i > 0
            and tokens[i - 1].is_morpheme
            and not (next_token is not None and next_token.text.strip().isdigit())
        )
        if attach:
            prev = result[-1]
            result[-1] = TaggedToken(prev.text + token.text.strip(), TokenTag.MORPHEME)
        else:
            result.append(token)
    return result
