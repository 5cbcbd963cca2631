"""
规则切分模块

不依赖音节表，按拼音音系规律插入音节边界：
依次执行一组上下文相关的替换规则（顺序有意义，后面的规则作用于前面的输出），
处理过程中以空格作边界，最后按空格拆分。
"""

from typing import Callable, List, Tuple

import regex

from .normalizer import VOWELS


_V = f'[{VOWELS}]'
_FLAGS = regex.IGNORECASE

_OPEN_VOWEL_RE = regex.compile(f'({_V})(?![{VOWELS}o])([^{VOWELS}nr])', _FLAGS)
_RETROFLEX_INITIAL_RE = regex.compile(r'(\w)([csz]h)', _FLAGS)
_DIPHTHONG_FINAL_RE = regex.compile(f'({_V}{{2}}(?:ng? )?)([^{VOWELS}nr])', _FLAGS)
_DIPHTHONG_NASAL_INITIAL_RE = regex.compile(f'({_V}{{2}})(n{_V})', _FLAGS)
_N_FINAL_RE = regex.compile(f'(n)([^{VOWELS}g])', _FLAGS)
_EMBEDDED_SYMBOL_RE = regex.compile(rf'({_V})([^{VOWELS}\w\s])({_V})', _FLAGS)
_NG_BETWEEN_VOWELS_RE = regex.compile(f'({_V})(n)(g)({_V})', _FLAGS)
_G_R_FINAL_RE = regex.compile(f'([gr])([^{VOWELS}])', _FLAGS)
_R_SUFFIX_RE = regex.compile(r'([^eēéěĕè\s])(r)', _FLAGS)
_ER_SYLLABLE_RE = regex.compile(r'([^\w\s])([eēéěĕè]r)', _FLAGS)
_MULTI_SPACE_RE = regex.compile(r'\s{2,}')


def split_after_open_vowel(text: str) -> str:
    """元音后接 n/r 以外的辅音: shìjiè → shì jiè"""
    return _OPEN_VOWEL_RE.sub(r'\1 \2', text)


def split_before_retroflex_initial(text: str) -> str:
    """ch/sh/zh 前断开: wǒzhīdào → wǒ zhīdào"""
    return _RETROFLEX_INITIAL_RE.sub(r'\1 \2', text)


def split_after_diphthong_final(text: str) -> str:
    """双元音（可带已断开的 n/ng）后接辅音: liǎojiě → liǎo jiě"""
    return _DIPHTHONG_FINAL_RE.sub(r'\1 \2', text)


def split_before_nasal_initial(text: str) -> str:
    """双元音后的 n+元音归下一音节: Tiānān → Tiā nān"""
    return _DIPHTHONG_NASAL_INITIAL_RE.sub(r'\1 \2', text)


def split_after_n_final(text: str) -> str:
    """n 后接非元音非 g: pīnyīn → pīn yīn"""
    return _N_FINAL_RE.sub(r'\1 \2', text)


def split_around_embedded_symbol(text: str) -> str:
    """
    元音之间夹着的非字母符号归后一音节

    只作用于直接调用的片段；tokenize 交给切分器的都是纯字母串，此规则不会命中。
    """
    return _EMBEDDED_SYMBOL_RE.sub(r'\1 \2\3', text)


def split_ng_between_vowels(text: str) -> str:
    """元音 ng 元音: n 归前、g 归后"""
    return _NG_BETWEEN_VOWELS_RE.sub(r'\1\2 \3\4', text)


def split_after_g_r_final(text: str) -> str:
    """ng/r 韵尾后接辅音: Zhōngguó → Zhōng guó"""
    return _G_R_FINAL_RE.sub(r'\1 \2', text)


def split_before_r_suffix(text: str) -> str:
    """非 e 后的 r 视为儿化: huār → huā r"""
    return _R_SUFFIX_RE.sub(r'\1 \2', text)


def split_before_er_syllable(text: str) -> str:
    """
    符号后的 er 单独成音节

    同 split_around_embedded_symbol，经 tokenize 的纯字母串上不会命中。
    """
    return _ER_SYLLABLE_RE.sub(r'\1 \2', text)


def collapse_boundaries(text: str) -> str:
    """连续边界合并为一个"""
    return _MULTI_SPACE_RE.sub(' ', text)


# 规则顺序不可调整
RULES: Tuple[Callable[[str], str], ...] = (
    split_after_open_vowel,
    split_before_retroflex_initial,
    split_after_diphthong_final,
    split_before_nasal_initial,
    split_after_n_final,
    split_around_embedded_symbol,
    split_ng_between_vowels,
    split_after_g_r_final,
    split_before_r_suffix,
    split_before_er_syllable,
    collapse_boundaries,
)


def apply_rules(piece: str) -> str:
    """对单个片段依次执行全部规则，返回以空格分隔的结果"""
    for rule in RULES:
        piece = rule(piece)
    return piece


class PatternSegmenter:
    """规则切分器"""

    def split(self, word: str, marker: str) -> List[str]:
        """
        切分单个词

        Args:
            word: 连续字母串，可含已有的分隔符
            marker: 分隔符

        Returns:
            音节列表；少于两个音节时返回 [word]
        """
        if not word:
            return [word]

        syllables = []
        for piece in word.split(marker):
            if not piece:
                continue
            processed = apply_rules(piece)
            syllables.extend(s.strip() for s in processed.split(' ') if s.strip())

        return syllables if len(syllables) > 1 else [word]
