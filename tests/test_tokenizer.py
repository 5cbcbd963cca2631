"""
分词标注测试
"""

import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pinsplit.engine.config import TokenTag
from pinsplit.engine.dictionary import DictionarySegmenter
from pinsplit.engine.pattern import PatternSegmenter
from pinsplit.engine.tokenizer import join_tokens, morphemes, split_chunks, tokenize


SAMPLE = "Nǐ hǎo, shìjiè!"


class TestTokenize:
    """切分与标注"""

    def test_tokens_and_tags(self):
        tokens = tokenize(SAMPLE, PatternSegmenter(), "∙")
        assert [t.text for t in tokens] == ["Nǐ", " ", "hǎo", ",", " ", "shì", "jiè", "!"]
        assert [t.tag for t in tokens] == [
            TokenTag.MORPHEME, TokenTag.PUNCTUATION, TokenTag.MORPHEME,
            TokenTag.PUNCTUATION, TokenTag.PUNCTUATION,
            TokenTag.MORPHEME, TokenTag.MORPHEME, TokenTag.PUNCTUATION,
        ]

    def test_each_non_letter_is_own_token(self):
        tokens = tokenize("hǎo!!\n", PatternSegmenter(), "∙")
        assert [t.text for t in tokens] == ["hǎo", "!", "!", "\n"]

    def test_reconstruction(self):
        texts = [
            SAMPLE,
            "Wǒ ài Běijīng Tiānānmén.\nZhōngguó 2024",
            "pin1yin1 -- ???",
            "  ",
            "",
        ]
        for segmenter in (PatternSegmenter(), DictionarySegmenter()):
            for text in texts:
                tokens = tokenize(text, segmenter, "∙")
                assert "".join(t.text for t in tokens) == text

    def test_empty(self):
        assert tokenize("", PatternSegmenter(), "∙") == []


class TestProjections:
    """拼接与过滤"""

    def test_join(self):
        tokens = tokenize(SAMPLE, PatternSegmenter(), "∙")
        assert join_tokens(tokens, "∙") == "Nǐ hǎo, shì∙jiè!"
        assert join_tokens(tokens, "|") == "Nǐ hǎo, shì|jiè!"

    def test_morphemes(self):
        tokens = tokenize(SAMPLE, DictionarySegmenter(), "∙")
        assert morphemes(tokens) == ["Nǐ", "hǎo", "shì", "jiè"]


class TestSplitChunks:
    """混合片段列表"""

    def test_chunks_keep_runs(self):
        chunks = split_chunks(SAMPLE, DictionarySegmenter(), "∙", resuffix=False)
        assert chunks == ["Nǐ", " ", "hǎo", ", ", "shì", "jiè", "!"]

    def test_resuffix_drops_whitespace(self):
        chunks = split_chunks(SAMPLE, DictionarySegmenter(), "∙", resuffix=True)
        assert chunks == ["Nǐ", "hǎo", ", ", "shì", "jiè", "!"]

    def test_resuffix_digits(self):
        chunks = split_chunks("pin1 yin1", DictionarySegmenter(), "∙")
        assert chunks == ["pin1", "yin1"]

    def test_marker_chunk_dropped(self):
        assert split_chunks("Xi∙an", DictionarySegmenter(), "∙") == ["Xi", "an"]
