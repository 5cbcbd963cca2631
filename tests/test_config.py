"""
配置测试
"""

import sys
import os
import dataclasses

import pytest

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pinsplit.engine.config import SplitterConfig, TaggedToken, TokenTag
from pinsplit.engine.errors import InvalidConfig


class TestSplitterConfig:
    """配置测试"""

    def test_default_config(self):
        config = SplitterConfig()
        assert config.boundary_marker == "∙"
        assert config.strategy == "pattern"
        assert config.correct_overfetch is True
        assert config.resuffix_tone_digits is True
        assert config.log_level == "INFO"

    def test_custom_config(self):
        config = SplitterConfig(boundary_marker="|", strategy="dictionary", correct_overfetch=False)
        assert config.boundary_marker == "|"
        assert config.strategy == "dictionary"
        assert config.correct_overfetch is False

    def test_invalid_values(self):
        with pytest.raises(InvalidConfig):
            SplitterConfig(strategy="neural")
        with pytest.raises(InvalidConfig):
            SplitterConfig(boundary_marker="x")
        with pytest.raises(InvalidConfig):
            SplitterConfig(log_level="LOUD")

    def test_tone_digit_marker(self):
        with pytest.raises(InvalidConfig):
            SplitterConfig(boundary_marker="2")
        config = SplitterConfig(boundary_marker="2", resuffix_tone_digits=False)
        assert config.boundary_marker == "2"
        # 非声调数字不受影响
        assert SplitterConfig(boundary_marker="7").boundary_marker == "7"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PINSPLIT_BOUNDARY_MARKER", "|")
        monkeypatch.setenv("PINSPLIT_STRATEGY", "Dictionary")
        monkeypatch.setenv("PINSPLIT_CORRECT_OVERFETCH", "0")
        monkeypatch.setenv("PINSPLIT_RESUFFIX_TONE_DIGITS", "yes")
        monkeypatch.setenv("PINSPLIT_LOG_LEVEL", "debug")
        config = SplitterConfig.from_env()
        assert config.boundary_marker == "|"
        assert config.strategy == "dictionary"
        assert config.correct_overfetch is False
        assert config.resuffix_tone_digits is True
        assert config.log_level == "debug"

    def test_from_env_defaults(self, monkeypatch):
        for name in ("PINSPLIT_BOUNDARY_MARKER", "PINSPLIT_STRATEGY", "PINSPLIT_CORRECT_OVERFETCH",
                     "PINSPLIT_RESUFFIX_TONE_DIGITS", "PINSPLIT_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        assert SplitterConfig.from_env() == SplitterConfig()

    def test_from_env_invalid(self, monkeypatch):
        monkeypatch.setenv("PINSPLIT_BOUNDARY_MARKER", "--")
        with pytest.raises(InvalidConfig):
            SplitterConfig.from_env()


class TestTaggedToken:
    """词元"""

    def test_frozen(self):
        token = TaggedToken("hǎo", TokenTag.MORPHEME)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "hao"

    def test_to_dict(self):
        assert TaggedToken("hǎo", TokenTag.MORPHEME).to_dict() == {"syllable": "hǎo", "tag": "X"}
        assert TaggedToken(",", TokenTag.PUNCTUATION).to_dict() == {"syllable": ",", "tag": "PU"}

    def test_tag_values(self):
        assert TokenTag.MORPHEME == "X"
        assert TokenTag.PUNCTUATION == "PU"
