"""
命令行测试
"""

import sys
import os
import io

import orjson

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pinsplit import __version__
from pinsplit.cli import main


class TestCli:
    """命令行"""

    def test_split(self, capsys):
        assert main(["split", "Xi'an"]) == 0
        assert capsys.readouterr().out == "Xi∙an\n"

    def test_split_marker(self, capsys):
        assert main(["split", "-m", "|", "Zhōngguó"]) == 0
        assert capsys.readouterr().out == "Zhōng|guó\n"

    def test_syllables_dictionary(self, capsys):
        assert main(["syllables", "-s", "dictionary", "jìniàn"]) == 0
        assert capsys.readouterr().out == "jì\nniàn\n"

    def test_no_overfetch(self, capsys):
        assert main(["syllables", "-s", "dictionary", "--no-overfetch", "jìniàn"]) == 0
        assert capsys.readouterr().out == "jìn\niàn\n"

    def test_tag(self, capsys):
        assert main(["tag", "Nǐ", "hǎo"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [orjson.loads(line) for line in lines] == [
            {"syllable": "Nǐ", "tag": "X"},
            {"syllable": " ", "tag": "PU"},
            {"syllable": "hǎo", "tag": "X"},
        ]

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("pīnyīn\n"))
        assert main(["split"]) == 0
        assert capsys.readouterr().out == "pīn∙yīn\n"

    def test_invalid_marker(self):
        assert main(["split", "-m", "ab", "nihao"]) == 2

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert capsys.readouterr().out.strip() == f"pinsplit v{__version__}"

    def test_no_command(self, capsys):
        assert main([]) == 1
