"""
日志模块测试
"""

import sys
import os
import logging

import orjson
import pytest

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pinsplit.engine.logging import JsonFormatter, log_execution_time, setup_logging


class TestLogging:
    """日志配置"""

    def test_json_formatter(self):
        record = logging.LogRecord("pinsplit.test", logging.INFO, __file__, 10, "切分 %s", ("nihao",), None)
        data = orjson.loads(JsonFormatter().format(record))
        assert data["message"] == "切分 nihao"
        assert data["level"] == "INFO"
        assert data["logger"] == "pinsplit.test"
        assert data["timestamp"].endswith("Z")

    def test_file_logging(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PINSPLIT_LOG_DIR", str(tmp_path))
        logger = setup_logging("pinsplit.test_file", log_to_file=True, log_to_console=False)
        logger.error("出错了")
        for handler in logger.handlers:
            handler.flush()
        assert (tmp_path / "pinsplit.test_file.log").exists()
        assert "出错了" in (tmp_path / "pinsplit.test_file_error.log").read_text(encoding="utf-8")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_setup_is_idempotent(self):
        setup_logging("pinsplit.test_repeat", log_to_file=False)
        logger = setup_logging("pinsplit.test_repeat", log_to_file=False)
        assert len(logger.handlers) == 1

    def test_log_execution_time(self):
        logger = setup_logging("pinsplit.test_timer", log_to_file=False, log_to_console=False)

        @log_execution_time(logger)
        def double(x):
            return x * 2

        @log_execution_time(logger)
        def fail():
            raise RuntimeError("boom")

        assert double(3) == 6
        assert double.__name__ == "double"
        with pytest.raises(RuntimeError):
            fail()
