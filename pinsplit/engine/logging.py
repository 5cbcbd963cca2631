"""
统一日志配置模块

提供结构化日志、文件轮转、耗时统计等功能

环境变量：
    PINSPLIT_LOG_TO_FILE  写入日志文件（默认关闭，库调用方通常自行处理日志）
    PINSPLIT_LOG_DIR      日志目录（默认项目根目录下的 logs/）
    PINSPLIT_LOG_JSON     控制台与文件使用 JSON 格式
"""

import os
import sys
import logging
import time
from datetime import datetime, timezone
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import orjson


# 项目根目录
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


def get_log_dir() -> Path:
    return Path(os.getenv('PINSPLIT_LOG_DIR', PROJECT_ROOT / 'logs'))


class JsonFormatter(logging.Formatter):
    """JSON 格式日志（便于日志分析工具解析）"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # 额外字段
        if hasattr(record, 'request_id'):
            log_data['request_id'] = record.request_id
        if hasattr(record, 'duration_ms'):
            log_data['duration_ms'] = record.duration_ms

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return orjson.dumps(log_data, default=str).decode('utf-8')


class ColorFormatter(logging.Formatter):
    """彩色控制台输出"""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, '')
        # 复制一份，避免颜色码污染其他 handler 的输出
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    name: str = 'pinsplit',
    level: str = 'INFO',
    log_to_file: Optional[bool] = None,
    log_to_console: bool = True,
    json_format: Optional[bool] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """
    配置日志系统

    Args:
        name: 日志器名称
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: 是否写入文件（None 时读取 PINSPLIT_LOG_TO_FILE）
        log_to_console: 是否输出到控制台
        json_format: 是否使用 JSON 格式（None 时读取 PINSPLIT_LOG_JSON）
        max_bytes: 单个日志文件最大大小
        backup_count: 保留的日志文件数量

    Returns:
        配置好的 Logger 实例
    """
    if log_to_file is None:
        log_to_file = _env_flag('PINSPLIT_LOG_TO_FILE')
    if json_format is None:
        json_format = _env_flag('PINSPLIT_LOG_JSON')

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    # 清除已有 handlers（避免重复添加）
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    detailed_format = '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s'
    simple_format = '%(asctime)s | %(levelname)-8s | %(message)s'

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)

        if json_format:
            console_handler.setFormatter(JsonFormatter())
        elif sys.stderr.isatty():
            console_handler.setFormatter(ColorFormatter(simple_format))
        else:
            console_handler.setFormatter(logging.Formatter(simple_format))

        logger.addHandler(console_handler)

    if log_to_file:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        # 主日志文件（轮转）
        file_handler = RotatingFileHandler(
            log_dir / f'{name}.log',
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(detailed_format))
        logger.addHandler(file_handler)

        # 错误日志单独文件
        error_handler = RotatingFileHandler(
            log_dir / f'{name}_error.log',
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(logging.Formatter(detailed_format))
        logger.addHandler(error_handler)

    return logger


def get_logger(name: str = 'pinsplit') -> logging.Logger:
    """获取已配置的 logger（如果未配置则自动配置）"""
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logging(name)
    return logger


def log_execution_time(logger: Optional[logging.Logger] = None):
    """装饰器：记录函数执行时间"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            nonlocal logger
            if logger is None:
                logger = get_engine_logger()

            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = (time.perf_counter() - start) * 1000
                logger.error(f"{func.__name__} 执行失败, 耗时: {elapsed:.2f}ms, 错误: {e}")
                raise
            elapsed = (time.perf_counter() - start) * 1000
            logger.debug(f"{func.__name__} 执行完成, 耗时: {elapsed:.2f}ms")
            return result
        return wrapper
    return decorator


# 预配置的日志器
api_logger = None
engine_logger = None


def get_api_logger() -> logging.Logger:
    """获取 API 日志器"""
    global api_logger
    if api_logger is None:
        api_logger = setup_logging('pinsplit.api', level=os.getenv('PINSPLIT_LOG_LEVEL', 'INFO'))
    return api_logger


def get_engine_logger() -> logging.Logger:
    """获取引擎日志器"""
    global engine_logger
    if engine_logger is None:
        engine_logger = setup_logging('pinsplit.engine', level=os.getenv('PINSPLIT_LOG_LEVEL', 'INFO'))
    return engine_logger
