"""Tests for logging setup"""

import logging

from common.logging import get_logger, setup_logging


class TestSetupLogging:
    """setup_logging 测试"""

    def test_sets_root_level(self):
        """测试设置根日志级别"""
        setup_logging("debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_writes_log_file(self, tmp_path):
        """测试写入日志文件并自动创建目录"""
        log_file = tmp_path / "logs" / "app.log"
        setup_logging("INFO", str(log_file))

        get_logger("slack.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_httpx_logger_quieted(self):
        """测试 httpx 日志级别提高到 WARNING"""
        setup_logging("DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
