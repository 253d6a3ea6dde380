"""Tests for the command line parser and logging setup."""

import logging

import pytest

from pointtrigger.logging_config import setup_logging
from pointtrigger.main import build_parser


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert (args.width, args.height) == (500, 500)
        assert args.debug is False
        assert args.log_file is None

    def test_custom_surface(self):
        args = build_parser().parse_args(["--width", "800", "--height", "600", "--debug"])
        assert (args.width, args.height) == (800, 600)
        assert args.debug is True

    def test_rejects_non_integer_size(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--width", "wide"])


class TestLogging:

    def test_setup_is_idempotent(self):
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        logger = logging.getLogger("pointtrigger")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "app.log"
        setup_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("pointtrigger.tests").info("hello from tests")
        for handler in logging.getLogger("pointtrigger").handlers:
            handler.flush()
        assert "hello from tests" in log_file.read_text(encoding="utf-8")
        setup_logging(logging.WARNING)
