"""
Unit tests for HybridLogger / ClassLogger
"""

import logging

from matrix_system import PixelMatrix, RowOutOfBoundsError
from matrix_utils import HybridLogger, NullLogger


def test_console_only_has_no_file(tmp_path):
    hybrid = HybridLogger("test_console_only", log_dir=str(tmp_path / "logs"), console_only=True)
    assert hybrid.log_file is None
    assert not (tmp_path / "logs").exists()
    hybrid.cleanup()


def test_class_loggers_are_shared():
    hybrid = HybridLogger("test_shared", console_only=True)
    a = hybrid.get_class_logger("PixelMatrix")
    b = hybrid.get_class_logger("PixelMatrix", logging.DEBUG)
    assert a is b
    assert hybrid.get_main_logger().class_name == "Main"
    hybrid.cleanup()


def test_level_filtering(capsys):
    hybrid = HybridLogger("test_levels", console_only=True)
    logger = hybrid.get_class_logger("Writer", logging.INFO)
    logger.debug("hidden message")
    logger.info("visible message")
    hybrid.cleanup()

    out = capsys.readouterr().out
    assert "hidden message" not in out
    assert "visible message" in out
    assert "[Writer]" in out


def test_file_output_without_colors(tmp_path):
    hybrid = HybridLogger("test_file", log_dir=str(tmp_path))
    hybrid.get_class_logger("PixelMatrix", logging.DEBUG).debug("grew matrix")
    hybrid.cleanup()

    content = hybrid.log_file.read_text(encoding="utf-8")
    assert "[DEBUG] [PixelMatrix] grew matrix" in content
    assert "\033[" not in content


def test_error_includes_code(capsys):
    hybrid = HybridLogger("test_error", console_only=True)
    logger = hybrid.get_main_logger()
    try:
        PixelMatrix(2).get_pixel(0, 5)
    except RowOutOfBoundsError as e:
        logger.error("lookup failed", e)
    hybrid.cleanup()

    out = capsys.readouterr().out
    assert "lookup failed | Type: RowOutOfBoundsError | Code: ROW_OUT_OF_BOUNDS" in out


def test_matrix_logs_through_class_logger(capsys):
    hybrid = HybridLogger("test_matrix_logging", console_only=True)
    m = PixelMatrix(2, logger=hybrid.get_class_logger("PixelMatrix", logging.DEBUG))
    m.set_pixel(2, 0, 1)
    hybrid.cleanup()

    assert "Grew matrix from 0 to 3 columns" in capsys.readouterr().out


def test_null_logger_is_silent(capsys):
    logger = NullLogger()
    logger.info("nothing")
    logger.error("nothing", ValueError("x"))
    assert not logger.is_enabled_for(logging.CRITICAL)
    assert capsys.readouterr().out == ""
