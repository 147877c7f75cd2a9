"""Tests for log file routing."""

from utils.logger import _get_log_file_for_module, setup_logger


def test_launcher_modules_share_a_log_file():
    assert _get_log_file_for_module("launcher.runner") == "launcher.log"
    assert _get_log_file_for_module("launcher.image_info") == "launcher.log"


def test_entry_point_and_unmapped_modules_use_main_log():
    assert _get_log_file_for_module("__main__") == "main.log"
    assert _get_log_file_for_module("utils.something") == "main.log"


def test_handlers_attached_once():
    first = setup_logger("launcher.test_handlers")
    count = len(first.handlers)
    second = setup_logger("launcher.test_handlers")

    assert first is second
    assert len(second.handlers) == count == 3
    assert not second.propagate
