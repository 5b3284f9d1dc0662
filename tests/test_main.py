import logging

import pytest

from main import build_parser, main
from utils.logger import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.length == 6
    assert args.attempts == 10
    assert args.seed is None
    assert args.log_level == "WARNING"


def test_setup_logging_writes_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "game.log"
    setup_logging("INFO", log_file)
    setup_logging("INFO", log_file)
    assert len(restore_root_logger.handlers) == 2

    logging.getLogger("game.engine").info("hello")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "INFO     | game.engine | hello" in log_file.read_text(encoding="utf-8")


def test_main_rejects_bad_configuration(restore_root_logger, capsys):
    assert main(["--length", "0"]) == 2
    assert "Invalid configuration" in capsys.readouterr().out
