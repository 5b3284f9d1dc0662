import logging
from pathlib import Path

CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level="WARNING", log_file=None) -> logging.Logger:
    """
    Configure the root logger for the game.

    Args:
        level (str | int): Threshold for both handlers.
        log_file (str | Path, optional): Also write records to this file.
    Returns:
        logging.Logger: The configured root logger.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Calling twice must not duplicate output
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(ch)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(fh)

    return root
