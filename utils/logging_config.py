import logging
import os
from logging import Formatter, StreamHandler, getLogger
from logging.handlers import RotatingFileHandler
from logging import DEBUG, INFO, WARNING, ERROR, CRITICAL


class ColourFormatter(Formatter):
    """Coloured console output, one colour per level."""

    LEVEL_COLOURS = [
        (DEBUG, "\x1b[40;1m"),
        (INFO, "\x1b[34;1m"),
        (WARNING, "\x1b[33;1m"),
        (ERROR, "\x1b[31m"),
        (CRITICAL, "\x1b[41m"),
    ]

    FORMATS = {
        level: Formatter(
            f"\x1b[30;1m%(asctime)s\x1b[0m {colour}%(levelname)-8s\x1b[0m "
            f"\x1b[35m%(name)s\x1b[0m %(message)s",
            "%H:%M:%S",
        )
        for level, colour in LEVEL_COLOURS
    }

    def format(self, record):
        formatter = self.FORMATS.get(record.levelno, self.FORMATS[DEBUG])
        return formatter.format(record)


class PlainFormatter(Formatter):
    """Uncoloured output for files and non-terminal streams."""

    def __init__(self):
        super().__init__(
            "%(asctime)s %(levelname)-8s %(name)s %(message)s (%(filename)s:%(lineno)d)",
            "%Y-%m-%d %H:%M:%S"
        )


def _use_colour(stream) -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def setup_logging(level="INFO", log_to_file=False, log_file_path="logs/kandinsky.log",
                  max_file_size=5*1024*1024, backup_count=3):
    """
    Set up logging for the generator, with optional rotating file output.

    Args:
        level (str): Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file (bool): Also write to log_file_path
        log_file_path (str): Path to the log file
        max_file_size (int): Size in bytes before the file is rotated
        backup_count (int): Number of rotated files to keep

    Returns:
        logging.Logger: The configured root logger
    """
    handlers = []

    console_handler = StreamHandler()
    if _use_colour(console_handler.stream):
        console_handler.setFormatter(ColourFormatter())
    else:
        console_handler.setFormatter(PlainFormatter())
    handlers.append(console_handler)

    if log_to_file:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_file_size,
            backupCount=backup_count
        )
        file_handler.setFormatter(PlainFormatter())
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=handlers,
        force=True
    )

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger()


def get_logger(name=None):
    """
    Get a logger that inherits the root configuration.

    Args:
        name (str): Logger name, usually __name__

    Returns:
        logging.Logger
    """
    return getLogger(name)
