# utmgrs/utils/logging_setup.py
import logging

import colorama

LOGGER_NAME = "utmgrs"  # Package-level logger name
TRACE = 5

# Store initialized state to prevent multiple handler attachments
_logger_initialized = False

LOG_COLORS = {
    "TRACE": colorama.Fore.MAGENTA,
    "DEBUG": colorama.Fore.BLUE,
    "INFO": colorama.Fore.GREEN,
    "WARNING": colorama.Fore.YELLOW,
    "ERROR": colorama.Fore.RED,
    "CRITICAL": colorama.Fore.RED + colorama.Style.BRIGHT,
}


class ColoredFormatter(logging.Formatter):
    def format(self, record):
        color = LOG_COLORS.get(record.levelname, "")
        original_levelname = record.levelname
        record.levelname = f"{color}{original_levelname}{colorama.Style.RESET_ALL}"
        formatted_message = super().format(record)
        record.levelname = original_levelname  # Reset for other handlers if any
        return formatted_message


def _trace(self, message, *args, **kws):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kws)


def init_logger(level=logging.WARNING, log_format="%(asctime)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"):
    global _logger_initialized
    if _logger_initialized:
        return logging.getLogger(LOGGER_NAME)

    try:
        colorama.init(autoreset=True)
    except Exception as e:
        # Restricted terminals can refuse the ANSI wrapper; colours are cosmetic.
        print(f"Colorama initialization failed: {e}. Proceeding without colors.")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(ColoredFormatter(log_format))
        logger.addHandler(stream_handler)
        logging.addLevelName(TRACE, "TRACE")
        logging.Logger.trace = _trace

    _logger_initialized = True
    return logger


def get_logger(name=LOGGER_NAME):
    """
    Retrieves the logger instance. Initializes it if not already done.
    """
    if not _logger_initialized:
        init_logger()
    return logging.getLogger(name)


def set_level(level):
    """Changes the level of the package logger, e.g. ``set_level(logging.DEBUG)``."""
    get_logger().setLevel(level)


if not _logger_initialized:
    init_logger()
