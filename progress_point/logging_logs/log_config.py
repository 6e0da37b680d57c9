"""
Logging configuration for Progress Point.
Centralizes all logging setup; modules just call logging.getLogger(__name__).
"""
import os
import time
import logging
from logging.handlers import RotatingFileHandler
from progress_point.config.settings import LogConfig

ROOT_LOGGER_NAME = "progress_point"
LOG_FILE_NAME = "progress_point.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Filter to prevent duplicate log messages
class DuplicateFilter(logging.Filter):
    def __init__(self, name=''):
        super().__init__(name)
        self.last_log = None
        self.last_time = 0

    def filter(self, record):
        current_log = (record.msg, record.args)
        current_time = time.time()

        # Same message within 0.1 seconds is dropped
        if current_log == self.last_log and current_time - self.last_time < 0.1:
            return False

        self.last_log = current_log
        self.last_time = current_time
        return True

def setup_logging(log_dir=None, level=None, log_to_file=None):
    """
    Set up the package logger with console and rotating file handlers.

    Args:
        log_dir: Directory for the log file (defaults to LOG_DIR)
        level: Log level name (defaults to LOG_LEVEL)
        log_to_file: Whether to attach the file handler (defaults to LOG_TO_FILE)

    Returns:
        The configured package logger
    """
    log_dir = log_dir or LogConfig.LOG_DIR
    level = level or LogConfig.LOG_LEVEL
    log_to_file = LogConfig.LOG_TO_FILE if log_to_file is None else log_to_file

    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Only configure if handlers haven't been added yet
    if not logger.handlers:
        logger.setLevel(level)
        logger.addFilter(DuplicateFilter())
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_to_file:
            try:
                os.makedirs(log_dir, exist_ok=True)
                # delay=True avoids opening the file until the first record
                file_handler = RotatingFileHandler(
                    os.path.join(log_dir, LOG_FILE_NAME),
                    maxBytes=MAX_LOG_SIZE,
                    backupCount=BACKUP_COUNT,
                    delay=True
                )
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)
            except OSError as e:
                logger.warning(f"Could not set up file logging: {str(e)}")

    return logger
