import logging
import os
from library_system.config import logger_config

class SingletonLogger:
    """
    Holds the one 'library_system' logger of the process

    The logger writes to stderr, and also to LOG_FILE_PATH when one is
    configured. Handlers are attached on the first get_instance() call only.
    """
    _logger = None

    @classmethod
    def _file_handler(cls, path, formatter):
        log_dir = os.path.dirname(path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(path)
        file_handler.setFormatter(formatter)
        return file_handler

    @classmethod
    def get_instance(cls):
        if not cls._logger:
            logger = logging.getLogger('library_system')
            logger.setLevel(logger_config.LOG_LEVEL)
            formatter = logging.Formatter(logger_config.LOG_FORMAT)

            # stdout carries the library output only
            console = logging.StreamHandler()
            console.setFormatter(formatter)
            logger.addHandler(console)

            if logger_config.LOG_FILE_PATH:
                logger.addHandler(cls._file_handler(logger_config.LOG_FILE_PATH, formatter))
            cls._logger = logger

        return cls._logger

def setup_logger():
    return SingletonLogger.get_instance()
