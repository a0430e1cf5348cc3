import logging
import os
import time

log_dir_env = 'PROTOLDA_LOG_DIR'

_levels = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARN,
    'warning': logging.WARN,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


def formatted_logger(label, level=None, format=None, date_format=None, file_path=None):
    """ Return the logger `label` with a stream handler, and a file handler when
    `file_path` is given or the PROTOLDA_LOG_DIR environment variable names a directory.

    Calling it again for the same label updates the level and adds only missing handlers.
    """
    log = logging.getLogger(label)
    if level is None:
        level = logging.INFO
    elif not isinstance(level, int):
        if level.lower() not in _levels:
            raise ValueError('unknown log level: %s' % level)
        level = _levels[level.lower()]
    log.setLevel(level)

    if format is None:
        format = '%(asctime)s %(levelname)s:%(name)s:%(message)s'
    if date_format is None:
        date_format = '%Y-%m-%d %H:%M:%S'
    if file_path is None and os.environ.get(log_dir_env):
        log_dir = os.environ[log_dir_env]
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        file_path = '%s/%s.%s.log.txt' % (log_dir, label, time.strftime("%Y-%m-%d_%H-%M-%S", time.localtime()))

    formatter = logging.Formatter(format, date_format)
    if not any(type(handler) is logging.StreamHandler for handler in log.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        log.addHandler(stream_handler)
    if file_path is not None:
        file_path = os.path.abspath(file_path)
        if not any(getattr(handler, 'baseFilename', None) == file_path for handler in log.handlers):
            file_handler = logging.FileHandler(file_path)
            file_handler.setFormatter(formatter)
            log.addHandler(file_handler)
    return log
