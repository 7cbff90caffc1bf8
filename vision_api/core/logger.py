import logging
import os
import sys

_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
_configured = False


def _configure_root():
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root = logging.getLogger('vision_api')
    root.addHandler(handler)
    root.setLevel(os.getenv('LOG_LEVEL', 'INFO').upper())
    root.propagate = False
    _configured = True


class SimpleLogger:
    """Thin wrapper around the stdlib logger, one per module."""

    def __init__(self, name: str):
        _configure_root()
        if not name.startswith('vision_api'):
            name = f'vision_api.{name}'
        self.logger = logging.getLogger(name)

    def debug(self, msg: str, *args, **kwargs):
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self.logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        self.logger.exception(msg, *args, **kwargs)
