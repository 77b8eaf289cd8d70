import os
import sys
import logging

from . import const, vt100

_logger = logging.getLogger(__name__)


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever `sys.stderr` is at the time of the record."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def isDefault(path: str) -> bool:
    return path in (const.DEFAULT_LOGFILE, "-")


class LogFile:
    """
    The current destination of a script's logs and traces.

    Records go through a private logger with a single handler, which is
    swapped (and closed, flushing it) whenever the destination changes.
    """

    _path: str
    _logger: logging.Logger
    _handler: logging.Handler

    def __init__(self, progname: str, path: str = const.DEFAULT_LOGFILE):
        self._logger = logging.Logger(f"eptolite.logfile.{progname}")
        self._logger.propagate = False
        self._logger.setLevel(logging.DEBUG)
        self._formatter = logging.Formatter(f"{progname}: %(message)s")
        self._handler = self._open(path, append=True)
        self._logger.addHandler(self._handler)
        self._path = path

    def _open(self, path: str, append: bool) -> logging.Handler:
        handler: logging.Handler
        if isDefault(path):
            handler = _StderrHandler()
        else:
            if not append and os.path.isfile(path):
                _logger.debug(f"Truncating log file {path}")
                open(path, "w").close()
            handler = logging.FileHandler(path, mode="a", delay=True)
        handler.setFormatter(self._formatter)
        return handler

    def _switch(self, path: str, append: bool):
        _logger.debug(f"Log destination is now {path}")
        handler = self._open(path, append)
        self._logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = handler
        self._logger.addHandler(handler)
        self._path = path

    def rename(self, progname: str):
        self._formatter = logging.Formatter(f"{progname}: %(message)s")
        self._handler.setFormatter(self._formatter)

    def path(self) -> str:
        return self._path

    def set(self, path: str):
        """Uses `path` from now on, truncating it if it is an existing file."""
        self._switch(path, append=False)

    def append(self, path: str):
        """Uses `path` from now on, keeping what it already holds."""
        self._switch(path, append=True)

    def write(self, fmt: str, *args):
        self._logger.info(fmt, *args)

    def flush(self):
        self._handler.flush()

    def close(self):
        self._logger.removeHandler(self._handler)
        self._handler.close()


def setupDebug():
    logging.basicConfig(
        level=logging.DEBUG,
        format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
        datefmt=const.DEBUG_DATEFMT,
    )
