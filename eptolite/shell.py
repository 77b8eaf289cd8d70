import os
import re
import signal
import logging
import subprocess

from pathlib import Path
from typing import Optional

from .errors import Failure

_logger = logging.getLogger(__name__)


class ShellException(Failure):
    def __init__(self, message: str, status: int):
        super().__init__(message)
        self.status = status


def exec(*args: str, quiet: bool = False, cwd: Optional[str] = None) -> bool:
    _logger.debug(f"Executing {args}")
    cmdName = Path(args[0]).name

    try:
        proc = subprocess.run(
            args,
            cwd=cwd,
            stdout=None if not quiet else subprocess.PIPE,
            stderr=None if not quiet else subprocess.PIPE,
        )

        if proc.stdout:
            _logger.debug(proc.stdout.decode("utf-8"))

        if proc.stderr:
            _logger.debug(proc.stderr.decode("utf-8"))

    except FileNotFoundError:
        if cwd and not os.path.exists(cwd):
            raise Failure(f"{cwd}: No such file or directory")
        else:
            raise Failure(f"{args[0]}: Command not found")

    except KeyboardInterrupt:
        raise Failure(f"{cmdName}: Interrupted")

    if proc.returncode == -signal.SIGSEGV:
        raise ShellException(f"{cmdName}: Segmentation fault", -signal.SIGSEGV)

    if proc.returncode != 0:
        raise ShellException(
            f"{cmdName}: Process exited with code {proc.returncode}", proc.returncode
        )

    return True


def grexist(pattern: str, *paths: str) -> bool:
    """
    Checks if `pattern` matches a line in any of `paths`, like a quiet grep.
    Unreadable files count as no match.
    """
    regex = re.compile(pattern)
    for path in paths:
        try:
            with open(path, "r", errors="replace") as f:
                if any(regex.search(line) for line in f):
                    return True
        except OSError as e:
            _logger.debug(f"grexist: skipping {path}: {e}")
    return False


def abspath(path: str) -> str:
    if os.path.isabs(path.strip()):
        return path
    return os.path.join(os.getcwd(), path)
