import os
import sys
import inspect
import linecache
import logging

from pathlib import Path
from types import FrameType
from typing import Any, Callable, NoReturn, Optional, cast

from . import const, errors, log, opts, shell, utils, vt100
from .spec import OptionSpec, deriveSpec, isFlatSpec, looksLikeSyntax

_logger = logging.getLogger(__name__)


def _join(args: tuple[Any, ...]) -> str:
    return " ".join(str(a) for a in args)


def _isMain(frame: FrameType) -> bool:
    return frame.f_globals.get("__name__") == "__main__"


class Script:
    """
    Process-wide state of the script using eptolite: its name, version,
    syntax banner, option spec, verbosity and log destination.

    Example:
        script.setsyntax("[-aDgvVX] [-A logfile] [-E errorlevel] [-F logfile] file")
        script.setversion("1.0")
        res = script.parse()
        if res.count("a") > 1:
            ...
    """

    progname: str
    version: str
    syntax: str
    stdopts: bool
    verbose: bool
    veryverbose: bool
    debug: int

    _options: Optional[OptionSpec]
    _derived: Optional[OptionSpec]
    _logfile: log.LogFile

    def __init__(self, progname: Optional[str] = None, logfile: Optional[str] = None):
        self.progname = progname or Path(sys.argv[0]).name or const.ARGV0
        self.version = os.environ.get(const.VERSION_ENV, const.DEFAULT_VERSION)
        self.syntax = self.progname
        self.stdopts = True
        self.verbose = False
        self.veryverbose = False
        self.debug = 0
        self._options = None
        self._derived = None
        self._logfile = log.LogFile(
            self.progname,
            logfile or os.environ.get(const.LOGFILE_ENV, const.DEFAULT_LOGFILE),
        )

    # --- Options ------------------------------------------------------------ #

    def setsyntax(self, usage: str):
        """
        Records the usage string, both as the banner printed with usage errors
        and as the source of the option spec.

        A usage starting with "[" gets the program name put in front of it.
        """
        if looksLikeSyntax(usage):
            self.syntax = f"{self.progname} {usage}"
        elif not isFlatSpec(usage):
            self.syntax = usage

        if self._options is None:
            self._derived = deriveSpec(usage, self.progname)

    def setprogname(self, progname: str):
        self.progname = progname
        self._logfile.rename(progname)

    def setversion(self, *version: Any):
        self.version = _join(version)

    def setoptions(self, spec: str):
        """Sets the flat spec (eg. "agXE:") directly, for when setsyntax gets it wrong."""
        self._options = OptionSpec.parse(spec)

    def nostdopts(self):
        self.stdopts = False

    def optionSpec(self) -> OptionSpec:
        spec = self._options if self._options is not None else self._derived
        if spec is None:
            spec = OptionSpec()
        if self.stdopts:
            spec = spec.merge(OptionSpec.parse(const.STD_OPTS))
        return spec

    def parse(self, args: Optional[list[str]] = None) -> opts.ParseResult:
        """
        Scans `args` (the command line by default) and handles the standard
        options. The positional arguments are in `remaining`.
        """
        if args is None:
            args = sys.argv[1:]

        result = opts.scan(self.optionSpec(), args)

        if self.stdopts:
            self.handleStandardOptions(result)

        return result

    def handleStandardOptions(self, result: opts.ParseResult):
        self.verbose = False
        self.veryverbose = False

        if result.present("v"):
            raise errors.Exit(f"Version: {self.version}")

        if result.present("D"):
            self.setDebug(result.count("D"))

        self.verbose = result.present("V")
        self.veryverbose = result.count("V") >= 2

        if result.present("F") and result.present("A"):
            raise errors.UsageViolation("You can't specify both -A and -F")

        if result.present("F"):
            self.setlog(cast(str, result.value("F")))

        if result.present("A"):
            self.appendlog(cast(str, result.value("A")))

    # --- Debugging ---------------------------------------------------------- #

    def setDebug(self, level: int):
        self.debug = level
        log.setupDebug()
        _logger.debug(f"Debug level {level}")

        if level >= 2:
            self._traceLines()

    def _echo(self, frame: FrameType, event: str, arg: Any):
        if not _isMain(frame):
            return None

        if event == "line":
            line = linecache.getline(frame.f_code.co_filename, frame.f_lineno)
            print(vt100.paint(f"+ {line.strip()}", vt100.FAINT, sys.stderr), file=sys.stderr)

        return self._echo

    def _traceLines(self):
        # Frames already running don't pick up sys.settrace() by themselves
        frame = inspect.currentframe()
        while frame is not None:
            if _isMain(frame):
                frame.f_trace = self._echo
            frame = frame.f_back
        sys.settrace(self._echo)

    # --- Messages ----------------------------------------------------------- #

    def msg(self, *args: Any):
        if args:
            print(f"{self.progname}:", _join(args))

    def errmsg(self, *args: Any):
        if args:
            vt100.error(self.progname, _join(args))

    def die(self, *args: Any) -> NoReturn:
        raise errors.Failure(_join(args))

    def funcdie(self, *args: Any) -> NoReturn:
        """Like die(), naming the function that called it."""
        frame = inspect.currentframe()
        caller = frame.f_back.f_code.co_name if frame and frame.f_back else "?"
        raise errors.Failure(f"{caller}: {_join(args)}")

    def syndie(self, *args: Any) -> NoReturn:
        raise errors.UsageViolation(_join(args))

    def msgdie(self, *args: Any) -> NoReturn:
        raise errors.Exit(_join(args))

    def check(self, cond: Any, *args: Any):
        """
        Dies with "Assertion failed: ..." unless `cond` holds.

        A callable `cond` is called with `args` first, eg.
        check(shell.grexist, "blah", path).
        """
        if callable(cond):
            if not cond(*args):
                self.die("Assertion failed:", cond.__name__, *args)
        elif not cond:
            self.die("Assertion failed:", *args)

    # --- Logs and traces ---------------------------------------------------- #

    def logfile(self) -> str:
        return self._logfile.path()

    def setlog(self, path: str):
        self._logfile.set(path)

    def appendlog(self, path: str):
        self._logfile.append(path)

    def logmsg(self, *args: Any):
        if args:
            self._logfile.write("%s", _join(args))

    def vlogmsg(self, *args: Any):
        if self.verbose:
            self.logmsg(*args)

    def vvlogmsg(self, *args: Any):
        if self.veryverbose:
            self.logmsg(*args)

    def multilog(self, *args: Any):
        self.msg(*args)
        self.logmsg(*args)

    def trace(self, *args: Any):
        self._logfile.write("trace:    %s: %s", utils.datetime(), _join(args))

    def vtrace(self, *args: Any):
        if self.verbose:
            self.trace(*args)

    def vvtrace(self, *args: Any):
        if self.veryverbose:
            self.trace(*args)

    def logcmd(self, *cmd: str) -> bool:
        self.logmsg(*cmd)
        return shell.exec(*cmd)

    def vlogcmd(self, *cmd: str) -> bool:
        return self.logcmd(*cmd) if self.verbose else True

    def vvlogcmd(self, *cmd: str) -> bool:
        return self.logcmd(*cmd) if self.veryverbose else True

    def tracecmd(self, *cmd: str) -> bool:
        self._logfile.write("tracecmd: %s: %s", utils.datetime(), _join(cmd))
        return shell.exec(*cmd)

    def vtracecmd(self, *cmd: str) -> bool:
        return self.tracecmd(*cmd) if self.verbose else True

    def vvtracecmd(self, *cmd: str) -> bool:
        return self.tracecmd(*cmd) if self.veryverbose else True

    # --- Top level ---------------------------------------------------------- #

    def report(self, e: errors.Exit) -> int:
        if e.code == const.EXIT_SUCCESS:
            if e.message:
                self.msg(e.message)
            return e.code

        _logger.debug(f"Exiting with code {e.code}: {e.message}")
        if e.message:
            self.errmsg(e.message)
        if e.showSyntax:
            print(self.syntax, file=sys.stderr)
        return e.code

    def run(self, fn: Callable[..., Any], *args: Any) -> int:
        """Calls `fn`, turning the exits it raises into messages and an exit code."""
        try:
            fn(*args)
            return const.EXIT_SUCCESS

        except errors.Exit as e:
            return self.report(e)

        except KeyboardInterrupt:
            print()
            return const.EXIT_FAILURE

        finally:
            self._logfile.flush()


_current = Script()


def current() -> Script:
    return _current


setsyntax = _current.setsyntax
setversion = _current.setversion
setoptions = _current.setoptions
nostdopts = _current.nostdopts
parse = _current.parse

msg = _current.msg
errmsg = _current.errmsg
die = _current.die
funcdie = _current.funcdie
syndie = _current.syndie
msgdie = _current.msgdie
check = _current.check

logfile = _current.logfile
setlog = _current.setlog
appendlog = _current.appendlog
logmsg = _current.logmsg
vlogmsg = _current.vlogmsg
vvlogmsg = _current.vvlogmsg
multilog = _current.multilog
trace = _current.trace
vtrace = _current.vtrace
vvtrace = _current.vvtrace
logcmd = _current.logcmd
vlogcmd = _current.vlogcmd
vvlogcmd = _current.vvlogcmd
tracecmd = _current.tracecmd
vtracecmd = _current.vtracecmd
vvtracecmd = _current.vvtracecmd


def run(fn: Callable[..., Any], *args: Any) -> NoReturn:
    sys.exit(_current.run(fn, *args))
