import os
import sys
import shlex
import logging
import dataclasses as dt

from typing import Callable, Optional

from . import const, opts, utils, vt100
from .errors import UsageError
from .script import Script
from .spec import OptionSpec, deriveSpec

_logger = logging.getLogger(__name__)

SYNTAX = "[-DvV] [-A logfile] [-F logfile] [-n progname] command [args...]"


@dt.dataclass
class Command:
    """
    A subcommand of the eptolite command.
    """

    name: str
    syntax: str
    description: str
    callable: Callable[[Script, list[str]], Optional[int]]


_commands: dict[str, Command] = {}


def command(name: str, syntax: str, description: str = "") -> Callable:
    """
    Decorator for defining a command.

    Args:
        name: What the command is called on the command line.
        syntax: The arguments it takes, for the usage message.
        description: A description of the command.
    """

    def wrap(fn: Callable):
        _logger.debug(f"Registering command '{name}'")
        if name in _commands:
            raise ValueError(f"Command '{name}' is already defined")

        _commands[name] = Command(name, syntax, description, fn)
        return fn

    return wrap


def usage() -> str:
    res = f"{const.ARGV0} {SYNTAX}\n\nCommands:"
    for cmd in _commands.values():
        res += "\n" + vt100.indent(f"{cmd.name} {cmd.syntax}")
        res += "\n" + vt100.indent(cmd.description, 8)
    return res


def shellExports(result: opts.ParseResult) -> list[str]:
    """
    Renders a scan as shell assignments, to be eval'ed by a shell script:
    opt_<l>, opt_<l>_count and, for options taking a value, opt_<l>_arg,
    opt_<l>_all and the opt_<l>_argv array. The last line sets the
    positional arguments to what is left.
    """
    res: list[str] = []
    for opt in result.spec:
        state = result[opt.letter]
        name = f"opt_{opt.letter}"
        res.append(f"{name}={'true' if state.present else ''}")
        res.append(f"{name}_count={state.count}")
        if opt.takesValue:
            res.append(f"{name}_arg={shlex.quote(state.lastValue or '')}")
            res.append(f"{name}_all={shlex.quote(state.allValues)}")
            argv = " ".join(shlex.quote(v) for v in state.valueHistory)
            res.append(f"{name}_argv=({argv})")
    res.append(" ".join(["set", "--", *(shlex.quote(a) for a in result.remaining)]))
    return res


# --- Commands --------------------------------------------------------------- #


@command("spec", "USAGE", "Print the option spec derived from USAGE")
def _(script: Script, args: list[str]):
    if len(args) != 1:
        script.syndie(f"Expected 1 argument, got {len(args)}")

    print(deriveSpec(args[0]).flatten())


@command(
    "parse",
    "[-N] [-r version] USAGE [args...]",
    "Print shell assignments for the options in args, -N leaves out the standard options",
)
def _(script: Script, args: list[str]):
    res = opts.scan(OptionSpec.parse("Nr:"), args)
    rest = res.remaining
    if len(rest) > 0 and rest[0] == "--":
        rest = rest[1:]

    if len(rest) == 0:
        script.syndie("Expected a usage string")

    usage, *argv = rest
    spec = deriveSpec(usage)
    if not res.present("N"):
        spec = spec.merge(OptionSpec.parse(const.STD_OPTS))

    try:
        scanned = opts.scan(spec, argv)
    except UsageError:
        # Report against the usage of the calling script, not ours
        script.setsyntax(usage)
        raise

    if not res.present("N"):
        if scanned.present("v"):
            default = os.environ.get(const.VERSION_ENV, const.DEFAULT_VERSION)
            version = res.value("r", default)
            print(f"echo {shlex.quote(f'{script.progname}: Version: {version}')}")
            print(f"exit {const.EXIT_SUCCESS}")
            return

        if scanned.present("A") and scanned.present("F"):
            script.setsyntax(usage)
            script.syndie("You can't specify both -A and -F")

    for line in shellExports(scanned):
        print(line)


@command("isint", "VALUE...", "Exit with 0 if every VALUE is an integer, 1 otherwise")
def _(script: Script, args: list[str]) -> int:
    if len(args) == 0:
        script.syndie("Expected at least 1 argument")

    if all(utils.isint(a) for a in args):
        return const.EXIT_SUCCESS
    return const.EXIT_FAILURE


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
        argv = (extra.split(" ") if extra else []) + sys.argv[1:]

    script = Script(const.ARGV0)
    script.setsyntax(SYNTAX)
    script.syntax = usage()
    script.setversion(const.VERSION_STR)

    status = const.EXIT_SUCCESS

    def _():
        nonlocal status
        res = script.parse(argv)

        name = res.value("n")
        if name:
            script.setprogname(name)

        if len(res.remaining) == 0:
            script.syndie("Expected a command")

        cmd, *args = res.remaining
        if cmd not in _commands:
            script.syndie(f"Unknown command '{cmd}'")

        script.vtrace("Running", cmd, *args)
        status = _commands[cmd].callable(script, args) or const.EXIT_SUCCESS

    code = script.run(_)
    if code != const.EXIT_SUCCESS:
        return code
    return status
