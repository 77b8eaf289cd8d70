from . import (
    cli,
    const,
    errors,
    log,
    opts,
    script,
    shell,
    spec,
    utils,
    vt100,
)

from .errors import (
    Exit,
    Failure,
    MissingArgument,
    UnknownOption,
    UsageError,
    UsageViolation,
)
from .opts import OptionState, ParseResult, resetState, scan
from .script import (
    Script,
    appendlog,
    check,
    current,
    die,
    errmsg,
    funcdie,
    logcmd,
    logfile,
    logmsg,
    msg,
    msgdie,
    multilog,
    nostdopts,
    parse,
    run,
    setlog,
    setoptions,
    setsyntax,
    setversion,
    syndie,
    trace,
    tracecmd,
    vlogcmd,
    vlogmsg,
    vtrace,
    vtracecmd,
    vvlogcmd,
    vvlogmsg,
    vvtrace,
    vvtracecmd,
)
from .spec import Option, OptionSpec, deriveSpec


def main() -> int:
    return cli.main()
