
VERSION = (0, 4, 2)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"


ARGV0 = "eptolite"
DESCRIPTION = "A small library for robust and maintainable scripts"

# Letters every script accepts unless it calls nostdopts()
STD_OPTS = "A:DF:vV"

DEFAULT_LOGFILE = "/dev/fd/2"
DEFAULT_VERSION = "N/A"

VERSION_ENV = "EPTOLITE_VERSION"
LOGFILE_ENV = "EPTOLITE_LOGFILE"
EXTRA_ARGS_ENV = "EPTOLITE_EXTRA_ARGS"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

TRACE_DATEFMT = "%Y-%m-%d: %H.%M.%S: %z"
DEBUG_DATEFMT = "%Y-%m-%d %H:%M:%S"
