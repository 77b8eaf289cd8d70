from . import const


class Exit(Exception):
    """
    Ends the script once it reaches the top-level handler.

    The plain class is a deliberate, successful exit (eg. after printing the
    version banner); subclasses are the fatal paths.
    """

    code: int = const.EXIT_SUCCESS
    showSyntax: bool = False

    def __init__(self, message: str = "", code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class Failure(Exit):
    code = const.EXIT_FAILURE


class UsageError(Exit):
    code = const.EXIT_USAGE
    showSyntax = True


class UsageViolation(UsageError):
    pass


class UnknownOption(UsageError):
    def __init__(self, letter: str):
        super().__init__(f"Illegal option: -{letter}")
        self.letter = letter


class MissingArgument(UsageError):
    def __init__(self, letter: str):
        super().__init__(f"Option requires an argument: -{letter}")
        self.letter = letter
