import logging
import dataclasses as dt

from typing import Optional

from .errors import MissingArgument, UnknownOption
from .scanner import Scan
from .spec import OptionSpec

_logger = logging.getLogger(__name__)


@dt.dataclass
class OptionState:
    """
    What the scanner saw of one option letter.

    Attributes:
        present: True if the option appeared at least once.
        count: How many times the option appeared.
        lastValue: The value of the most recent occurrence, for value-taking options.
        allValues: All values in order, space-joined.
        valueHistory: All values in order, one entry per occurrence.
    """

    present: bool = False
    count: int = 0
    lastValue: Optional[str] = None
    allValues: str = ""
    valueHistory: list[str] = dt.field(default_factory=list)

    def record(self, value: Optional[str] = None):
        self.present = True
        self.count += 1

        if value is None:
            return

        self.lastValue = value
        self.valueHistory.append(value)
        self.allValues = " ".join(self.valueHistory)


@dt.dataclass
class ParseResult:
    spec: OptionSpec
    states: dict[str, OptionState]
    remaining: list[str]

    def __getitem__(self, letter: str) -> OptionState:
        return self.states[letter]

    def present(self, letter: str) -> bool:
        return letter in self.states and self.states[letter].present

    def count(self, letter: str) -> int:
        if letter not in self.states:
            return 0
        return self.states[letter].count

    def value(self, letter: str, default: Optional[str] = None) -> Optional[str]:
        state = self.states.get(letter)
        if state is None or state.lastValue is None:
            return default
        return state.lastValue

    def values(self, letter: str) -> list[str]:
        if letter not in self.states:
            return []
        return list(self.states[letter].valueHistory)


def resetState(
    spec: OptionSpec, states: Optional[dict[str, OptionState]] = None
) -> dict[str, OptionState]:
    """
    Gives every letter of `spec` an empty state.

    When `states` is given it is cleared and refilled in place, so that
    nothing from an earlier scan survives.
    """
    if states is None:
        states = {}

    states.clear()
    for letter in spec.letters():
        states[letter] = OptionState()
    return states


def scan(spec: OptionSpec, args: list[str]) -> ParseResult:
    """
    Consumes the leading options of `args`.

    Scanning stops at the first token that is not an option, or at a lone
    "-" or "--"; that token and everything after it is left in `remaining`.

    Raises:
        UnknownOption: A dash is followed by a character that is not in `spec`.
        MissingArgument: A value-taking option is last, with nothing attached.
    """
    states = resetState(spec)
    stack = args[:]

    while len(stack) > 0:
        arg = stack[0]
        if not arg.startswith("-") or arg in ("-", "--"):
            break
        stack.pop(0)

        s = Scan(arg, 1)
        while not s.eof():
            letter = s.curr()
            s.next()

            opt = spec.lookup(letter)
            if opt is None:
                raise UnknownOption(letter)

            if not opt.takesValue:
                states[letter].record()
                continue

            value = s.rest()
            if not value:
                if len(stack) == 0:
                    raise MissingArgument(letter)
                value = stack.pop(0)

            states[letter].record(value)

    _logger.debug(f"Scanned {args} against '{spec}', remaining {stack}")
    return ParseResult(spec, states, stack)
