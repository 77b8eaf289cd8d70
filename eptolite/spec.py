import re
import logging
import dataclasses as dt

from pathlib import Path

from typing import Iterator, Optional

from .scanner import Scan

_logger = logging.getLogger(__name__)

_FLAT_SPEC = re.compile(r"(?:[a-zA-Z]:?)*")


def isLetter(c: str) -> bool:
    return c.isascii() and c.isalpha()


@dt.dataclass
class Option:
    """
    A recognized option letter.

    Attributes:
        letter: The option letter (eg. "A" for "-A").
        takesValue: True if the option consumes a value.
    """

    letter: str
    takesValue: bool = False

    def flatten(self) -> str:
        return self.letter + (":" if self.takesValue else "")


@dt.dataclass
class OptionSpec:
    """
    The ordered set of option letters a script accepts.
    """

    options: list[Option] = dt.field(default_factory=list)

    @staticmethod
    def parse(s: str) -> "OptionSpec":
        """Builds a spec from its flat form, eg. "aVE:"."""
        spec = OptionSpec()
        sc = Scan(s.strip())
        while not sc.eof():
            letter = sc.curr()
            if not isLetter(letter):
                raise ValueError(f"Invalid option letter '{letter}' in '{s}'")
            sc.next()
            spec.add(letter, sc.skipStr(":"))
        return spec

    def add(self, letter: str, takesValue: bool = False):
        opt = self.lookup(letter)
        if opt is None:
            self.options.append(Option(letter, takesValue))
        elif takesValue:
            opt.takesValue = True

    def merge(self, other: "OptionSpec") -> "OptionSpec":
        res = OptionSpec([Option(o.letter, o.takesValue) for o in self.options])
        for opt in other:
            res.add(opt.letter, opt.takesValue)
        return res

    def lookup(self, letter: str) -> Optional[Option]:
        for opt in self.options:
            if opt.letter == letter:
                return opt
        return None

    def letters(self) -> list[str]:
        return [o.letter for o in self.options]

    def flatten(self) -> str:
        return "".join(o.flatten() for o in self.options)

    def __contains__(self, letter: str) -> bool:
        return self.lookup(letter) is not None

    def __iter__(self) -> Iterator[Option]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def __str__(self) -> str:
        return self.flatten()


def isFlatSpec(s: str) -> bool:
    """Checks if `s` is already in the flat letter/colon form."""
    return _FLAT_SPEC.fullmatch(s.strip()) is not None


def looksLikeSyntax(usage: str) -> bool:
    """Checks if the usage text starts with an option group, ie. lacks the program name."""
    return usage.lstrip().startswith("[")


def _deriveGroup(spec: OptionSpec, group: str):
    """
    Adds the letters of one bracketed group, given without its brackets.

    "-xyz" adds three flags, "-x value" adds x taking a value.
    """
    group = group.strip()

    if not group.startswith("-"):
        _logger.debug(f"Skipping non-option group [{group}]")
        return

    if not isLetter(group[1:2]):
        _logger.debug(f"Skipping unsupported group [{group}]")
        return

    words = group[1:].split(maxsplit=1)
    letters = [c for c in words[0] if isLetter(c)]

    if len(words) == 1:
        for letter in letters:
            spec.add(letter)
        return

    # Only "[-x value]" is meaningful, a longer cluster just gets its last
    # letter marked as the one taking the value.
    for letter in letters[:-1]:
        spec.add(letter)
    spec.add(letters[-1], True)


def deriveSpec(usage: str, progname: Optional[str] = None) -> OptionSpec:
    """
    Derives the option spec from a usage string.

    Example:
        "prog [-aDgvVX] [-A logfile] [-E errorlevel] file" gives "aDgvVXA:E:".

    Only bracketed groups that start with a dash followed by a letter count,
    anything after "--" is ignored. A string already in the flat form is
    taken as is, unless it is just `progname`.
    """
    if progname and usage.strip() in (progname, Path(progname).stem):
        return OptionSpec()

    if isFlatSpec(usage):
        return OptionSpec.parse(usage)

    s = Scan(usage)
    text = s.skipUntil("--")

    spec = OptionSpec()
    s = Scan(text)
    while not s.eof():
        if s.skipStr("["):
            _deriveGroup(spec, s.skipUntil("]"))
            s.skipStr("]")
        else:
            s.next()

    _logger.debug(f"Derived option spec '{spec}' from '{usage}'")
    return spec
