"""Named character sets and the `CharsetSpec` builder used to assemble alphabets.

Atomic charsets and their command-line abbreviations:

  L  alpha_lower   a-z
  U  alpha_upper   A-Z
  N  numeric       0-9
  M  mathops       + - * / = < >
  P  prose         . : , ; ! ? space ' "
  D  delim         ( ) [ ] { }
  X  misc_special  # @ $ % & | \\ ~ ^ _ `

Compound charsets:

  A  alpha         alpha_lower + alpha_upper
  S  special       mathops + prose + delim + misc_special
"""
from __future__ import annotations

from dataclasses import dataclass, field
import string
from typing import Dict, List, Set, Tuple, Union

from yapg.core.error_dialect import InvalidInput


CHARSET_ALPHA_LOWER = string.ascii_lowercase
CHARSET_ALPHA_UPPER = string.ascii_uppercase
CHARSET_NUMERIC = string.digits
CHARSET_PROSE = ".:,;!? '\""
CHARSET_MATHOPS = "+-*/=<>"
CHARSET_DELIM = "()[]{}"
CHARSET_MISC_SPECIAL = "#@$%&|\\~^_`"

# 9 + 7 + 6 + 11 = 33 specials; with alphanumerics that covers printable ASCII.
ATOMIC_CHARSETS: Dict[str, str] = {
    "alpha_lower": CHARSET_ALPHA_LOWER,
    "alpha_upper": CHARSET_ALPHA_UPPER,
    "numeric": CHARSET_NUMERIC,
    "mathops": CHARSET_MATHOPS,
    "prose": CHARSET_PROSE,
    "delim": CHARSET_DELIM,
    "misc_special": CHARSET_MISC_SPECIAL,
}


@dataclass(frozen=True)
class CharsetName:
    name: str
    letter: str
    atoms: Tuple[str, ...]

    @classmethod
    def from_abbreviation(cls, letter: str) -> "CharsetName":
        found = CHARSET_NAMES.get(letter)
        if found is None:
            raise InvalidInput(f"Invalid character set abbreviation: {letter}")
        return found


ALPHA_LOWER = CharsetName("alpha_lower", "L", ("alpha_lower",))
ALPHA_UPPER = CharsetName("alpha_upper", "U", ("alpha_upper",))
NUMERIC = CharsetName("numeric", "N", ("numeric",))
MATHOPS = CharsetName("mathops", "M", ("mathops",))
PROSE = CharsetName("prose", "P", ("prose",))
DELIM = CharsetName("delim", "D", ("delim",))
MISC_SPECIAL = CharsetName("misc_special", "X", ("misc_special",))
ALPHA = CharsetName("alpha", "A", ("alpha_lower", "alpha_upper"))
SPECIAL = CharsetName("special", "S", ("mathops", "prose", "delim", "misc_special"))

CHARSET_NAMES: Dict[str, CharsetName] = {
    c.letter: c
    for c in (ALPHA_LOWER, ALPHA_UPPER, NUMERIC, MATHOPS, PROSE, DELIM, MISC_SPECIAL, ALPHA, SPECIAL)
}


@dataclass
class CharsetSpec:
    """Toggles for each atomic charset plus extra characters.

    >>> spec = CharsetSpec.empty()
    >>> spec += NUMERIC
    >>> spec += "+-*"
    >>> spec += "/"
    >>> spec.construct()
    '*+-/0123456789'
    """

    enabled: Set[str] = field(default_factory=set)
    additions: List[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "CharsetSpec":
        return cls()

    @classmethod
    def std64(cls) -> "CharsetSpec":
        """Alphanumerics plus `-` and `_`; safe for most password policies."""
        spec = cls()
        spec.add(ALPHA)
        spec.add(NUMERIC)
        spec.add_chars("-_")
        return spec

    @classmethod
    def printable_ascii(cls) -> "CharsetSpec":
        spec = cls()
        spec.add(ALPHA)
        spec.add(NUMERIC)
        spec.add(SPECIAL)
        return spec

    @classmethod
    def parse(cls, text: str) -> "CharsetSpec":
        spec = cls()
        for letter in text:
            spec.add(CharsetName.from_abbreviation(letter))
        return spec

    def add(self, name: CharsetName) -> None:
        self.enabled.update(name.atoms)

    def remove(self, name: CharsetName) -> None:
        self.enabled.difference_update(name.atoms)

    def add_chars(self, chars: str) -> None:
        self.additions.extend(chars)

    def construct(self) -> str:
        """Sorted, deduplicated alphabet."""
        chars: Set[str] = set(self.additions)
        for atom in self.enabled:
            chars.update(ATOMIC_CHARSETS[atom])
        return "".join(sorted(chars))

    def __iadd__(self, other: Union[CharsetName, str]) -> "CharsetSpec":
        if isinstance(other, CharsetName):
            self.add(other)
        else:
            self.add_chars(other)
        return self

    def __isub__(self, other: CharsetName) -> "CharsetSpec":
        if not isinstance(other, CharsetName):
            return NotImplemented
        self.remove(other)
        return self
